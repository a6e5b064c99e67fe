"""Contact Schemas — Pydantic models for the contact API boundary.

Invariants:
    - Wire format is camelCase (firstName, lastName, phone); Python attributes are snake_case
    - All three fields are required strings; presence and type are the only checks
    - ContactResponse exposes exactly id, firstName, lastName, phone

Design Decisions:
    - alias_generator=to_camel with populate_by_name: accepts both spellings on input
    - from_attributes on the response: built straight from the ORM row
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContactBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    phone: str


class ContactWrite(ContactBase):
    """Request body for POST and PUT. PUT overwrites all three fields."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {"firstName": "Sultan", "lastName": "Mehmed-II", "phone": "1234512345"},
            ],
        },
    )


class ContactResponse(ContactBase):
    """A stored contact including its store-assigned id."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int


class ContactDeleted(BaseModel):
    """Confirmation body for DELETE."""
    id: int
