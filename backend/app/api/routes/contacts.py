"""Contact Routes — CRUD endpoints for the contact resource.

Invariants:
    - Handlers only parse input, call ContactRepository, and shape the response
    - Path ids are coerced to int by FastAPI; a non-integer id is a 400 validation error
    - Path ids above the 64-bit INTEGER range are rejected with 400 before any query runs
    - PUT and DELETE on an unknown id return 404 (never touch a missing row)
    - Every success is 200 with a JSON body

Design Decisions:
    - Repository injected per request through Depends(get_db): no module-level store handle
    - Errors raised as ContactsAPIError and rendered by the global handlers (api/error_handlers.py)
"""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import MAX_CONTACT_ID, ContactId
from app.core.repository_protocols import ContactStore
from app.infrastructure.database import get_db
from app.schemas.contact import ContactDeleted, ContactResponse, ContactWrite
from app.services.contact_repository import ContactRepository

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


def get_contact_repository(
    db: AsyncSession = Depends(get_db),
) -> ContactStore:
    return ContactRepository(db)


@router.get(
    "", response_model=list[ContactResponse],
    status_code=status.HTTP_200_OK,
    summary="List all contacts",
)
async def list_contacts(
    repo: ContactStore = Depends(get_contact_repository),
):
    """Use to request all contacts, in the order the store returns them."""
    return await repo.find_all()


@router.post(
    "", response_model=ContactResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a contact",
    responses={400: {"description": "Invalid body or constraint violation"}},
)
async def create_contact(
    body: ContactWrite,
    repo: ContactStore = Depends(get_contact_repository),
):
    """Creates a new contact. The store assigns the id."""
    return await repo.create(body.first_name, body.last_name, body.phone)


@router.put(
    "/{contact_id}", response_model=ContactResponse,
    status_code=status.HTTP_200_OK,
    summary="Replace a contact's fields",
    responses={
        400: {"description": "Invalid ID or body supplied"},
        404: {"description": "Contact not found"},
    },
)
async def update_contact(
    body: ContactWrite,
    contact_id: int = Path(le=MAX_CONTACT_ID),
    repo: ContactStore = Depends(get_contact_repository),
):
    """Overwrites firstName, lastName and phone of an existing contact."""
    contact = await repo.get_or_404(ContactId(contact_id))
    return await repo.update(
        contact, body.first_name, body.last_name, body.phone,
    )


@router.delete(
    "/{contact_id}", response_model=ContactDeleted,
    status_code=status.HTTP_200_OK,
    summary="Delete a contact",
    responses={
        400: {"description": "Invalid ID supplied"},
        404: {"description": "Contact not found"},
    },
)
async def delete_contact(
    contact_id: int = Path(le=MAX_CONTACT_ID),
    repo: ContactStore = Depends(get_contact_repository),
):
    """Deletes a contact permanently (hard delete)."""
    contact = await repo.get_or_404(ContactId(contact_id))
    deleted_id = await repo.destroy(contact)
    return ContactDeleted(id=deleted_id)
