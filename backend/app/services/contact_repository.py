"""Contact Repository — async data-access layer over the `contacts` table.

Invariants:
    - Bound to one AsyncSession per request (never shared across requests)
    - Every write commits immediately; a failed call rolls back before raising
    - SQLAlchemy exceptions never escape: they surface as ContactsAPIError subclasses
    - find_by_primary_key returns None for a missing row; get_or_404 raises

Design Decisions:
    - Routes stay thin and delegate here
    - No ORDER BY in find_all: store-native order is the documented contract
    - destroy is a hard delete; there is no soft-delete column to honour
"""

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ContactId, StoreOperation
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.infrastructure.database import translate_db_errors
from app.models.contact import Contact

logger = logging.getLogger(__name__)


class ContactRepository:
    """CRUD operations for Contact rows."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> Sequence[Contact]:
        async with translate_db_errors(self._db, StoreOperation.FIND_ALL.value):
            result = await self._db.execute(select(Contact))
            return result.scalars().all()

    async def find_by_primary_key(self, contact_id: ContactId) -> Contact | None:
        async with translate_db_errors(
            self._db, StoreOperation.FIND_BY_PRIMARY_KEY.value, contact_id,
        ):
            return await self._db.get(Contact, contact_id)

    async def get_or_404(self, contact_id: ContactId) -> Contact:
        """Look up a contact or raise ResourceNotFoundError (404)."""
        contact = await self.find_by_primary_key(contact_id)
        if contact is None:
            raise ResourceNotFoundError(
                "Contact", contact_id,
                ErrorContext(
                    contact_id=contact_id,
                    operation=StoreOperation.FIND_BY_PRIMARY_KEY.value,
                ),
            )
        return contact

    async def create(
        self, first_name: str, last_name: str, phone: str,
    ) -> Contact:
        contact = Contact(
            first_name=first_name, last_name=last_name, phone=phone,
        )
        async with translate_db_errors(self._db, StoreOperation.CREATE.value):
            self._db.add(contact)
            await self._db.commit()
            await self._db.refresh(contact)
        logger.info(
            f"Contact {contact.id} created", extra={"contact_id": contact.id},
        )
        return contact

    async def update(
        self, contact: Contact, first_name: str, last_name: str, phone: str,
    ) -> Contact:
        """Overwrite all three fields (no partial patch) and persist."""
        contact_id = contact.id
        async with translate_db_errors(
            self._db, StoreOperation.UPDATE.value, contact_id,
        ):
            contact.first_name = first_name
            contact.last_name = last_name
            contact.phone = phone
            await self._db.commit()
            await self._db.refresh(contact)
        logger.info(
            f"Contact {contact_id} updated", extra={"contact_id": contact_id},
        )
        return contact

    async def destroy(self, contact: Contact) -> ContactId:
        """Permanently remove the row. Returns the deleted id."""
        contact_id = ContactId(contact.id)
        async with translate_db_errors(
            self._db, StoreOperation.DESTROY.value, contact_id,
        ):
            await self._db.delete(contact)
            await self._db.commit()
        logger.info(
            f"Contact {contact_id} deleted", extra={"contact_id": contact_id},
        )
        return contact_id
