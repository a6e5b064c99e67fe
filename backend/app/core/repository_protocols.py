"""Boundary Protocols — contracts between the HTTP layer and the data-access layer.

Invariants:
    - Routes depend on ContactStore, never on SQLAlchemy directly
    - Implementations provided via dependency injection (api/routes/contacts.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from collections.abc import Sequence
from typing import Protocol

from app.core.domain_types import ContactId


class ContactLike(Protocol):
    """Structural contract for contact rows handed back by a ContactStore."""
    id: int
    first_name: str
    last_name: str
    phone: str


class ContactStore(Protocol):
    """Contract for contact persistence — implemented by ContactRepository."""
    async def find_all(self) -> Sequence[ContactLike]: ...
    async def find_by_primary_key(self, contact_id: ContactId) -> ContactLike | None: ...
    async def get_or_404(self, contact_id: ContactId) -> ContactLike: ...
    async def create(self, first_name: str, last_name: str, phone: str) -> ContactLike: ...
    async def update(
        self, contact: ContactLike, first_name: str, last_name: str, phone: str,
    ) -> ContactLike: ...
    async def destroy(self, contact: ContactLike) -> ContactId: ...
