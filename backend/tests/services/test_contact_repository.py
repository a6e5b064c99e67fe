"""Contact Repository — verifies ORM operations and store error translation.

Invariants:
    - create assigns an integer id and persists exactly the three fields
    - find_by_primary_key returns None for unknown ids; get_or_404 raises
    - update overwrites every field; destroy hard-deletes the row
    - IntegrityError → ConstraintViolationError, other SQLAlchemy errors → DatabaseError,
      and the session is rolled back in both cases
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, DBAPIError

from app.core.domain_types import ContactId
from app.core.errors import (
    ConstraintViolationError, DatabaseError, ResourceNotFoundError,
)
from app.models.contact import Contact
from app.services.contact_repository import ContactRepository


async def test_create_assigns_id(test_db):
    repo = ContactRepository(test_db)

    contact = await repo.create("Ada", "Lovelace", "5551234")

    assert contact.id == 1
    assert (contact.first_name, contact.last_name, contact.phone) == (
        "Ada", "Lovelace", "5551234",
    )
    assert contact.created_at is not None


async def test_find_all_returns_every_row(test_db):
    repo = ContactRepository(test_db)
    await repo.create("Ada", "Lovelace", "1")
    await repo.create("Alan", "Turing", "2")

    contacts = await repo.find_all()

    assert sorted(c.first_name for c in contacts) == ["Ada", "Alan"]


async def test_find_by_primary_key_missing_returns_none(test_db):
    repo = ContactRepository(test_db)
    assert await repo.find_by_primary_key(ContactId(42)) is None


async def test_get_or_404_raises_not_found(test_db):
    repo = ContactRepository(test_db)

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await repo.get_or_404(ContactId(42))

    assert exc_info.value.http_status == 404
    assert exc_info.value.context.contact_id == 42


async def test_update_overwrites_all_fields(test_db):
    repo = ContactRepository(test_db)
    contact = await repo.create("Ada", "Lovelace", "1")

    updated = await repo.update(contact, "Augusta", "King", "2")

    assert updated.id == contact.id
    reloaded = await repo.find_by_primary_key(ContactId(contact.id))
    assert (reloaded.first_name, reloaded.last_name, reloaded.phone) == (
        "Augusta", "King", "2",
    )


async def test_destroy_hard_deletes(test_db):
    repo = ContactRepository(test_db)
    keep = await repo.create("Alan", "Turing", "2")
    gone = await repo.create("Ada", "Lovelace", "1")

    deleted_id = await repo.destroy(gone)

    assert deleted_id == gone.id
    rows = (await test_db.execute(select(Contact))).scalars().all()
    assert [r.id for r in rows] == [keep.id]


async def test_not_null_violation_becomes_constraint_error(test_db):
    repo = ContactRepository(test_db)

    with pytest.raises(ConstraintViolationError) as exc_info:
        await repo.create(None, "Lovelace", "1")

    assert exc_info.value.http_status == 400
    assert exc_info.value.operation == "create"
    # session still usable after rollback
    assert await repo.find_all() == []


async def test_integrity_error_rolls_back():
    db = AsyncMock()
    db.add = MagicMock()
    db.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE"))
    repo = ContactRepository(db)

    with pytest.raises(ConstraintViolationError):
        await repo.create("Ada", "Lovelace", "1")

    db.rollback.assert_awaited_once()


async def test_driver_error_becomes_database_error():
    db = AsyncMock()
    db.commit.side_effect = DBAPIError("UPDATE", {}, Exception("conn reset"))
    contact = Contact(id=7, first_name="Ada", last_name="Lovelace", phone="1")
    repo = ContactRepository(db)

    with pytest.raises(DatabaseError) as exc_info:
        await repo.update(contact, "A", "B", "C")

    assert exc_info.value.http_status == 500
    assert exc_info.value.context.contact_id == 7
    assert exc_info.value.context.operation == "update"
    db.rollback.assert_awaited_once()
