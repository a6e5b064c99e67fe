"""API test fixtures — FastAPI test client over the per-test database.

Invariants:
    - get_db dependency overridden to use the test engine
    - app.state.db points at the test engine for routes that use the manager directly

Design Decisions:
    - Lifespan not run by ASGITransport: fixtures wire app.state by hand
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models.contact import Contact
from app.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = app.state.db
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db = original_manager


@pytest.fixture
async def seed_contacts(test_db):
    """Insert three contacts directly into the test DB."""
    contacts = [
        Contact(first_name="Ada", last_name="Lovelace", phone="5551234"),
        Contact(first_name="Alan", last_name="Turing", phone="5555678"),
        Contact(first_name="Grace", last_name="Hopper", phone="5559012"),
    ]
    test_db.add_all(contacts)
    await test_db.commit()
    for contact in contacts:
        await test_db.refresh(contact)
    return contacts
