"""Static files — optional mount behind the API routes."""

from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.infrastructure.database import get_db
from app.main import create_app


async def test_static_dir_served_and_api_routes_win(tmp_path, test_session_factory):
    (tmp_path / "index.html").write_text("<h1>contacts</h1>")
    (tmp_path / "api").mkdir()
    (tmp_path / "api" / "contacts").write_text("shadowed")
    app = create_app(Settings(_env_file=None, static_dir=str(tmp_path)))

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        index = await c.get("/index.html")
        root = await c.get("/")
        contacts = await c.get("/api/contacts")

    assert index.status_code == 200
    assert "<h1>contacts</h1>" in index.text
    assert root.status_code == 200
    assert contacts.status_code == 200
    assert contacts.json() == []


async def test_no_static_mount_when_dir_missing(tmp_path):
    app = create_app(Settings(_env_file=None, static_dir=str(tmp_path / "missing")))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        assert (await c.get("/index.html")).status_code == 404
