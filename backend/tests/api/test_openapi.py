"""API documentation — generated OpenAPI schema and the /docs switch."""

from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import create_app


async def test_openapi_documents_contact_routes(client):
    res = await client.get("/openapi.json")
    assert res.status_code == 200
    schema = res.json()

    paths = schema["paths"]
    assert set(paths["/api/contacts"]) == {"get", "post"}
    assert set(paths["/api/contacts/{contact_id}"]) == {"put", "delete"}
    assert "404" in paths["/api/contacts/{contact_id}"]["delete"]["responses"]


async def test_openapi_uses_camel_case_contact_schema(client):
    schema = (await client.get("/openapi.json")).json()
    props = schema["components"]["schemas"]["ContactWrite"]["properties"]
    assert set(props) == {"firstName", "lastName", "phone"}


async def test_openapi_carries_configured_metadata(client):
    info = (await client.get("/openapi.json")).json()
    assert info["info"]["description"] == "Customer API Information"
    assert info["servers"][0]["description"] == "Development server"


async def test_docs_ui_served(client):
    res = await client.get("/docs")
    assert res.status_code == 200
    assert "swagger" in res.text.lower()


async def test_docs_disabled_by_settings():
    app = create_app(Settings(docs_enabled=False))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        assert (await c.get("/docs")).status_code == 404
        assert (await c.get("/openapi.json")).status_code == 404


async def test_openapi_lists_all_configured_servers(client):
    servers = (await client.get("/openapi.json")).json()["servers"]
    assert [s["description"] for s in servers] == [
        "Development server", "Staging server", "Production server",
    ]
