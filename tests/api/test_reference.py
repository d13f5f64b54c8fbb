"""API Reference — verifies the served document and the viewer page.

Invariants:
    - /openapi.json is the hand-written document, with the configured port
    - /reference is an HTML page titled with the document title, themed from settings
    - FastAPI's generated /docs and /redoc are disabled
"""

import pytest

from userdocs.config import Settings
from userdocs.main import create_app


async def test_openapi_json_serves_hand_written_document(client):
    res = await client.get("/openapi.json")
    assert res.status_code == 200
    doc = res.json()
    assert doc["openapi"] == "3.1.0"
    assert doc["info"]["title"] == "My Awesome API"
    assert doc["servers"][0]["url"] == "http://localhost:4321"
    assert set(doc["paths"]) == {"/api/v1/users", "/api/v1/users/{id}"}


async def test_reference_page_contains_title(client):
    res = await client.get("/reference")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "My Awesome API" in res.text
    assert "/openapi.json" in res.text


async def test_reference_page_uses_configured_theme(client):
    res = await client.get("/reference")
    assert "deepSpace" in res.text


@pytest.mark.parametrize("path", ["/docs", "/redoc"])
async def test_framework_docs_disabled(client, path):
    res = await client.get(path)
    assert res.status_code == 404


def test_document_follows_app_settings(app):
    other = create_app(Settings(port=9000))
    assert app.state.api_document["servers"][0]["url"] == "http://localhost:4321"
    assert other.state.api_document["servers"][0]["url"] == "http://localhost:9000"
