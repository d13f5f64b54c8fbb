"""API test fixtures — FastAPI app + httpx async client.

Invariants:
    - Every test gets a freshly built app with explicit settings
    - Requests go through ASGITransport (no network, no lifespan)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from userdocs.config import Settings
from userdocs.main import create_app


@pytest.fixture
def settings():
    return Settings(port=4321, reference_theme="deepSpace")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
