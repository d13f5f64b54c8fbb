"""Error Handlers — verifies the catch-all envelope never leaks internals."""

from httpx import ASGITransport, AsyncClient

from userdocs.config import Settings
from userdocs.main import create_app


async def test_unhandled_exception_returns_generic_500():
    app = create_app(Settings(port=3000))

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/boom")

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["severity"] == "critical"
    assert "secret" not in res.text
