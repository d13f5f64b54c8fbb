"""Health Probe — GET /health returns status OK and a current timestamp."""

from datetime import datetime, timedelta, timezone


async def test_health_returns_ok(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "OK"
    stamp = datetime.fromisoformat(body["timestamp"])
    assert abs(datetime.now(timezone.utc) - stamp) < timedelta(seconds=5)


async def test_unknown_route_is_not_found(client):
    res = await client.get("/api/v1/unknown")
    assert res.status_code == 404
