"""User Routes — verifies the hardcoded user endpoints over HTTP.

Invariants:
    - GET /api/v1/users → exactly users 1 and 2, in order, no extra fields
    - POST /api/v1/users → 201, body echoed, id in [0, 999], createdAt >= request time
    - POST with {}, [] or no body → still 201, name/email absent (no validation)
    - POST with a top-level JSON primitive → 400, like a malformed body
    - GET /api/v1/users/{id} → placeholder user echoing the parsed id (null if non-numeric)
"""

from datetime import datetime, timezone

import pytest


def _now_ms():
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


async def test_list_users_returns_two_fixed_users(client):
    res = await client.get("/api/v1/users")
    assert res.status_code == 200
    assert res.json() == [
        {"id": 1, "name": "John Doe", "email": "john@example.com"},
        {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
    ]


async def test_create_user_echoes_body(client):
    before = _now_ms()
    res = await client.post(
        "/api/v1/users", json={"name": "A", "email": "a@x.com", "age": 5},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "A"
    assert body["email"] == "a@x.com"
    assert body["age"] == 5
    assert isinstance(body["id"], int)
    assert 0 <= body["id"] <= 999
    assert datetime.fromisoformat(body["createdAt"]) >= before


async def test_create_user_with_empty_object_is_not_rejected(client):
    res = await client.post("/api/v1/users", json={})
    assert res.status_code == 201
    body = res.json()
    assert "name" not in body
    assert "email" not in body
    assert set(body) == {"id", "createdAt"}


async def test_create_user_without_body_is_not_rejected(client):
    res = await client.post("/api/v1/users")
    assert res.status_code == 201
    assert set(res.json()) == {"id", "createdAt"}


async def test_create_user_without_age_omits_age(client):
    res = await client.post(
        "/api/v1/users", json={"name": "B", "email": "b@x.com"},
    )
    assert res.status_code == 201
    assert "age" not in res.json()


async def test_create_user_malformed_json_is_bad_request(client):
    res = await client.post(
        "/api/v1/users",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize("segment, expected", [
    ("1", 1),
    ("999999", 999999),
    ("12abc", 12),
    ("-4", -4),
])
async def test_get_user_echoes_parsed_id(client, segment, expected):
    res = await client.get(f"/api/v1/users/{segment}")
    assert res.status_code == 200
    assert res.json() == {
        "id": expected, "name": "Sample User", "email": "user@example.com",
    }


async def test_get_user_non_numeric_id_is_null(client):
    res = await client.get("/api/v1/users/abc")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] is None
    assert body["name"] == "Sample User"


@pytest.mark.parametrize("raw_body", [b"5", b"null", b'"x"', b"true"])
async def test_create_user_rejects_top_level_json_primitive(client, raw_body):
    res = await client.post(
        "/api/v1/users",
        content=raw_body,
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_user_with_array_body_is_treated_as_empty(client):
    res = await client.post("/api/v1/users", json=[{"name": "A"}])
    assert res.status_code == 201
    assert set(res.json()) == {"id", "createdAt"}


async def test_get_user_non_ascii_digits_are_not_numeric(client):
    res = await client.get("/api/v1/users/١٢")
    assert res.status_code == 200
    assert res.json()["id"] is None
