"""User Records — hardcoded and request-echoing user data for the demo routes.

Invariants:
    - Nothing is stored: every function builds a fresh dict per call
    - new_user() echoes name/email/age exactly as sent (no validation);
      keys missing from the payload are missing from the result
    - Created ids are random in [0, 999] — collisions are possible
    - Timestamps are UTC ISO-8601 with millisecond precision and a "Z" suffix

Design Decisions:
    - rng/now injected: routes pass nothing, tests pass fixed values
    - parse_user_id() keeps leading-integer semantics ("12abc" -> 12) and
      returns None for non-numeric input, rendered as JSON null
"""

import random
import re
from datetime import datetime, timezone
from typing import Any

MAX_GENERATED_ID = 999
ECHOED_FIELDS = ("name", "email", "age")

SAMPLE_USERS: tuple[dict[str, Any], ...] = (
    {"id": 1, "name": "John Doe", "email": "john@example.com"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
)

PLACEHOLDER_NAME = "Sample User"
PLACEHOLDER_EMAIL = "user@example.com"

_HEX_PREFIX = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]*)")
_DECIMAL_PREFIX = re.compile(r"[+-]?[0-9]+")


def iso_timestamp(now: datetime | None = None) -> str:
    """Render `now` (default: current time) as e.g. 2024-05-01T12:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    stamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def list_users() -> list[dict[str, Any]]:
    """The two literal users, in id order."""
    return [dict(user) for user in SAMPLE_USERS]


def is_json_container(payload: Any, raw_body: bytes) -> bool:
    """Strict JSON body check: the top level must be an object or an array.

    An absent body passes, as does a non-JSON body (handed over as bytes).
    A JSON null arrives as None with a non-empty raw body and is rejected
    like any other top-level primitive.
    """
    if isinstance(payload, (dict, list, bytes)):
        return True
    if payload is None:
        return not raw_body.strip()
    return False


def new_user(
    payload: Any,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build a 'created' user from a request body without validating it.

    Anything other than a JSON object is treated as an empty body.
    """
    fields = payload if isinstance(payload, dict) else {}
    user: dict[str, Any] = {
        "id": (rng or random).randint(0, MAX_GENERATED_ID),
    }
    for key in ECHOED_FIELDS:
        if key in fields:
            user[key] = fields[key]
    user["createdAt"] = iso_timestamp(now)
    return user


def parse_user_id(raw: str) -> int | None:
    """Parse the leading integer of a path segment, None when there is none.

    Accepts surrounding whitespace, an optional sign and a 0x hex prefix;
    trailing garbage is ignored ("12abc" -> 12).
    """
    text = raw.lstrip()
    hex_match = _HEX_PREFIX.match(text)
    if hex_match:
        sign, digits = hex_match.groups()
        if not digits:
            return None
        value = int(digits, 16)
        return -value if sign == "-" else value
    match = _DECIMAL_PREFIX.match(text)
    if not match:
        return None
    return int(match.group())


def placeholder_user(user_id: int | None) -> dict[str, Any]:
    """The fixed user returned for any id lookup, carrying the requested id."""
    return {"id": user_id, "name": PLACEHOLDER_NAME, "email": PLACEHOLDER_EMAIL}


def health_status(now: datetime | None = None) -> dict[str, str]:
    return {"status": "OK", "timestamp": iso_timestamp(now)}
