"""User Routes — hardcoded user-management endpoints.

Invariants:
    - GET /api/v1/users always returns the same two users, ids 1 and 2, in order
    - POST /api/v1/users answers 201 for any object/array/absent body; fields
      are echoed, never validated
    - GET /api/v1/users/{id} returns the placeholder user for any id,
      echoing the parsed id (null when the segment is not numeric)

Design Decisions:
    - The path id is taken as str and parsed by core, so "abc" reaches the
      handler instead of being rejected by FastAPI's int coercion
    - Malformed JSON is rejected by FastAPI before the handler runs; top-level
      JSON primitives (5, null, "x", true) are rejected by create_user. Both
      surface as RequestValidationError, mapped to 400 by the error handler
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Request, status
from fastapi.exceptions import RequestValidationError

from userdocs.core.users import (
    is_json_container, list_users, new_user, parse_user_id,
    placeholder_user,
)
from userdocs.schemas.user import User

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get(
    "", response_model=list[User], response_model_exclude_unset=True,
)
async def get_users():
    """Return the two sample users."""
    return list_users()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(request: Request, payload: Any = Body(None)):
    """Build a user from the request body with a random id and createdAt."""
    if not is_json_container(payload, await request.body()):
        raise RequestValidationError([{
            "type": "json_type",
            "loc": ("body",),
            "msg": "JSON body must be an object or an array",
            "input": payload,
        }])
    user = new_user(payload)
    logger.info("User created", extra={"user_id": user["id"]})
    return user


@router.get(
    "/{user_id}", response_model=User, response_model_exclude_unset=True,
)
async def get_user(user_id: str):
    """Return the placeholder user, whatever the id."""
    return placeholder_user(parse_user_id(user_id))
