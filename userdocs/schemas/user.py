"""User Schemas — response model for the read-only user routes.

Invariants:
    - id is None only when the requested path id was non-numeric (rendered as null)
    - createdAt is the wire name; created_at the Python name

Design Decisions:
    - Routes use response_model_exclude_unset so optional fields that were
      never set are omitted instead of serialized as null
    - POST /users does not use this model: it echoes request values untouched
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Public user shape. Never persisted."""
    model_config = ConfigDict(populate_by_name=True)

    id: int | None
    name: str
    email: str
    age: int | None = Field(None, ge=0)
    created_at: str | None = Field(None, alias="createdAt")


class HealthResponse(BaseModel):
    status: str
    timestamp: str
