"""API Description Document — hand-written OpenAPI 3.1 description of the user routes.

Invariants:
    - Built once per application (create_app) and never mutated: every
      mapping is a MappingProxyType and every list a tuple
    - Describes the intended contract, not what the handlers actually do
      (e.g. 400/404 responses are advertised but never produced)
    - thaw() is the only way back to plain dict/list for JSON serialization

Design Decisions:
    - Hand-written dict over FastAPI's generated schema: the document is the
      artifact being demonstrated, so it stays independent of route signatures
    - server_url injected: the advertised server follows the configured port
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

OPENAPI_VERSION = "3.1.0"
DOCUMENT_TITLE = "My Awesome API"
DOCUMENT_VERSION = "1.0.0"

_JSON = "application/json"


def _user_list_schema() -> dict:
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "example": 1},
                "name": {"type": "string", "example": "John Doe"},
                "email": {"type": "string", "example": "john@example.com"},
            },
        },
    }


def _user_create_schema() -> dict:
    return {
        "type": "object",
        "required": ["name", "email"],
        "properties": {
            "name": {"type": "string", "example": "Jane Smith"},
            "email": {
                "type": "string", "format": "email",
                "example": "jane@example.com",
            },
            "age": {"type": "integer", "minimum": 0, "example": 28},
        },
    }


def _user_created_schema() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": {"type": "integer"},
            "name": {"type": "string"},
            "email": {"type": "string"},
            "createdAt": {"type": "string", "format": "date-time"},
        },
    }


def _user_component() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": {
                "type": "integer",
                "description": "Unique identifier for the user",
            },
            "name": {
                "type": "string",
                "description": "Full name of the user",
            },
            "email": {
                "type": "string", "format": "email",
                "description": "Email address of the user",
            },
            "createdAt": {
                "type": "string", "format": "date-time",
                "description": "When the user was created",
            },
        },
    }


def _paths() -> dict:
    return {
        "/api/v1/users": {
            "get": {
                "summary": "Get all users",
                "description": "Retrieve a list of all users",
                "tags": ["Users"],
                "responses": {
                    "200": {
                        "description": "Successful response",
                        "content": {_JSON: {"schema": _user_list_schema()}},
                    },
                },
            },
            "post": {
                "summary": "Create a new user",
                "description": "Create a new user in the system",
                "tags": ["Users"],
                "requestBody": {
                    "required": True,
                    "content": {_JSON: {"schema": _user_create_schema()}},
                },
                "responses": {
                    "201": {
                        "description": "User created successfully",
                        "content": {_JSON: {"schema": _user_created_schema()}},
                    },
                    "400": {"description": "Bad request - invalid input"},
                },
            },
        },
        "/api/v1/users/{id}": {
            "get": {
                "summary": "Get user by ID",
                "tags": ["Users"],
                "parameters": [
                    {
                        "name": "id",
                        "in": "path",
                        "required": True,
                        "schema": {"type": "integer"},
                        "description": "User ID",
                    },
                ],
                "responses": {
                    "200": {"description": "User found"},
                    "404": {"description": "User not found"},
                },
            },
        },
    }


def build_api_document(server_url: str) -> Mapping[str, Any]:
    """Construct the frozen API description advertised at `server_url`."""
    document = {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": DOCUMENT_TITLE,
            "version": DOCUMENT_VERSION,
            "description": "A sample API with FastAPI and an interactive reference",
            "contact": {
                "name": "API Support",
                "email": "support@example.com",
            },
        },
        "servers": [
            {"url": server_url, "description": "Development server"},
        ],
        "paths": _paths(),
        "components": {"schemas": {"User": _user_component()}},
    }
    return freeze(document)


def freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze(): fresh plain dicts/lists, safe to serialize or edit."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value
