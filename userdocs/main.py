"""userdocs API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The API Description Document is built once in create_app() from the
      settings it is given, and stored read-only on app.state
    - FastAPI's own schema/docs routes are disabled; routes/reference.py
      serves the hand-written document instead
    - Logging configured on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from userdocs.api.error_handlers import register_error_handlers
from userdocs.api.routes import health, reference, users
from userdocs.config import Settings, get_settings
from userdocs.core.api_document import (
    DOCUMENT_TITLE, DOCUMENT_VERSION, build_api_document,
)
from userdocs.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server running on {settings.server_url}")
    logger.info(f"API Documentation: {settings.server_url}/reference")
    yield
    logger.info("userdocs API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for `settings` (default: environment settings)."""
    settings = settings or get_settings()
    app = FastAPI(
        title=DOCUMENT_TITLE,
        version=DOCUMENT_VERSION,
        lifespan=lifespan,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.api_document = build_api_document(settings.server_url)

    app.include_router(users.router)
    app.include_router(health.router)
    app.include_router(reference.router)

    register_error_handlers(app)
    return app


app = create_app()
