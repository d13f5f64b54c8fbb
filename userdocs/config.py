"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - The port is read once here and handed to create_app()/uvicorn explicitly;
      handlers never consult the environment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults for every setting: `python -m userdocs` works with no environment
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from scalar_fastapi import Theme


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=0, le=65535)

    # API reference viewer
    reference_theme: Theme = Theme.BLUE_PLANET

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @property
    def server_url(self) -> str:
        """URL advertised in the API document and startup logs."""
        return f"http://localhost:{self.port}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
