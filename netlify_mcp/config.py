"""Server configuration loaded from environment variables.

Uses ``pydantic-settings`` for env-var loading, type coercion and ``.env``
file support.  Settings are built once at startup by ``load_settings()``
and handed to the API client; nothing below the server reads the
environment directly.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from netlify_mcp.errors import ConfigError

VERSION = "0.1.0"

NETLIFY_API = "https://api.netlify.com/api/v1"


class Settings(BaseSettings):
    """Server settings — sourced from environment / ``.env`` file.

    Required: NETLIFY_ACCESS_TOKEN (checked by ``load_settings``, not
    during instantiation, so tests can build blank settings).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    NETLIFY_ACCESS_TOKEN: str = ""
    NETLIFY_API_URL: str = NETLIFY_API
    NETLIFY_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    LOG_LEVEL: str = "INFO"

    @field_validator("NETLIFY_API_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


def load_settings(**overrides) -> Settings:
    """Build settings and fail fast when the access token is missing."""
    settings = Settings(**overrides)
    if not settings.NETLIFY_ACCESS_TOKEN.strip():
        raise ConfigError(
            "NETLIFY_ACCESS_TOKEN environment variable is required",
            detail={"missing": ["NETLIFY_ACCESS_TOKEN"]},
        )
    return settings
