"""Petboard configuration.

Settings are read from the environment (and an optional ``.env`` file) with
pydantic-settings. ``get_settings()`` returns the cached process-wide instance;
call ``get_settings.cache_clear()`` after changing the environment.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from petboard.errors import ConfigurationError

DEFAULT_DATABASE = "petboard"


class Settings(BaseSettings):
    """Runtime settings for the web app and the store connection."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    mongodb_uri: str | None = Field(default=None, description="MongoDB connection string.")
    mongodb_database: str | None = Field(
        default=None,
        description="Database name. Falls back to the URI's database, then 'petboard'.",
    )
    mongodb_timeout_ms: int = Field(default=5000, ge=1, alias="MONGODB_TIMEOUT_MS")

    host: str = Field(default="127.0.0.1", alias="PETBOARD_HOST")
    port: int = Field(default=3000, ge=1, le=65535, alias="PETBOARD_PORT")
    log_level: str = Field(default="INFO", alias="PETBOARD_LOG_LEVEL")

    @classmethod
    def load(cls) -> Settings:
        """Build a fresh settings instance from the current environment."""
        return cls()

    def require_mongodb_uri(self) -> str:
        """Return the store address or raise if it is not configured."""
        uri = (self.mongodb_uri or "").strip()
        if not uri:
            raise ConfigurationError(
                "MONGODB_URI is not set. Define it in the environment or in .env"
            )
        return uri


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.load()
