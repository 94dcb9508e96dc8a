"""
scaffold_service.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Fail fast at startup when required values are missing.
- Hide secrets from repr/logging (application secret, docs password).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration.

    Required: env, port, application_secret, application_url.
    A missing `database_url` is not an error; the service runs in degraded mode.
    """

    model_config = SettingsConfigDict(env_prefix="APP_", case_sensitive=False)

    env: Literal["development", "production", "test"]
    service_name: str = "scaffold-service"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int

    application_secret: str = Field(repr=False)
    application_url: str

    # Docs are served openly unless a password is configured.
    docs_password: str | None = Field(default=None, repr=False)

    # Persistence
    database_url: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()  # type: ignore[call-arg]


# --- Module Notes -----------------------------------------------------------
# Field names map to APP_* environment variables (APP_DATABASE_URL, APP_PORT, ...).
