"""Core configuration.

- Centralizes environment variables (pydantic-settings) away from the CLI and
  the HTTP layer.
- Gives adapters (HTTP client, catalog API) a single read-only source for the
  upstream base URL and endpoint paths.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central application configuration.

    Built once per process and injected where needed. Nothing mutates it after
    construction (`frozen=True`).
    """

    model_config = SettingsConfigDict(
        env_prefix="DS_CATALOG_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    base_url: str = Field(
        default="https://www.demonslayer-api.com/api/v1",
        min_length=8,
        description="Base URL of the upstream Demon Slayer API.",
    )
    character_endpoint: str = Field(
        default="/characters",
        min_length=1,
        description="Path of the characters resource (paged list and lookup).",
    )
    combat_style_endpoint: str = Field(
        default="/combat-styles",
        min_length=1,
        description="Path of the combat styles resource (paged list).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds), applied by the HTTP client.",
    )
    user_agent: str = Field(
        default="ds-catalog/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to the upstream API.",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

    api_host: str = Field(default="127.0.0.1", description="Bind host for `serve`.")
    api_port: int = Field(default=8000, ge=1, le=65535, description="Bind port for `serve`.")


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Process-wide settings instance (read once from the environment)."""

    return AppSettings()
