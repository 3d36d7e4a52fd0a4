"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING
    )

    app_name: str = Field(
        default="Library API",
        description="Name reported by the root endpoint and the OpenAPI schema",
        min_length=1,
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level passed to logging.basicConfig",
    )
    initial_books: list[str] = Field(
        default_factory=list,
        description="Titles registered in the library when the process starts",
    )
    initial_users: dict[str, str] = Field(
        default_factory=dict,
        description="Users available to the in-memory repository, as {id: name}",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
