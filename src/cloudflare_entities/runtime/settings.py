"""Environment-based settings configuration.

Only simple values (strings and booleans) are read here, from environment
variables and an optional ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development"
    )
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False, description="Emit log records as JSON lines")

    strict_wire_keys: bool = Field(
        default=False,
        description="Reject wire keys that are not in an entity's field map",
    )


@lru_cache(maxsize=1)
def get_settings() -> EnvironmentVariables:
    """Get the process-wide settings instance."""
    return EnvironmentVariables()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
