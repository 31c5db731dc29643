"""Configuration management using Pydantic Settings.

Loads configuration from ``MONAD_``-prefixed environment variables with
validation.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Deferred actions
    deferred_error_policy: Literal["raise", "log"] = Field(
        default="raise",
        description=(
            "What err() does when a deferred action raises: 'raise' re-raises the first "
            "exception after all actions ran, 'log' only logs it"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="MONAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings loaded from the environment on first call
    """
    return Settings()
