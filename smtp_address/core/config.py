"""
Core configuration module for smtp-address.

This module defines the package settings using Pydantic Settings. Values
are loaded from ``SMTP_ADDRESS_*`` environment variables or a ``.env``
file, with defaults that keep the library quiet.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Package settings loaded from environment variables.

    The address grammar itself is fixed; settings only govern how the
    package reports what it does.
    """

    model_config = SettingsConfigDict(
        env_prefix="SMTP_ADDRESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level"
    )
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log renderer used by configure_logging"
    )
    log_rejections: bool = Field(
        default=False, description="Log rejected addresses at DEBUG level"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    This function returns a cached instance of the Settings class,
    ensuring that environment variables are only read once.

    Returns:
        Settings: Package settings instance
    """
    return Settings()
