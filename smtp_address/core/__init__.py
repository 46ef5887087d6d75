"""Core package components: configuration and logging setup."""

from smtp_address.core.config import Settings, get_settings
from smtp_address.core.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
