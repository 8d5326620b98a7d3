"""Configuration management using pydantic-settings."""

from .settings import (
    ChainSettings,
    ErrorOrSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ChainSettings",
    "ErrorOrSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
