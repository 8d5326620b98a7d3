"""Foundation - configuration building blocks for erroror."""

from .config import (
    ChainSettings,
    ErrorOrSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = ["ErrorOrSettings", "LoggingSettings", "ChainSettings", "get_settings", "clear_settings_cache"]
