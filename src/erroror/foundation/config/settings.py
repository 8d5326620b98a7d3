"""Environment-based configuration using pydantic-settings.

Example:
    >>> from erroror.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.chain.trace
    False

    # Or with environment variables:
    # ERROROR_LOG_LEVEL=DEBUG
    # ERROROR_CHAIN_TRACE=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ERROROR_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors; None auto-detects a TTY")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ChainSettings(BaseSettings):
    """Combinator chain diagnostics."""

    model_config = SettingsConfigDict(
        env_prefix="ERROROR_CHAIN_",
        extra="ignore",
    )

    trace: bool = Field(default=False, description="Emit debug events for skipped and recovered steps")


class ErrorOrSettings(BaseSettings):
    """Root settings for erroror.

    Loads configuration from environment variables with ERROROR_ prefix.

    Example environment variables:
        ERROROR_DEBUG=true
        ERROROR_LOG_LEVEL=DEBUG
        ERROROR_LOG_FORMAT=json
        ERROROR_CHAIN_TRACE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="ERROROR_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    chain: ChainSettings = Field(default_factory=ChainSettings)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tracing_chains(self) -> bool:
        """Chain tracing is on when requested explicitly or in debug mode."""
        return self.chain.trace or self.debug


@lru_cache(maxsize=1)
def get_settings() -> ErrorOrSettings:
    """Get the global settings instance (cached)."""
    return ErrorOrSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
