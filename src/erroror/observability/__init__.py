"""Observability for erroror: structured logging and chain tracing."""

from .logging import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    chain_tracing_enabled,
    configure_from_settings,
    configure_logging,
    get_logger,
    reset_logging,
)

__all__ = [
    "BoundLogger", "LogEntry",
    "LogRenderer", "ConsoleRenderer", "JsonRenderer", "NoOpRenderer",
    "configure_logging", "configure_from_settings", "reset_logging", "get_logger",
    "chain_tracing_enabled",
]
