"""Structured logging for chain diagnostics.

Console lines for development, JSON Lines for log aggregation. Logging is set
up explicitly with configure_logging()/configure_from_settings(), or lazily
from the ERROROR_ environment the first time a logger is requested.

Quick Start:
    >>> from erroror.observability import configure_logging, get_logger
    >>>
    >>> configure_logging(format="console", level="DEBUG", trace_chains=True)
    >>> get_logger("orders").info("order rejected", code="Order.Empty")
    # => 10:30:45.123 [info] order rejected code="Order.Empty" logger="orders"
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol, TextIO, cast, runtime_checkable

import orjson
from pydantic import ValidationError
from pydantic_settings import SettingsError

from erroror.errors.types import Metadata, MetadataValue

if TYPE_CHECKING:
    from erroror.foundation.config import ErrorOrSettings


# ─────────────────────────────────────────────────────────────────────────────
# Entries & Loggers
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class LogEntry:
    """One rendered event with its merged context."""

    timestamp: float
    level: str
    event: str
    context: Metadata

    @property
    def iso_time(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def clock_time(self) -> str:
        """HH:MM:SS.mmm"""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


@runtime_checkable
class LogRenderer(Protocol):
    """Sink for log entries."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class BoundLogger:
    """Logger whose context is merged into every event it emits.

    Example:
        >>> log = get_logger("erroror.chain")
        >>> log.debug("step.skipped", operation="then", codes=["Order.Empty"])
    """

    renderer: LogRenderer
    level: int = logging.INFO
    context: Metadata = field(default_factory=dict)

    def _emit(self, level: int, event: str, kw: Metadata) -> None:
        if level >= self.level:
            name = logging.getLevelName(level).lower()
            self.renderer.render(LogEntry(time.time(), name, event, {**self.context, **kw}))

    def debug(self, event: str, **kw: MetadataValue) -> None: self._emit(logging.DEBUG, event, kw)
    def info(self, event: str, **kw: MetadataValue) -> None: self._emit(logging.INFO, event, kw)
    def warning(self, event: str, **kw: MetadataValue) -> None: self._emit(logging.WARNING, event, kw)
    def error(self, event: str, **kw: MetadataValue) -> None: self._emit(logging.ERROR, event, kw)


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────

_ANSI = {"reset": "\033[0m", "bold": "\033[1m", "dim": "\033[2m", "cyan": "\033[36m",
         "yellow": "\033[33m", "blue": "\033[34m"}
_PLAIN = dict.fromkeys(_ANSI, "")
_LEVEL_ANSI = {"debug": "\033[2m", "info": "\033[32m", "warning": "\033[33m", "error": "\033[31m"}


@dataclass(slots=True)
class ConsoleRenderer:
    """`time [level] event key=value ...` lines, colored on a TTY."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        c = _ANSI if self.colors else _PLAIN
        tag = _LEVEL_ANSI.get(entry.level, "") if self.colors else ""
        pairs = " ".join(f"{c['cyan']}{k}{c['reset']}={_console_value(v, c)}" for k, v in sorted(entry.context.items()))
        line = f"{c['dim']}{entry.clock_time}{c['reset']} {tag}[{entry.level}]{c['reset']} {c['bold']}{entry.event}{c['reset']}"
        print(f"{line} {pairs}" if pairs else line, file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """One JSON object per line."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        record = {"timestamp": entry.iso_time, "level": entry.level, "event": entry.event, **entry.context}
        print(orjson.dumps(record, option=orjson.OPT_NON_STR_KEYS, default=str).decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Discards everything."""

    def render(self, entry: LogEntry) -> None:
        pass


def _console_value(v: object, c: dict[str, str]) -> str:
    match v:
        case str(): return f'{c["yellow"]}"{v}"{c["reset"]}'
        case bool(): return f'{c["blue"]}{str(v).lower()}{c["reset"]}'
        case int() | float(): return f'{c["blue"]}{v}{c["reset"]}'
        case list() | tuple(): return f'[{", ".join(map(str, v))}]'
        case _: return repr(v)


# ─────────────────────────────────────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class _LogConfig:
    renderer: LogRenderer
    level: int
    trace_chains: bool


_config: ContextVar[_LogConfig | None] = ContextVar("erroror_log_config", default=None)


def configure_logging(
    format: str = "console",  # noqa: A002 - shadows builtin but matches stdlib
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
    trace_chains: bool = False,
) -> LogRenderer:
    """Install a renderer and minimum level. Format: "console", "json" or "none".

    `trace_chains` turns on the step.skipped/step.recovered debug events
    emitted by ErrorOr combinators.
    """
    match format:
        case "console": renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr, colors=colors)
        case "json": renderer = JsonRenderer(output=output or sys.stdout)
        case "none": renderer = NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _config.set(_LogConfig(renderer, getattr(logging, level.upper(), logging.INFO), trace_chains))
    return renderer


def configure_from_settings(settings: ErrorOrSettings | None = None, *, output: TextIO | None = None) -> LogRenderer:
    """Configure logging and chain tracing from settings (defaults to the global settings)."""
    if settings is None:
        from erroror.foundation.config import get_settings
        settings = get_settings()
    log = settings.logging
    return configure_logging(log.format, log.level, output=output, colors=log.colors,
                             trace_chains=settings.tracing_chains)


def reset_logging() -> None:
    """Forget the active configuration; the next logger reloads it from the environment."""
    _config.set(None)


def _active_config() -> _LogConfig:
    if (config := _config.get()) is not None:
        return config
    try:
        configure_from_settings()
    except (ValidationError, SettingsError) as exc:
        configure_logging()
        get_logger("erroror.config").warning("settings.invalid", detail=str(exc))
    return cast(_LogConfig, _config.get())


def get_logger(name: str | None = None, **context: MetadataValue) -> BoundLogger:
    """Logger bound to `context`; `name` is added as 'logger'."""
    config = _active_config()
    if name:
        context["logger"] = name
    return BoundLogger(config.renderer, config.level, context)


def chain_tracing_enabled() -> bool:
    """True when combinators should report skipped and recovered steps."""
    return _active_config().trace_chains
