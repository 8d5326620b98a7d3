"""erroror - Errors as values for Python.

An ErrorOr holds either a success value or a non-empty list of structured
Error values. Failures are returned, not raised, and compose through chains
that short-circuit on the first failure and resume after an explicit recover.

Quick Start:
    >>> from erroror import Error, ErrorOr, lift
    >>>
    >>> def parse_int(s: str) -> ErrorOr[int]:
    ...     if not s.isdigit():
    ...         return lift(Error.validation("Parse.NotInt", f"{s!r} is not a number"))
    ...     return lift(int(s))
    >>>
    >>> lift("5").then(parse_int).then(lambda n: n * 2).then(str).value()
    '10'
    >>> lift("x").then(parse_int).recover("oh no").value()
    'oh no'

Async chains:
    >>> from erroror import defer
    >>>
    >>> result = await defer(fetch_order(42)).then(validate).then_async(charge)
    >>> result.match(lambda receipt: receipt.id, lambda errors: errors[0].code)

Configuration (environment):
    ERROROR_LOG_LEVEL=DEBUG ERROROR_CHAIN_TRACE=true
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .errors import NO_ERRORS, NO_FIRST_ERROR, EmptyErrorsError, Error, ErrorOrException, ErrorType

# Container & combinators
from .monads import (
    AsyncErrorOr,
    Created,
    Deleted,
    ErrorOr,
    Result,
    Success,
    Updated,
    collect,
    defer,
    deferred,
    lift,
    partition,
    sequence,
    sequence_async,
    traverse,
)

# Config & logging
from .foundation import ErrorOrSettings, clear_settings_cache, get_settings
from .observability import configure_from_settings, configure_logging, get_logger, reset_logging

__all__ = [
    "__version__",
    # Errors
    "Error", "ErrorType", "NO_ERRORS", "NO_FIRST_ERROR", "ErrorOrException", "EmptyErrorsError",
    # Container
    "ErrorOr", "AsyncErrorOr", "lift", "defer", "deferred",
    # Collections
    "sequence", "traverse", "collect", "partition", "sequence_async",
    # Markers
    "Success", "Created", "Deleted", "Updated", "Result",
    # Config & logging
    "ErrorOrSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "configure_from_settings", "reset_logging", "get_logger",
]
