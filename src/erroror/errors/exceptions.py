"""Exceptions for contract violations that cannot be represented as data.

Business failures travel inside ErrorOr. These are raised only when a caller
breaks a construction contract.
"""

from __future__ import annotations


class ErrorOrException(Exception):
    """Base class for erroror contract violations."""


class EmptyErrorsError(ErrorOrException, ValueError):
    """Raised when a failed ErrorOr is built from an empty error list."""

    __slots__ = ()

    def __init__(self, message: str = "Cannot create a failed ErrorOr from an empty error list.") -> None:
        super().__init__(message)
