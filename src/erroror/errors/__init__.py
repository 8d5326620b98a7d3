"""Error values for erroror.

- ErrorType: Built-in classifications over an open integer discriminator
- Error: Immutable structured error with named factories
- NO_ERRORS/NO_FIRST_ERROR: Sentinels returned by accessors on success
- ErrorOrException/EmptyErrorsError: Construction contract violations
"""

from .error import NO_ERRORS, NO_FIRST_ERROR, Error
from .exceptions import EmptyErrorsError, ErrorOrException
from .types import ErrorType, Metadata, MetadataValue

__all__ = [
    "Error", "ErrorType", "Metadata", "MetadataValue",
    "NO_ERRORS", "NO_FIRST_ERROR",
    "ErrorOrException", "EmptyErrorsError",
]
