"""ErrorOr container and its combinator algebra.

Provides:
- ErrorOr: success value or a non-empty list of Error values
- AsyncErrorOr: the same combinators over a container that is not yet available
- lift/defer/deferred: entry points for immediate and deferred chains
- sequence/traverse/collect/partition: list helpers (fail fast or accumulate)
- Success/Created/Deleted/Updated: zero-data success markers

Example:
    >>> from erroror.monads import lift
    >>> from erroror.errors import Error
    >>>
    >>> (
    ...     lift("5")
    ...     .then(lambda s: int(s) if s.isdigit() else Error.validation("Parse.NotInt"))
    ...     .then(lambda n: n * 2)
    ...     .match(lambda v: f"got {v}", lambda errors: errors[0].code)
    ... )
    'got 10'
"""

from .collect import collect, partition, sequence, sequence_async, traverse
from .deferred import AsyncErrorOr, defer, deferred
from .markers import Created, Deleted, Result, Success, Updated
from .result import ErrorOr, lift

__all__ = [
    # Core types
    "ErrorOr", "AsyncErrorOr",
    # Entry points
    "lift", "defer", "deferred",
    # Collection operations
    "sequence", "traverse", "collect", "partition", "sequence_async",
    # Markers
    "Success", "Created", "Deleted", "Updated", "Result",
]
