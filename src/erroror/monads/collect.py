"""Collection operations over lists of ErrorOr containers.

Two error policies:
- fail fast (sequence, traverse, sequence_async): the first failing
  container's errors win, later items are not inspected
- accumulate (collect, partition): every error from every failure, in input order
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Iterable
from typing import Callable

from erroror.errors import Error

from .result import ErrorOr, T, U, lift


def sequence(results: Iterable[ErrorOr[T]]) -> ErrorOr[list[T]]:
    """Convert iterable of ErrorOr to ErrorOr of list, failing fast.

    Example:
        >>> sequence([lift(1), lift(2)]).value()
        [1, 2]
        >>> sequence([lift(1), lift(Error.conflict())]).first_error().code
        'General.Conflict'
    """
    values: list[T] = []
    for result in results:
        if result._errors:
            return ErrorOr(None, result._errors)
        values.append(result._value)  # type: ignore[arg-type]
    return ErrorOr(values)


def traverse(items: Iterable[T], f: Callable[[T], ErrorOr[U] | U]) -> ErrorOr[list[U]]:
    """Map `f` over items and sequence the lifted results.

    Stops calling `f` after the first failure.
    """
    return sequence(lift(f(item)) for item in items)


def collect(results: Iterable[ErrorOr[T]]) -> ErrorOr[list[T]]:
    """Collect all values, or fail with every error from every failure.

    Example:
        >>> r = collect([lift(Error.validation("A")), lift(1), lift(Error.validation("B"))])
        >>> [e.code for e in r.errors()]
        ['A', 'B']
    """
    values, errors = partition(results)
    return ErrorOr.from_errors(errors) if errors else ErrorOr(values)


def partition(results: Iterable[ErrorOr[T]]) -> tuple[list[T], list[Error]]:
    """Split into (values, errors); errors are flattened in input order."""
    values: list[T] = []
    errors: list[Error] = []
    for result in results:
        if result._errors:
            errors.extend(result._errors)
        else:
            values.append(result._value)  # type: ignore[arg-type]
    return values, errors


async def sequence_async(pending: Iterable[Awaitable[ErrorOr[T]]]) -> ErrorOr[list[T]]:
    """Await each item in order, never concurrently, stopping at the first failure.

    Coroutines left unawaited after a failure are closed.
    """
    values: list[T] = []
    items = iter(pending)
    for item in items:
        result = lift(await item)
        if result._errors:
            for rest in items:
                if inspect.iscoroutine(rest):
                    rest.close()
            return ErrorOr(None, result._errors)
        values.append(result._value)
    return ErrorOr(values)
