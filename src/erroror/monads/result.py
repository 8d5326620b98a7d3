"""ErrorOr container for explicit, composable failure handling.

An ErrorOr holds either one success value or a non-empty ordered list of
Error values. Combinators run left to right with a single short-circuit rule:
once a step fails, every later then/map/bind/tap is skipped and the failing
step's errors reach the end of the chain unchanged, until a recover step
replaces them.

Operations:
- Inspection: is_error, value, errors, errors_or_empty, first_error
- Exhaustive handling: switch, switch_first, match, match_first
- Success path: then (uniform), map, bind, tap
- Failure path: recover
- Deferred forms: *_async (callback returns an awaitable)

Example:
    >>> def parse_int(s: str) -> ErrorOr[int]:
    ...     return lift(int(s)) if s.isdigit() else lift(Error.validation("Parse.NotInt"))
    >>>
    >>> lift("5").then(parse_int).then(lambda n: n * 2).then(str).value()
    '10'
    >>> lift("x").then(parse_int).then(lambda n: n * 2).recover("oh no").value()
    'oh no'
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Iterable
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from erroror.errors import NO_ERRORS, NO_FIRST_ERROR, EmptyErrorsError, Error
from erroror.observability import chain_tracing_enabled, get_logger

if TYPE_CHECKING:
    from .deferred import AsyncErrorOr

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type
R = TypeVar("R")  # Fold result type

_NO_ERRORS_TUPLE: tuple[Error, ...] = ()


class ErrorOr(Generic[T]):
    """Discriminated union of a success value or a non-empty list of errors.

    Immutable: every combinator returns a container rather than mutating
    this one. Error accessors never raise on a successful container; they
    return fixed sentinel errors instead, and value() returns None on failure.

    Examples:
        >>> ErrorOr.from_value(42).value()
        42
        >>> ErrorOr.from_error(Error.not_found()).first_error().code
        'General.NotFound'
        >>> ErrorOr.from_value(5).map(lambda x: x + 1).value()
        6
    """

    __slots__ = ("_value", "_errors")

    def __init__(self, value: T | None = None, errors: tuple[Error, ...] = _NO_ERRORS_TUPLE) -> None:
        """Private constructor. Use from_value/from_error/from_errors or lift."""
        self._value = value
        self._errors = errors

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def from_value(cls, value: T) -> ErrorOr[T]:
        """Successful container holding `value`."""
        return cls(value)

    @classmethod
    def from_error(cls, error: Error) -> ErrorOr[T]:
        """Failed container holding a single error."""
        if not isinstance(error, Error):
            raise TypeError(f"Expected Error, got {type(error).__name__}")
        return cls(None, (error,))

    @classmethod
    def from_errors(cls, errors: Iterable[Error]) -> ErrorOr[T]:
        """Failed container holding `errors` in the order given.

        Raises:
            EmptyErrorsError: If `errors` is empty
            TypeError: If any element is not an Error
        """
        stored = tuple(errors)
        if not stored:
            raise EmptyErrorsError()
        if not all(isinstance(e, Error) for e in stored):
            raise TypeError("Every element of an error list must be an Error")
        return cls(None, stored)

    @classmethod
    def lift(cls, source: Any) -> ErrorOr[Any]:
        """Fluent entry point; see module-level lift()."""
        return lift(source)

    def to_async(self) -> AsyncErrorOr[T]:
        """Wrap in an already-resolved AsyncErrorOr to start a deferred chain."""
        from .deferred import AsyncErrorOr
        return AsyncErrorOr.of(self)

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    def is_error(self) -> bool:
        return bool(self._errors)

    def value(self) -> T | None:
        """Success value, or None when failed. Never raises."""
        return self._value

    def errors(self) -> list[Error]:
        """Stored errors, or [NO_ERRORS] when successful."""
        return list(self._errors) if self._errors else [NO_ERRORS]

    def errors_or_empty(self) -> list[Error]:
        """Stored errors, or an empty list when successful."""
        return list(self._errors)

    def first_error(self) -> Error:
        """Primary error, or NO_FIRST_ERROR when successful."""
        return self._errors[0] if self._errors else NO_FIRST_ERROR

    # ─────────────────────────────────────────────────────────────────
    # Exhaustive Handling
    # ─────────────────────────────────────────────────────────────────

    def switch(self, on_value: Callable[[T], object], on_error: Callable[[list[Error]], object]) -> None:
        """Run exactly one callback for its side effects."""
        if self._errors:
            on_error(self.errors())
        else:
            on_value(cast(T, self._value))

    def switch_first(self, on_value: Callable[[T], object], on_first_error: Callable[[Error], object]) -> None:
        """Like switch, but the error branch only sees the primary error."""
        if self._errors:
            on_first_error(self._errors[0])
        else:
            on_value(cast(T, self._value))

    def match(self, on_value: Callable[[T], R], on_error: Callable[[list[Error]], R]) -> R:
        """Fold both states into a single result.

        Example:
            >>> ErrorOr.from_value(42).match(lambda v: f"ok: {v}", lambda es: f"{len(es)} errors")
            'ok: 42'
        """
        if self._errors:
            return on_error(self.errors())
        return on_value(cast(T, self._value))

    def match_first(self, on_value: Callable[[T], R], on_first_error: Callable[[Error], R]) -> R:
        if self._errors:
            return on_first_error(self._errors[0])
        return on_value(cast(T, self._value))

    async def switch_async(
        self,
        on_value: Callable[[T], Awaitable[object]],
        on_error: Callable[[list[Error]], Awaitable[object]],
    ) -> None:
        if self._errors:
            await resolve(on_error(self.errors()))
        else:
            await resolve(on_value(cast(T, self._value)))

    async def switch_first_async(
        self,
        on_value: Callable[[T], Awaitable[object]],
        on_first_error: Callable[[Error], Awaitable[object]],
    ) -> None:
        if self._errors:
            await resolve(on_first_error(self._errors[0]))
        else:
            await resolve(on_value(cast(T, self._value)))

    async def match_async(
        self,
        on_value: Callable[[T], Awaitable[R]],
        on_error: Callable[[list[Error]], Awaitable[R]],
    ) -> R:
        if self._errors:
            return await resolve(on_error(self.errors()))
        return await resolve(on_value(cast(T, self._value)))

    async def match_first_async(
        self,
        on_value: Callable[[T], Awaitable[R]],
        on_first_error: Callable[[Error], Awaitable[R]],
    ) -> R:
        if self._errors:
            return await resolve(on_first_error(self._errors[0]))
        return await resolve(on_value(cast(T, self._value)))

    # ─────────────────────────────────────────────────────────────────
    # Success Path
    # ─────────────────────────────────────────────────────────────────

    def then(self, f: Callable[[T], Any]) -> ErrorOr[Any]:
        """Run `f` on the value, or propagate the errors without calling it.

        The result of `f` is lifted: an ErrorOr is flattened, an Error or error
        list fails the chain, None keeps the current value (side effect step)
        and anything else becomes the new value.

        Example:
            >>> lift(5).then(lambda x: x * 2).then(print).value()
            10
            10
        """
        if self._errors:
            return self._propagate("then")
        return self._continue(f(cast(T, self._value)))

    def map(self, f: Callable[[T], U]) -> ErrorOr[U]:
        """Always wrap the result of `f` as the new value (None included)."""
        if self._errors:
            return self._propagate("map")
        return ErrorOr(f(cast(T, self._value)))

    def bind(self, f: Callable[[T], ErrorOr[U]]) -> ErrorOr[U]:
        """Monadic bind: `f` must itself return an ErrorOr.

        Raises:
            TypeError: If `f` returns something other than an ErrorOr
        """
        if self._errors:
            return self._propagate("bind")
        return _require_container(f(cast(T, self._value)), "bind")

    def tap(self, f: Callable[[T], object]) -> ErrorOr[T]:
        """Call `f` for its side effects and pass this container through."""
        if self._errors:
            return self._propagate("tap")
        f(cast(T, self._value))
        return self

    def then_async(self, f: Callable[[T], Awaitable[Any]]) -> AsyncErrorOr[Any]:
        """Deferred form of then: `f` returns an awaitable."""
        from .deferred import AsyncErrorOr
        return AsyncErrorOr(self._then_async(f))

    def map_async(self, f: Callable[[T], Awaitable[U]]) -> AsyncErrorOr[U]:
        from .deferred import AsyncErrorOr
        return AsyncErrorOr(self._map_async(f))

    def bind_async(self, f: Callable[[T], Awaitable[ErrorOr[U]]]) -> AsyncErrorOr[U]:
        from .deferred import AsyncErrorOr
        return AsyncErrorOr(self._bind_async(f))

    def tap_async(self, f: Callable[[T], Awaitable[object]]) -> AsyncErrorOr[T]:
        from .deferred import AsyncErrorOr
        return AsyncErrorOr(self._tap_async(f))

    async def _then_async(self, f: Callable[[T], Awaitable[Any]]) -> ErrorOr[Any]:
        if self._errors:
            return self._propagate("then_async")
        return self._continue(await resolve(f(cast(T, self._value))))

    async def _map_async(self, f: Callable[[T], Awaitable[U]]) -> ErrorOr[U]:
        if self._errors:
            return self._propagate("map_async")
        return ErrorOr(await resolve(f(cast(T, self._value))))

    async def _bind_async(self, f: Callable[[T], Awaitable[ErrorOr[U]]]) -> ErrorOr[U]:
        if self._errors:
            return self._propagate("bind_async")
        return _require_container(await resolve(f(cast(T, self._value))), "bind_async")

    async def _tap_async(self, f: Callable[[T], Awaitable[object]]) -> ErrorOr[T]:
        if self._errors:
            return self._propagate("tap_async")
        await resolve(f(cast(T, self._value)))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Failure Path
    # ─────────────────────────────────────────────────────────────────

    def recover(self, fallback: Any) -> ErrorOr[Any]:
        """Replace a failure; a successful container passes through untouched.

        `fallback` is a replacement value, an Error, an error list, an ErrorOr,
        or a callable computing any of those from the error list. Callables are
        always invoked, so wrap a callable replacement value in a lambda.

        Example:
            >>> lift(Error.not_found()).recover(lambda errors: f"{len(errors)} error(s)").value()
            '1 error(s)'
        """
        if not self._errors:
            return self
        outcome = fallback(self.errors()) if callable(fallback) else fallback
        return self._recovered("recover", lift(outcome))

    def recover_async(self, fallback: Any) -> AsyncErrorOr[Any]:
        """Deferred form of recover: an async callable or an awaitable.

        An unused coroutine passed to a successful container is closed
        without running.
        """
        from .deferred import AsyncErrorOr
        return AsyncErrorOr(self._recover_async(fallback))

    async def _recover_async(self, fallback: Any) -> ErrorOr[Any]:
        if not self._errors:
            if inspect.iscoroutine(fallback):
                fallback.close()
            return self
        outcome = fallback(self.errors()) if callable(fallback) else fallback
        return self._recovered("recover_async", lift(await resolve(outcome)))

    # ─────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────

    def _propagate(self, operation: str) -> ErrorOr[Any]:
        """Carry this container's errors forward, unchanged."""
        _trace("step.skipped", operation, self._errors)
        return ErrorOr(None, self._errors)

    def _continue(self, outcome: object) -> ErrorOr[Any]:
        return self if outcome is None else lift(outcome)

    def _recovered(self, operation: str, outcome: ErrorOr[Any]) -> ErrorOr[Any]:
        if not outcome._errors:
            _trace("step.recovered", operation, self._errors)
        return outcome

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True when successful."""
        return not self._errors

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, ErrorOr):
            return NotImplemented
        return self._errors == other._errors and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._errors, self._value))

    def __repr__(self) -> str:
        if self._errors:
            return f"ErrorOr(errors={list(self._errors)!r})"
        return f"ErrorOr(value={self._value!r})"

    def format(self) -> str:
        """Debug rendering naming every piece of state. Not a stable format."""
        errors = ", ".join(str(e) for e in self.errors())
        errors_or_empty = ", ".join(str(e) for e in self._errors)
        return (
            f"ErrorOr(is_error={self.is_error()}, errors=[{errors}], errors_or_empty=[{errors_or_empty}], "
            f"value={self._value!r}, first_error={self.first_error()})"
        )

    __str__ = format


# ═════════════════════════════════════════════════════════════════════════════
# Lifting
# ═════════════════════════════════════════════════════════════════════════════


def lift(source: Any) -> ErrorOr[Any]:
    """Convert a bare value, Error or error list into an ErrorOr.

    - ErrorOr: returned as is
    - Error: failed container
    - non-empty list/tuple of Error: failed container, order preserved
    - anything else (including an empty list): successful container

    Example:
        >>> lift(5).value()
        5
        >>> lift([Error.conflict(), Error.validation()]).first_error().code
        'General.Conflict'
    """
    if isinstance(source, ErrorOr):
        return source
    if isinstance(source, Error):
        return ErrorOr(None, (source,))
    if isinstance(source, list | tuple) and source and all(isinstance(e, Error) for e in source):
        return ErrorOr(None, tuple(source))
    return ErrorOr(source)


async def resolve(outcome: Awaitable[U] | U) -> U:
    """Await `outcome` if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(outcome):
        return await outcome
    return cast(U, outcome)


def _require_container(outcome: object, operation: str) -> ErrorOr[Any]:
    if not isinstance(outcome, ErrorOr):
        raise TypeError(f"{operation}() callback must return ErrorOr, got {type(outcome).__name__}")
    return outcome


def _trace(event: str, operation: str, errors: tuple[Error, ...]) -> None:
    """Emit a chain diagnostic when chain tracing is enabled."""
    if chain_tracing_enabled():
        get_logger("erroror.chain").debug(event, operation=operation, codes=[e.code for e in errors])
