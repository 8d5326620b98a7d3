"""Deferred ErrorOr: a container that is not yet available.

AsyncErrorOr wraps an awaitable that resolves to an ErrorOr and exposes the
same combinators, so a chain reads the same whether each side is immediate or
asynchronous:

    container     callback     method
    ErrorOr       immediate    ErrorOr.then
    ErrorOr       awaitable    ErrorOr.then_async
    AsyncErrorOr  immediate    AsyncErrorOr.then
    AsyncErrorOr  awaitable    AsyncErrorOr.then_async

Nothing runs until the chain is awaited. Each step then awaits the previous
container to completion before checking its state, so steps never overlap.
Cancellation of any underlying awaitable propagates as is and aborts the rest
of the chain.

Example:
    >>> async def load(user_id: int) -> ErrorOr[dict]:
    ...     return lift({"id": user_id, "name": "ada"})
    >>>
    >>> name = await defer(load(1)).then(lambda u: u["name"]).then_async(fetch_greeting)
"""

from __future__ import annotations

from collections.abc import Awaitable, Generator
from functools import wraps
from typing import Any, Callable, Generic, ParamSpec, TypeVar

from erroror.errors import Error

from .result import ErrorOr, R, T, U, lift, resolve

P = ParamSpec("P")


class AsyncErrorOr(Generic[T]):
    """Awaitable handle to a future ErrorOr with chainable combinators.

    Awaiting yields the resolved ErrorOr. The resolved container is kept, so a
    handle can be awaited again once it has completed; awaiting the same
    pending handle from two tasks at once is not supported.
    """

    __slots__ = ("_awaitable", "_resolved")

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        self._awaitable: Awaitable[Any] | None = awaitable
        self._resolved: ErrorOr[T] | None = None

    @classmethod
    def of(cls, result: ErrorOr[T]) -> AsyncErrorOr[T]:
        """Handle that is already resolved to `result`."""
        handle: AsyncErrorOr[T] = cls.__new__(cls)
        handle._awaitable, handle._resolved = None, result
        return handle

    def __await__(self) -> Generator[Any, None, ErrorOr[T]]:
        return self._resolve().__await__()

    async def _resolve(self) -> ErrorOr[T]:
        if self._resolved is None:
            # Plain values and errors from the awaitable are lifted
            self._resolved = lift(await self._awaitable)  # type: ignore[misc]
            self._awaitable = None
        return self._resolved

    def _chain(self, step: Callable[[ErrorOr[T]], Any]) -> AsyncErrorOr[Any]:
        return AsyncErrorOr(self._run(step))

    async def _run(self, step: Callable[[ErrorOr[T]], Any]) -> ErrorOr[Any]:
        return await resolve(step(await self._resolve()))

    # ─────────────────────────────────────────────────────────────────
    # Success Path
    # ─────────────────────────────────────────────────────────────────

    def then(self, f: Callable[[T], Any]) -> AsyncErrorOr[Any]:
        return self._chain(lambda r: r.then(f))

    def map(self, f: Callable[[T], U]) -> AsyncErrorOr[U]:
        return self._chain(lambda r: r.map(f))

    def bind(self, f: Callable[[T], ErrorOr[U]]) -> AsyncErrorOr[U]:
        return self._chain(lambda r: r.bind(f))

    def tap(self, f: Callable[[T], object]) -> AsyncErrorOr[T]:
        return self._chain(lambda r: r.tap(f))

    def then_async(self, f: Callable[[T], Awaitable[Any]]) -> AsyncErrorOr[Any]:
        return self._chain(lambda r: r.then_async(f))

    def map_async(self, f: Callable[[T], Awaitable[U]]) -> AsyncErrorOr[U]:
        return self._chain(lambda r: r.map_async(f))

    def bind_async(self, f: Callable[[T], Awaitable[ErrorOr[U]]]) -> AsyncErrorOr[U]:
        return self._chain(lambda r: r.bind_async(f))

    def tap_async(self, f: Callable[[T], Awaitable[object]]) -> AsyncErrorOr[T]:
        return self._chain(lambda r: r.tap_async(f))

    # ─────────────────────────────────────────────────────────────────
    # Failure Path
    # ─────────────────────────────────────────────────────────────────

    def recover(self, fallback: Any) -> AsyncErrorOr[Any]:
        return self._chain(lambda r: r.recover(fallback))

    def recover_async(self, fallback: Any) -> AsyncErrorOr[Any]:
        return self._chain(lambda r: r.recover_async(fallback))

    # ─────────────────────────────────────────────────────────────────
    # Exhaustive Handling (terminal)
    # ─────────────────────────────────────────────────────────────────

    async def switch(self, on_value: Callable[[T], object], on_error: Callable[[list[Error]], object]) -> None:
        (await self._resolve()).switch(on_value, on_error)

    async def switch_first(self, on_value: Callable[[T], object], on_first_error: Callable[[Error], object]) -> None:
        (await self._resolve()).switch_first(on_value, on_first_error)

    async def match(self, on_value: Callable[[T], R], on_error: Callable[[list[Error]], R]) -> R:
        return (await self._resolve()).match(on_value, on_error)

    async def match_first(self, on_value: Callable[[T], R], on_first_error: Callable[[Error], R]) -> R:
        return (await self._resolve()).match_first(on_value, on_first_error)

    async def switch_async(
        self,
        on_value: Callable[[T], Awaitable[object]],
        on_error: Callable[[list[Error]], Awaitable[object]],
    ) -> None:
        await (await self._resolve()).switch_async(on_value, on_error)

    async def switch_first_async(
        self,
        on_value: Callable[[T], Awaitable[object]],
        on_first_error: Callable[[Error], Awaitable[object]],
    ) -> None:
        await (await self._resolve()).switch_first_async(on_value, on_first_error)

    async def match_async(
        self,
        on_value: Callable[[T], Awaitable[R]],
        on_error: Callable[[list[Error]], Awaitable[R]],
    ) -> R:
        return await (await self._resolve()).match_async(on_value, on_error)

    async def match_first_async(
        self,
        on_value: Callable[[T], Awaitable[R]],
        on_first_error: Callable[[Error], Awaitable[R]],
    ) -> R:
        return await (await self._resolve()).match_first_async(on_value, on_first_error)

    def __repr__(self) -> str:
        if self._resolved is not None:
            return f"AsyncErrorOr(resolved={self._resolved!r})"
        return "AsyncErrorOr(<pending>)"


# ═════════════════════════════════════════════════════════════════════════════
# Entry Points
# ═════════════════════════════════════════════════════════════════════════════


def defer(source: Awaitable[Any] | ErrorOr[T]) -> AsyncErrorOr[Any]:
    """Start a deferred chain from an awaitable or an existing ErrorOr.

    Whatever the awaitable resolves to is lifted (see lift()).
    """
    if isinstance(source, AsyncErrorOr):
        return source
    if isinstance(source, ErrorOr):
        return AsyncErrorOr.of(source)
    return AsyncErrorOr(source)


def deferred(fn: Callable[P, Awaitable[Any]]) -> Callable[P, AsyncErrorOr[Any]]:
    """Decorate an async function so calls return a chainable AsyncErrorOr.

    Example:
        >>> @deferred
        ... async def find_user(user_id: int) -> ErrorOr[User]:
        ...     ...
        >>> await find_user(7).then(lambda u: u.email)
    """
    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> AsyncErrorOr[Any]:
        return AsyncErrorOr(fn(*args, **kwargs))
    return wrapper
