"""AsyncResult: an awaitable that settles to a Result.

An ``AsyncResult`` wraps either an already settled ``Result`` or an awaitable
that will produce one, and offers the same combinators as ``Result``. Every
combinator returns a new ``AsyncResult`` without awaiting anything; the work
runs when the returned object is awaited. Until then no coroutine object is
created, so a chain that is built and dropped leaves nothing behind.

Settlement is memoized: the first ``await`` schedules the underlying awaitable
as a single asyncio task, and every later or concurrent ``await`` observes that
same task. Continuations therefore run exactly once, and concurrent waiters
resume in the order they started waiting. Cancelling one waiter does not
cancel the shared task.

Example:
    def load_name(user_id: int) -> AsyncResult[str, Exception]:
        return (
            AsyncResult.attempt(lambda: fetch_user(user_id))
            .map(lambda user: user["name"])
            .try_map(str.title)
        )

    name = await load_name(1).or_default("anonymous")
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any, Never

from resultkit.errors import InvariantViolationError
from resultkit.result import (
    Failure,
    Success,
    captured_error,
    expect_result,
    is_result,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Generator

    from resultkit.result import CatchFn, Result

log = logging.getLogger(__name__)

type Flattenable[V, E] = Result[V, E] | AsyncResult[V, E] | Awaitable[Result[V, E]]


class AsyncResult[V, E]:
    """A pending computation resolving to ``Result[V, E]``.

    Build instances with ``success``, ``failure``, ``of`` or ``attempt``.
    Passing an awaitable straight to the constructor skips exception folding:
    awaiting such an instance re-raises whatever the awaitable raised.
    """

    __slots__ = ("_factory", "_future", "_settled")

    def __init__(self, source: Result[V, E] | Awaitable[Result[V, E]]) -> None:
        self._future: asyncio.Future[Any] | None = None
        self._factory: Callable[[], Awaitable[Any]] | None
        if is_result(source):
            self._settled: Result[V, E] | None = source  # type: ignore[assignment]
            self._factory = None
        else:
            self._settled = None
            self._factory = lambda: source

    @classmethod
    def _deferred(
        cls, factory: Callable[[], Awaitable[Any]]
    ) -> AsyncResult[Any, Any]:
        """Build an instance whose awaitable is created on first await."""
        instance = cls.__new__(cls)
        instance._future = None
        instance._settled = None
        instance._factory = factory
        return instance

    # --- Constructors ---

    @classmethod
    def success[T](cls, value: T) -> AsyncResult[T, Never]:
        return cls(Success(value))

    @classmethod
    def failure[F](cls, error: F) -> AsyncResult[Never, F]:
        return cls(Failure(error))

    @classmethod
    def of[T, F](
        cls,
        source: Result[T, F] | Awaitable[Result[T, F]],
        catch: CatchFn[Any] | None = None,
    ) -> AsyncResult[T, Any]:
        """Wrap a Result, or an awaitable of one, folding raised exceptions.

        Args:
            source: A settled Result, an AsyncResult, or any awaitable that
                resolves to a Result.
            catch: Optional function shaping an exception raised by ``source``
                into the failure payload.

        Raises:
            InvariantViolationError: ``source`` is neither a Result nor awaitable.
        """
        if is_result(source):
            return cls(source)
        if not inspect.isawaitable(source):
            raise InvariantViolationError(
                "AsyncResult.of expects a Result or an awaitable, "
                f"got {type(source).__name__}",
                received=source,
            )
        return cls._deferred(lambda: _fold_result(source, catch))

    @classmethod
    def attempt[T](
        cls,
        fn: Callable[[], T | Awaitable[T]],
        catch: CatchFn[Any] | None = None,
    ) -> AsyncResult[T, Any]:
        """Run ``fn`` now and capture its outcome, sync or async.

        A synchronous raise settles immediately as a Failure. An awaitable
        return value is awaited on first ``await`` and an exception it raises
        becomes a Failure. Any other return value is a Success.
        """
        try:
            produced = fn()
        except Exception as exc:
            return cls(Failure(captured_error(exc, catch)))
        if inspect.isawaitable(produced):
            return cls._deferred(lambda: _fold_value(produced, catch))
        return cls(Success(produced))

    # --- Awaiting ---

    async def _settle(self) -> Result[V, E]:
        if self._settled is not None:
            return self._settled
        if self._future is None:
            factory: Any = self._factory
            self._factory = None
            log.debug("Scheduling settlement of %r", factory)
            self._future = asyncio.ensure_future(factory())
        # Waiters are shielded from each other's cancellation.
        settled = await asyncio.shield(self._future)
        return expect_result(settled)  # type: ignore[return-value]

    def __await__(self) -> Generator[Any, None, Result[V, E]]:
        return self._settle().__await__()

    def __repr__(self) -> str:
        if self._settled is not None:
            return f"AsyncResult({self._settled!r})"
        return "AsyncResult(<pending>)"

    # --- Extraction ---

    async def match[X, Y](
        self, on_success: Callable[[V], X], on_failure: Callable[[E], Y]
    ) -> X | Y:
        return (await self).match(on_success, on_failure)

    async def value(self) -> V | None:
        return (await self).value

    async def error(self) -> E | None:
        return (await self).error

    async def or_none(self) -> V | None:
        return (await self).or_none()

    async def or_default(self, default: V) -> V:
        return (await self).or_default(default)

    async def or_recover(self, fn: Callable[[E], V]) -> V:
        return (await self).or_recover(fn)

    async def or_raise(self, fn: Callable[[E], BaseException] | None = None) -> V:
        """Return the value, or raise ``fn(error)`` / ``ResultError(error)``."""
        return (await self).or_raise(fn)

    # --- Inspection ---

    def on_success(self, fn: Callable[[V], object]) -> AsyncResult[V, E]:
        async def inspected() -> Result[V, E]:
            return (await self).on_success(fn)

        return AsyncResult._deferred(inspected)

    def on_failure(self, fn: Callable[[E], object]) -> AsyncResult[V, E]:
        async def inspected() -> Result[V, E]:
            return (await self).on_failure(fn)

        return AsyncResult._deferred(inspected)

    # --- Combination ---

    def and_[U, F](
        self, other: AsyncResult[U, F] | Result[U, F]
    ) -> AsyncResult[V | U, E | F]:
        """Settle both operands; return ``other`` unless this one failed."""
        right = _as_async_result(other)

        async def combined() -> Result[V | U, E | F]:
            first, second = await asyncio.gather(self._settle(), right._settle())
            return first.and_(second)

        return AsyncResult._deferred(combined)

    def or_[U, F](
        self, other: AsyncResult[U, F] | Result[U, F]
    ) -> AsyncResult[V | U, E | F]:
        """Settle both operands; return this one unless it failed."""
        right = _as_async_result(other)

        async def combined() -> Result[V | U, E | F]:
            first, second = await asyncio.gather(self._settle(), right._settle())
            return first.or_(second)

        return AsyncResult._deferred(combined)

    # --- Value side ---

    def map[U](self, fn: Callable[[V], U]) -> AsyncResult[U, E]:
        async def mapped() -> Result[U, E]:
            return (await self).map(fn)

        return AsyncResult._deferred(mapped)

    def try_map[U](
        self, fn: Callable[[V], U], catch: CatchFn[Any] | None = None
    ) -> AsyncResult[U, Any]:
        async def mapped() -> Result[U, Any]:
            settled = await _fold_result(self, catch)
            return settled.try_map(fn, catch)

        return AsyncResult._deferred(mapped)

    def flat_map[U, F](
        self, fn: Callable[[V], Flattenable[U, F]]
    ) -> AsyncResult[U, E | F]:
        """Chain an AsyncResult-producing function on the value.

        The inner computation settles before the returned AsyncResult does.
        """

        async def chained() -> Result[U, E | F]:
            result = await self
            if isinstance(result, Failure):
                return result  # type: ignore[return-value]
            return await _as_async_result(fn(result.value))

        return AsyncResult._deferred(chained)

    def try_flat_map[U, F](
        self, fn: Callable[[V], Flattenable[U, F]], catch: CatchFn[Any] | None = None
    ) -> AsyncResult[U, Any]:
        """Like ``flat_map``, folding exceptions from ``fn`` and its result.

        Both a synchronous raise inside ``fn`` and a raise while awaiting the
        returned computation become a Failure.
        """

        async def chained() -> Result[U, Any]:
            result = await self
            if isinstance(result, Failure):
                return result
            return await _as_async_result(fn(result.value))

        return AsyncResult._deferred(lambda: _fold_result(chained(), catch))

    # --- Error side ---

    def recover(self, fn: Callable[[E], V]) -> AsyncResult[V, Never]:
        async def recovered() -> Result[V, Never]:
            return (await self).recover(fn)

        return AsyncResult._deferred(recovered)

    def try_recover(
        self, fn: Callable[[E], V], catch: CatchFn[Any] | None = None
    ) -> AsyncResult[V, Any]:
        async def recovered() -> Result[V, Any]:
            settled = await _fold_result(self, catch)
            return settled.try_recover(fn, catch)

        return AsyncResult._deferred(recovered)

    def flat_recover[F](
        self, fn: Callable[[E], Flattenable[V, F]]
    ) -> AsyncResult[V, F]:
        async def chained() -> Result[V, F]:
            result = await self
            if isinstance(result, Success):
                return result  # type: ignore[return-value]
            return await _as_async_result(fn(result.error))

        return AsyncResult._deferred(chained)

    def try_flat_recover[F](
        self, fn: Callable[[E], Flattenable[V, F]], catch: CatchFn[Any] | None = None
    ) -> AsyncResult[V, Any]:
        async def chained() -> Result[V, Any]:
            result = await self
            if isinstance(result, Success):
                return result
            return await _as_async_result(fn(result.error))

        return AsyncResult._deferred(lambda: _fold_result(chained(), catch))

    def map_error[F](self, fn: Callable[[E], F]) -> AsyncResult[V, F]:
        async def mapped() -> Result[V, F]:
            return (await self).map_error(fn)

        return AsyncResult._deferred(mapped)


# --- Helpers ---


async def _fold_result[V, E](
    pending: Awaitable[Result[V, E]], catch: CatchFn[Any] | None
) -> Result[V, Any]:
    try:
        settled = await pending
    except InvariantViolationError:
        raise
    except Exception as exc:
        return Failure(captured_error(exc, catch))
    return expect_result(settled)


async def _fold_value[T](
    pending: Awaitable[T], catch: CatchFn[Any] | None
) -> Result[T, Any]:
    try:
        value = await pending
    except InvariantViolationError:
        raise
    except Exception as exc:
        return Failure(captured_error(exc, catch))
    return Success(value)


def _as_async_result[V, E](produced: Flattenable[V, E]) -> AsyncResult[V, E]:
    if isinstance(produced, AsyncResult):
        return produced
    if is_result(produced) or inspect.isawaitable(produced):
        return AsyncResult(produced)  # type: ignore[arg-type]
    raise InvariantViolationError(
        "Expected a Result, an AsyncResult or an awaitable, "
        f"got {type(produced).__name__}",
        received=produced,
    )


def flat_attempt[T, V](
    fn: Callable[[T], Flattenable[V, Any]], arg: T, catch: CatchFn[Any] | None
) -> AsyncResult[V, Any]:
    """Call ``fn(arg)`` and flatten its outcome into a folded AsyncResult."""
    try:
        produced = fn(arg)
    except Exception as exc:
        return AsyncResult(Failure(captured_error(exc, catch)))
    if is_result(produced):
        return AsyncResult(produced)  # type: ignore[arg-type]
    return AsyncResult.of(_as_async_result(produced), catch)


__all__ = ("AsyncResult",)
