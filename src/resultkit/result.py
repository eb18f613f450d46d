"""Result: a value or an error from a synchronous computation.

``Success`` holds a value, ``Failure`` holds an error. Exactly one of
``value``/``error`` is meaningful; the other attribute always reads ``None``.

Combinators come in two flavours:

- Unchecked (``map``, ``flat_map``, ``recover``, ...): the callback is
  trusted not to raise. If it does, the exception propagates to the caller.
- Checked (``try_map``, ``try_flat_map``, ``try_recover``, ...): any
  ``Exception`` raised by the callback becomes a ``Failure``. The payload is
  the exception itself, or ``catch(exception)`` when a catch function is given.

The ``*_async`` methods lift a Result into an ``AsyncResult`` pipeline.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Never, cast, overload

from resultkit.errors import InvariantViolationError, ResultError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from resultkit.async_result import AsyncResult, Flattenable

log = logging.getLogger(__name__)

type CatchFn[F] = Callable[[Exception], F]


def captured_error(exc: Exception, catch: CatchFn[Any] | None) -> Any:
    """Shape an exception caught at a try boundary into a failure payload."""
    log.debug("Captured %s at try boundary", type(exc).__name__)
    return exc if catch is None else catch(exc)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[V, E]:
    """A successful computation holding ``value``."""

    value: V

    @property
    def error(self) -> None:
        return None

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def match[X, Y](
        self, on_success: Callable[[V], X], on_failure: Callable[[E], Y]
    ) -> X | Y:
        return on_success(self.value)

    # --- Extraction ---

    def or_default(self, default: V) -> V:
        return self.value

    def or_recover(self, fn: Callable[[E], V]) -> V:
        return self.value

    def or_raise(self, fn: Callable[[E], BaseException] | None = None) -> V:
        return self.value

    def or_none(self) -> V | None:
        return self.value

    # --- Inspection ---

    def on_success(self, fn: Callable[[V], object]) -> Success[V, E]:
        fn(self.value)
        return self

    def on_failure(self, fn: Callable[[E], object]) -> Success[V, E]:
        return self

    # --- Combination ---

    def and_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        return other

    def or_[U, F](self, other: Result[U, F]) -> Success[V, E]:
        return self

    # --- Value side ---

    def map[U](self, fn: Callable[[V], U]) -> Success[U, E]:
        return Success(fn(self.value))

    def try_map[U](
        self, fn: Callable[[V], U], catch: CatchFn[Any] | None = None
    ) -> Result[U, Any]:
        """Map the value, turning an exception raised by ``fn`` into a Failure."""
        try:
            mapped = fn(self.value)
        except Exception as exc:
            return Failure(captured_error(exc, catch))
        return Success(mapped)

    def flat_map[U, F](self, fn: Callable[[V], Result[U, F]]) -> Result[U, F]:
        return fn(self.value)

    def try_flat_map[U, F](
        self, fn: Callable[[V], Result[U, F]], catch: CatchFn[Any] | None = None
    ) -> Result[U, Any]:
        try:
            return fn(self.value)
        except Exception as exc:
            return Failure(captured_error(exc, catch))

    # --- Error side ---

    def recover(self, fn: Callable[[E], V]) -> Success[V, Never]:
        return cast("Success[V, Never]", self)

    def try_recover(
        self, fn: Callable[[E], V], catch: CatchFn[Any] | None = None
    ) -> Success[V, Never]:
        return cast("Success[V, Never]", self)

    def flat_recover[F](self, fn: Callable[[E], Result[V, F]]) -> Success[V, F]:
        return cast("Success[V, F]", self)

    def try_flat_recover[F](
        self, fn: Callable[[E], Result[V, F]], catch: CatchFn[Any] | None = None
    ) -> Success[V, F]:
        return cast("Success[V, F]", self)

    def map_error[F](self, fn: Callable[[E], F]) -> Success[V, F]:
        return cast("Success[V, F]", self)

    # --- Bridges to AsyncResult ---

    def map_async[U](
        self, fn: Callable[[V], U | Awaitable[U]], catch: CatchFn[Any] | None = None
    ) -> AsyncResult[U, Any]:
        """Map the value with a sync or async function inside an AsyncResult.

        Exceptions raised by ``fn``, or by the awaitable it returns, become a
        Failure.
        """
        from resultkit.async_result import AsyncResult

        value = self.value
        return AsyncResult.attempt(lambda: fn(value), catch)

    def flat_map_async[U](
        self,
        fn: Callable[[V], Flattenable[U, Any]],
        catch: CatchFn[Any] | None = None,
    ) -> AsyncResult[U, Any]:
        from resultkit.async_result import flat_attempt

        return flat_attempt(fn, self.value, catch)

    def recover_async(
        self, fn: Callable[[E], V | Awaitable[V]], catch: CatchFn[Any] | None = None
    ) -> AsyncResult[V, Any]:
        from resultkit.async_result import AsyncResult

        return AsyncResult.of(self)

    def flat_recover_async(
        self,
        fn: Callable[[E], Flattenable[V, Any]],
        catch: CatchFn[Any] | None = None,
    ) -> AsyncResult[V, Any]:
        from resultkit.async_result import AsyncResult

        return AsyncResult.of(self)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[V, E]:
    """A failed computation holding ``error``."""

    error: E

    @property
    def value(self) -> None:
        return None

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def match[X, Y](
        self, on_success: Callable[[V], X], on_failure: Callable[[E], Y]
    ) -> X | Y:
        return on_failure(self.error)

    # --- Extraction ---

    def or_default(self, default: V) -> V:
        return default

    def or_recover(self, fn: Callable[[E], V]) -> V:
        return fn(self.error)

    def or_raise(self, fn: Callable[[E], BaseException] | None = None) -> Never:
        """Raise ``fn(error)``, or a ``ResultError`` carrying the error."""
        if fn is not None:
            raise fn(self.error)
        err = ResultError(self.error)
        raise err from err.cause

    def or_none(self) -> None:
        return None

    # --- Inspection ---

    def on_success(self, fn: Callable[[V], object]) -> Failure[V, E]:
        return self

    def on_failure(self, fn: Callable[[E], object]) -> Failure[V, E]:
        fn(self.error)
        return self

    # --- Combination ---

    def and_[U, F](self, other: Result[U, F]) -> Failure[V, E]:
        return self

    def or_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        return other

    # --- Value side ---

    def map[U](self, fn: Callable[[V], U]) -> Failure[U, E]:
        return cast("Failure[U, E]", self)

    def try_map[U](
        self, fn: Callable[[V], U], catch: CatchFn[Any] | None = None
    ) -> Failure[U, E]:
        return cast("Failure[U, E]", self)

    def flat_map[U, F](self, fn: Callable[[V], Result[U, F]]) -> Failure[U, E]:
        return cast("Failure[U, E]", self)

    def try_flat_map[U, F](
        self, fn: Callable[[V], Result[U, F]], catch: CatchFn[Any] | None = None
    ) -> Failure[U, E]:
        return cast("Failure[U, E]", self)

    # --- Error side ---

    def recover(self, fn: Callable[[E], V]) -> Success[V, Never]:
        return Success(fn(self.error))

    def try_recover(
        self, fn: Callable[[E], V], catch: CatchFn[Any] | None = None
    ) -> Result[V, Any]:
        """Recover from the error; an exception raised by ``fn`` becomes a Failure."""
        try:
            recovered = fn(self.error)
        except Exception as exc:
            return Failure(captured_error(exc, catch))
        return Success(recovered)

    def flat_recover[F](self, fn: Callable[[E], Result[V, F]]) -> Result[V, F]:
        return fn(self.error)

    def try_flat_recover[F](
        self, fn: Callable[[E], Result[V, F]], catch: CatchFn[Any] | None = None
    ) -> Result[V, Any]:
        try:
            return fn(self.error)
        except Exception as exc:
            return Failure(captured_error(exc, catch))

    def map_error[F](self, fn: Callable[[E], F]) -> Failure[V, F]:
        return Failure(fn(self.error))

    # --- Bridges to AsyncResult ---

    def map_async[U](
        self, fn: Callable[[V], U | Awaitable[U]], catch: CatchFn[Any] | None = None
    ) -> AsyncResult[U, E]:
        from resultkit.async_result import AsyncResult

        return AsyncResult.failure(self.error)

    def flat_map_async[U](
        self,
        fn: Callable[[V], Flattenable[U, Any]],
        catch: CatchFn[Any] | None = None,
    ) -> AsyncResult[U, E]:
        from resultkit.async_result import AsyncResult

        return AsyncResult.failure(self.error)

    def recover_async(
        self, fn: Callable[[E], V | Awaitable[V]], catch: CatchFn[Any] | None = None
    ) -> AsyncResult[V, Any]:
        from resultkit.async_result import AsyncResult

        error = self.error
        return AsyncResult.attempt(lambda: fn(error), catch)

    def flat_recover_async(
        self,
        fn: Callable[[E], Flattenable[V, Any]],
        catch: CatchFn[Any] | None = None,
    ) -> AsyncResult[V, Any]:
        from resultkit.async_result import flat_attempt

        return flat_attempt(fn, self.error, catch)


type Result[V, E] = Success[V, E] | Failure[V, E]


# --- Constructors ---


def success[V](value: V) -> Success[V, Never]:
    return Success(value)


def failure[E](error: E) -> Failure[Never, E]:
    return Failure(error)


@overload
def attempt[V](fn: Callable[[], V]) -> Result[V, Exception]: ...


@overload
def attempt[V, F](fn: Callable[[], V], catch: CatchFn[F]) -> Result[V, F]: ...


def attempt[V](
    fn: Callable[[], V], catch: CatchFn[Any] | None = None
) -> Result[V, Any]:
    """Run ``fn`` and capture its outcome.

    Args:
        fn: Zero-argument callable that may raise.
        catch: Optional function shaping a raised exception into the error payload.

    Returns:
        ``Success(fn())`` on normal return, otherwise ``Failure(exc)`` or
        ``Failure(catch(exc))``.

    Example:
        attempt(lambda: int("42"))            # Success(value=42)
        attempt(lambda: int("x"), lambda e: "not a number")
        # Failure(error='not a number')
    """
    try:
        value = fn()
    except Exception as exc:
        return Failure(captured_error(exc, catch))
    return Success(value)


def is_result(obj: object) -> bool:
    """Return True when ``obj`` is a ``Success`` or a ``Failure``."""
    return isinstance(obj, Success | Failure)


def expect_result(obj: object) -> Result[Any, Any]:
    """Return ``obj`` if it is a Result, else raise InvariantViolationError."""
    if isinstance(obj, Success | Failure):
        return obj
    raise InvariantViolationError(
        f"Expected a Success or Failure, got {type(obj).__name__}", received=obj
    )


__all__ = (
    "Failure",
    "Result",
    "Success",
    "attempt",
    "failure",
    "is_result",
    "success",
)
