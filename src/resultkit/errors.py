"""Exception hierarchy for resultkit.

Failures are data in this library; the exceptions below only surface when a
caller force-unwraps a value (``or_raise``) or composes the types incorrectly.
"""

from __future__ import annotations

from typing import Any


class ResultKitError(Exception):
    """Base exception for all resultkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ResultError(ResultKitError):
    """Raised when a Failure is unwrapped without a custom converter.

    ``detail`` is the failure payload as-is. When the payload is itself an
    exception it is also exposed as ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, detail: Any, *, hint: str | None = None) -> None:
        self.detail = detail
        self.cause: BaseException | None = (
            detail if isinstance(detail, BaseException) else None
        )
        message = (
            str(detail)
            if self.cause is not None
            else f"Result is a failure: {detail!r}"
        )
        super().__init__(message, hint=hint)
        self.__cause__ = self.cause


class OptionEmptyError(ResultKitError):
    """Raised when an empty Option is unwrapped without a custom error."""

    def __init__(
        self, message: str = "Option is empty", *, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)


class InvariantViolationError(ResultKitError, TypeError):
    """Raised when a value that must be a Result is something else.

    Signals a composition bug (e.g. a ``flat_map`` callback returning a plain
    value), never an expected failure.
    """

    def __init__(self, message: str, received: Any = None) -> None:
        self.received = received
        super().__init__(
            message,
            hint="Return Success/Failure, an AsyncResult, or an awaitable of a Result.",
        )


__all__ = (
    "InvariantViolationError",
    "OptionEmptyError",
    "ResultError",
    "ResultKitError",
)
