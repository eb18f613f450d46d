"""resultkit: explicit, chainable success/failure and optional values.

Public API:
    - Result (Success | Failure): value-or-error from a synchronous computation
    - AsyncResult: awaitable settling to a Result, with the same combinators
    - Option (Some | Nothing): zero-or-one value container
    - ResultError: raised when a Failure is force-unwrapped
"""

from __future__ import annotations

import logging

from resultkit.async_result import AsyncResult
from resultkit.errors import (
    InvariantViolationError,
    OptionEmptyError,
    ResultError,
    ResultKitError,
)
from resultkit.option import Nothing, Option, Some, from_nullable, is_option, none, some
from resultkit.result import (
    Failure,
    Result,
    Success,
    attempt,
    failure,
    is_result,
    success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "AsyncResult",
    "Failure",
    "InvariantViolationError",
    "Nothing",
    "Option",
    "OptionEmptyError",
    "Result",
    "ResultError",
    "ResultKitError",
    "Some",
    "Success",
    "attempt",
    "failure",
    "from_nullable",
    "is_option",
    "is_result",
    "none",
    "some",
    "success",
]
