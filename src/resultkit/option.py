"""Option: a container holding zero or one value.

``Some`` wraps a present value, ``Nothing`` is the absent variant. Both are
immutable; every operation returns an Option (or a plain value for the
``or_*`` extractors) and never mutates in place.

Example:
    >>> some(3).take_if(lambda x: x > 1).map(str).or_default("none")
    '3'
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Never

from resultkit.errors import OptionEmptyError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@dataclasses.dataclass(frozen=True, slots=True)
class Some[T]:
    """A present value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def map[U](self, fn: Callable[[T], U]) -> Some[U]:
        return Some(fn(self.value))

    def flat_map[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.value)

    def or_default(self, default: T) -> T:
        return self.value

    def or_build(self, factory: Callable[[], T]) -> T:
        return self.value

    def or_raise(self, error_factory: Callable[[], BaseException] | None = None) -> T:
        return self.value

    def or_none(self) -> T | None:
        return self.value

    def take_if(self, predicate: Callable[[T], Any]) -> Option[T]:
        return self if predicate(self.value) else _NOTHING

    def take_if_not_none(self) -> Option[T]:
        """Re-check the held value, turning ``Some(None)`` into ``Nothing``."""
        return from_nullable(self.value)

    def if_present(self, fn: Callable[[T], object]) -> Some[T]:
        fn(self.value)
        return self

    def if_absent(self, fn: Callable[[], object]) -> Some[T]:
        return self

    def and_[U](self, other: Option[U]) -> Option[U]:
        return other

    def or_(self, other: Option[T]) -> Some[T]:
        return self

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __len__(self) -> int:
        return 1


@dataclasses.dataclass(frozen=True, slots=True)
class Nothing:
    """The absent variant. Carries no data; all instances are equal."""

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], object]) -> Nothing:
        return self

    def flat_map(self, fn: Callable[[Any], Option[Any]]) -> Nothing:
        return self

    def or_default[T](self, default: T) -> T:
        return default

    def or_build[T](self, factory: Callable[[], T]) -> T:
        return factory()

    def or_raise(
        self, error_factory: Callable[[], BaseException] | None = None
    ) -> Never:
        if error_factory is not None:
            raise error_factory()
        raise OptionEmptyError()

    def or_none(self) -> None:
        return None

    def take_if(self, predicate: Callable[[Any], Any]) -> Nothing:
        return self

    def take_if_not_none(self) -> Nothing:
        return self

    def if_present(self, fn: Callable[[Any], object]) -> Nothing:
        return self

    def if_absent(self, fn: Callable[[], object]) -> Nothing:
        fn()
        return self

    def and_(self, other: Option[Any]) -> Nothing:
        return self

    def or_[T](self, other: Option[T]) -> Option[T]:
        return other

    def __iter__(self) -> Iterator[Never]:
        return iter(())

    def __len__(self) -> int:
        return 0


type Option[T] = Some[T] | Nothing

_NOTHING = Nothing()


def some[T](value: T) -> Some[T]:
    """Wrap ``value`` as a present Option, even when it is ``None``."""
    return Some(value)


def none() -> Nothing:
    """Return the absent Option."""
    return _NOTHING


def from_nullable[T](value: T | None) -> Option[T]:
    """Return ``Nothing`` for ``None``, otherwise ``Some(value)``."""
    return _NOTHING if value is None else Some(value)


def is_option(obj: object) -> bool:
    """Return True when ``obj`` is a ``Some`` or a ``Nothing``."""
    return isinstance(obj, Some | Nothing)


__all__ = (
    "Nothing",
    "Option",
    "Some",
    "from_nullable",
    "is_option",
    "none",
    "some",
)
