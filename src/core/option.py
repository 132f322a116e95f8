"""Option type for values that may be legitimately absent.

An Option is either Some (holding exactly one value) or Nothing. Absence is
not failure and carries no reason; use an Outcome when a reason is needed.

Presence is orthogonal to the payload: ``some(None)`` is present, and
``some(none())`` is a distinct value from ``none()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """Present option containing a value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        return Some(fn(self.value))

    def bind(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.value)

    def match(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        return on_some(self.value)

    def unwrap(self, default_provider: Callable[[], T]) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def __str__(self) -> str:
        return f"Some({self.value})"


@dataclass(frozen=True, slots=True)
class Nothing:
    """Absent option. Holds no value."""

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], U]) -> Option[U]:
        return _NOTHING

    def bind(self, fn: Callable[[Any], Option[U]]) -> Option[U]:
        return _NOTHING

    def match(self, on_some: Callable[[Any], R], on_none: Callable[[], R]) -> R:
        return on_none()

    def unwrap(self, default_provider: Callable[[], T]) -> T:
        # Evaluated on every call, never cached.
        return default_provider()

    def unwrap_or(self, default: T) -> T:
        return default

    def __str__(self) -> str:
        return "None"


Option = Union[Some[T], Nothing]

_NOTHING = Nothing()


def some(value: T) -> Option[T]:
    """Wrap ``value`` as present."""
    return Some(value)


def none() -> Option[Any]:
    """Return the absent option."""
    return _NOTHING
