"""Outcome type for validation results without exceptions.

An Outcome is either Ok (holding a value) or Err (holding a human-readable
error message). Failures are values: a chain of on_success/bind calls stops
at the first Err and carries its message to the end untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def get_error(self) -> Optional[str]:
        return None

    def on_success(self, fn: Callable[[T], U]) -> Outcome[U]:
        return Ok(fn(self.value))

    def bind(self, fn: Callable[[T], Outcome[U]]) -> Outcome[U]:
        return fn(self.value)

    def match(
        self, on_success: Callable[[T], R], on_failure: Callable[[str], R]
    ) -> R:
        return on_success(self.value)

    def unwrap(self, default_provider: Callable[[], T]) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def __str__(self) -> str:
        return f"Ok({self.value})"


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome containing the error message."""

    error: str

    def __post_init__(self) -> None:
        if not isinstance(self.error, str):
            raise TypeError(
                f"Err message must be a str, got {type(self.error).__name__}"
            )

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def get_error(self) -> Optional[str]:
        return self.error

    def on_success(self, fn: Callable[[Any], U]) -> Outcome[U]:
        return Err(self.error)

    def bind(self, fn: Callable[[Any], Outcome[U]]) -> Outcome[U]:
        return Err(self.error)

    def match(
        self, on_success: Callable[[Any], R], on_failure: Callable[[str], R]
    ) -> R:
        return on_failure(self.error)

    def unwrap(self, default_provider: Callable[[], T]) -> T:
        return default_provider()

    def unwrap_or(self, default: T) -> T:
        return default

    def __str__(self) -> str:
        return f"Err({self.error})"


Outcome = Union[Ok[T], Err]


def ok(value: T) -> Outcome[T]:
    """Build a successful outcome."""
    return Ok(value)


def err(message: str) -> Outcome[Any]:
    """Build a failed outcome carrying ``message``."""
    return Err(message)
