"""Validated value objects that make up an address.

Each component exposes a single ``create`` factory that returns an Outcome
with either the valid instance or the first rule it violates. Constructing a
component directly with invalid text raises ValueError, so every instance is
valid for its lifetime.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional, TypeVar

from src.core.outcome import Err, Ok, Outcome

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="_Component")


def _any_char(char: str) -> bool:
    return True


def _postal_char(char: str) -> bool:
    return char.isalnum() or char.isspace() or char == "-"


def _country_char(char: str) -> bool:
    return char.isalpha() or char.isspace()


@dataclass(frozen=True, slots=True)
class _Component:
    """Non-blank text with a maximum length and an allowed character set."""

    value: str

    label: ClassVar[str] = "component"
    max_length: ClassVar[int] = 0
    allowed_char: ClassVar[Callable[[str], bool]] = staticmethod(_any_char)

    def __post_init__(self) -> None:
        violation = self.violation(self.value)
        if violation is not None:
            raise ValueError(violation)

    @classmethod
    def violation(cls, raw: Optional[str]) -> Optional[str]:
        """Return the first rule ``raw`` breaks, or None if it is valid."""
        if raw is None or not raw.strip():
            return f"Invalid {cls.label}"
        if len(raw) > cls.max_length:
            return (
                f"{cls.label.capitalize()} cannot be longer than "
                f"{cls.max_length} characters."
            )
        if not all(cls.allowed_char(char) for char in raw):
            return f"Invalid {cls.label}"
        return None

    @classmethod
    def create(cls: type[C], raw: Optional[str]) -> Outcome[C]:
        violation = cls.violation(raw)
        if violation is not None:
            logger.debug("Rejected %s: %s", cls.label, violation)
            return Err(violation)
        return Ok(cls(raw))  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Street(_Component):
    label: ClassVar[str] = "street"
    max_length: ClassVar[int] = 100


@dataclass(frozen=True, slots=True)
class City(_Component):
    label: ClassVar[str] = "city"
    max_length: ClassVar[int] = 50


@dataclass(frozen=True, slots=True)
class PostalCode(_Component):
    """Letters, digits, whitespace and hyphens only."""

    label: ClassVar[str] = "postal code"
    max_length: ClassVar[int] = 10
    allowed_char: ClassVar[Callable[[str], bool]] = staticmethod(_postal_char)


@dataclass(frozen=True, slots=True)
class BuildingNumber(_Component):
    label: ClassVar[str] = "building number"
    max_length: ClassVar[int] = 10


@dataclass(frozen=True, slots=True)
class Country(_Component):
    """Letters and whitespace only."""

    label: ClassVar[str] = "country"
    max_length: ClassVar[int] = 50
    allowed_char: ClassVar[Callable[[str], bool]] = staticmethod(_country_char)
