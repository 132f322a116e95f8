"""Percentage discounts with optional date and weekday restrictions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from decimal import Decimal, InvalidOperation
from enum import IntEnum
from typing import Optional, Union

from src.core.option import Nothing, Option
from src.core.outcome import Err, Ok, Outcome

logger = logging.getLogger(__name__)

PercentageInput = Union[Decimal, int, float, str]


class Weekday(IntEnum):
    """Day of week, numbered like ``datetime.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


@dataclass(frozen=True, slots=True)
class Discount:
    """A discount. Build instances with ``Discount.create``."""

    percentage: Decimal
    start_date: Option[datetime]
    end_date: Option[datetime]
    day_of_week: Option[Weekday]

    @classmethod
    def create(
        cls,
        percentage: PercentageInput,
        start_date: Option[datetime] = Nothing(),
        end_date: Option[datetime] = Nothing(),
        day_of_week: Option[Weekday] = Nothing(),
    ) -> Outcome[Discount]:
        """Validate the percentage and build a discount.

        Floats are read through their shortest text form, so 0.1 is
        Decimal("0.1"). Whole percentages are stored without exponent or
        trailing zeros ("1E1" and "20.0" become 10 and 20).

        Returns:
            Outcome with the Discount, or an error message if the percentage
            is not a number in [0, 100].
        """
        if isinstance(percentage, bool):
            logger.debug("Discount percentage is not a number: %r", percentage)
            return Err("Discount percentage must be a number.")
        if isinstance(percentage, float):
            percentage = str(percentage)

        try:
            value = Decimal(percentage)
        except (InvalidOperation, TypeError, ValueError):
            logger.debug("Discount percentage is not a number: %r", percentage)
            return Err("Discount percentage must be a number.")

        if not value.is_finite() or value < 0 or value > 100:
            logger.debug("Discount percentage out of range: %s", value)
            return Err("Discount percentage must be between 0 and 100.")

        value = abs(value)  # -0 becomes 0
        if value == value.to_integral_value():
            value = value.quantize(Decimal(1))
        else:
            value = value.normalize()
        return Ok(cls(value, start_date, end_date, day_of_week))

    def _zone(self) -> Optional[tzinfo]:
        return self.start_date.map(lambda start: start.tzinfo).unwrap(
            lambda: self.end_date.map(lambda end: end.tzinfo).unwrap_or(None)
        )

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        """Check date and weekday restrictions against ``now``.

        Absent restrictions never invalidate a discount. When ``now`` is not
        given, the current time is taken in the zone of the start date (or
        else the end date), so aware and naive restrictions both work. Start
        and end dates must agree on being aware or naive.
        """
        moment = now or datetime.now(self._zone())
        not_started = self.start_date.map(lambda start: start > moment).unwrap(lambda: False)
        expired = self.end_date.map(lambda end: end < moment).unwrap(lambda: False)
        wrong_day = self.day_of_week.map(
            lambda day: day != moment.weekday()
        ).unwrap(lambda: False)
        return not (not_started or expired or wrong_day)
