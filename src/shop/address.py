"""Postal address composed from validated components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from src.core.option import Nothing, Option, Some
from src.core.outcome import Err, Ok, Outcome
from src.shop.components import BuildingNumber, City, Country, PostalCode, Street

logger = logging.getLogger(__name__)

V = TypeVar("V")


def _create_optional(
    raw: Option[str], factory: Callable[[str], Outcome[V]]
) -> Outcome[Option[V]]:
    """Validate ``raw`` if present. An absent input is valid and stays absent."""
    return raw.match(
        lambda value: factory(value).on_success(Some),
        lambda: Ok(Nothing()),
    )


@dataclass(frozen=True, slots=True)
class Address:
    """A shipping address. Build instances with ``Address.create``."""

    street: Street
    city: City
    postal_code: PostalCode
    number: Option[BuildingNumber]
    country: Option[Country]

    @classmethod
    def create(
        cls,
        street: str,
        city: str,
        postal_code: str,
        number: Option[str] = Nothing(),
        country: Option[str] = Nothing(),
    ) -> Outcome[Address]:
        """Validate every field and build an address.

        Fields are checked in order: street, city, postal code, building
        number, country. The first failure is returned and later fields are
        not checked.

        Returns:
            Outcome with the Address, or the first violation message.
        """
        street_result = Street.create(street)
        if street_result.is_err():
            return cls._reject("street", street_result)

        city_result = City.create(city)
        if city_result.is_err():
            return cls._reject("city", city_result)

        postal_result = PostalCode.create(postal_code)
        if postal_result.is_err():
            return cls._reject("postal_code", postal_result)

        number_result = _create_optional(number, BuildingNumber.create)
        if number_result.is_err():
            return cls._reject("number", number_result)

        country_result = _create_optional(country, Country.create)
        if country_result.is_err():
            return cls._reject("country", country_result)

        return Ok(
            cls(
                street=street_result.value,  # type: ignore[union-attr]
                city=city_result.value,  # type: ignore[union-attr]
                postal_code=postal_result.value,  # type: ignore[union-attr]
                number=number_result.value,  # type: ignore[union-attr]
                country=country_result.value,  # type: ignore[union-attr]
            )
        )

    @staticmethod
    def _reject(field: str, result: Outcome[object]) -> Outcome[Address]:
        message = result.error  # type: ignore[union-attr]
        logger.debug("Address rejected at %s: %s", field, message)
        return Err(message)

    def __str__(self) -> str:
        number = self.number.match(lambda n: f" Number {n}", lambda: "")
        country = self.country.match(lambda c: f" {c}", lambda: "")
        return f"{self.street}{number}\n{self.city} {self.postal_code}{country}"
