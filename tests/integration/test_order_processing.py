"""Integration tests for order processing across the shop domain."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

import pytest

from src.core.option import Option, none, some
from src.core.outcome import ok
from src.shop.address import Address
from src.shop.customer import Customer
from src.shop.discount import Discount, Weekday
from src.shop.order import Order


def create_customer(
    include_number: bool = True,
    include_country: bool = True,
    email: Optional[Option[str]] = None,
) -> Customer:
    result = Address.create(
        "123 Main St",
        "Springfield",
        "12345",
        some("4B") if include_number else none(),
        some("USA") if include_country else none(),
    )
    assert result.is_ok(), f"Address creation failed: {result.get_error()}"
    return Customer(1, "John Doe", some(result.unwrap_or(None)), email or none())


def create_discount(percentage: int = 20, **restrictions: Option[object]) -> Discount:
    result = Discount.create(percentage, **restrictions)  # type: ignore[arg-type]
    assert result.is_ok(), f"Discount creation failed: {result.get_error()}"
    return result.unwrap_or(None)


class TestShippingLabels:
    def test_full_address(self) -> None:
        label = create_customer().shipping_label().unwrap(lambda: "")
        assert "Number 4B" in label
        assert "John Doe" in label
        assert "123 Main St" in label
        assert "12345 USA" in label

    def test_without_number(self) -> None:
        label = create_customer(include_number=False).shipping_label().unwrap(lambda: "")
        assert "Number" not in label
        assert "123 Main St" in label

    def test_without_country(self) -> None:
        label = create_customer(include_country=False).shipping_label().unwrap(lambda: "")
        assert " USA" not in label

    def test_long_street(self) -> None:
        street = "12345 Very Long Street Name That Could Potentially Cause Formatting Issues"
        address = Address.create(street, "Springfield", "12345", some("4B"), none())
        customer = Customer(1, "John Doe", some(address.unwrap_or(None)), none())
        label = customer.shipping_label().unwrap(lambda: "")
        assert street in label
        assert "Number 4B" in label

    def test_special_characters(self) -> None:
        address = Address.create(
            "123 Main St. #&@", "Spring-Field", "12345-6789", some("4B!"), none()
        )
        assert address.is_ok(), address.get_error()
        customer = Customer(1, "John & Jane Doe", some(address.unwrap_or(None)), none())
        label = customer.shipping_label().unwrap(lambda: "")
        assert "123 Main St. #&@" in label
        assert "Spring-Field" in label
        assert "Number 4B!" in label


class TestInvoices:
    def test_with_discount(self) -> None:
        order = Order(1, create_customer(), Decimal("100"), some(create_discount()))
        invoice = order.invoice().unwrap(lambda: "")
        assert "Invoice #1" in invoice
        assert "John Doe" in invoice
        assert "Number 4B" in invoice
        assert "Discount: 20%" in invoice
        assert "Final Total: $80.00" in invoice

    def test_without_discount(self) -> None:
        order = Order(1, create_customer(), Decimal("100"), none())
        invoice = order.invoice().unwrap(lambda: "")
        assert "Invoice #1" in invoice
        assert "Discount" not in invoice
        assert "Total: $100.00" in invoice

    def test_expired_discount_still_applies(self) -> None:
        now = datetime.now()
        discount = create_discount(
            start_date=some(now - timedelta(days=2)),
            end_date=some(now - timedelta(days=1)),
        )
        order = Order(1, create_customer(), Decimal("100"), some(discount))
        assert not discount.is_valid()
        assert order.final_total() == Decimal("80")

    def test_day_specific_discount(self) -> None:
        today = Weekday(datetime.now().weekday())
        discount = create_discount(day_of_week=some(today))
        order = Order(1, create_customer(), Decimal("100"), some(discount))
        assert order.final_total() == Decimal("80")


class TestOptionChains:
    def test_all_present(self) -> None:
        customer = create_customer(email=some("john@example.com"))
        result = (
            customer.email.bind(
                lambda email: customer.shipping_label().map(
                    lambda label: f"Email: {email}, Label: {label}"
                )
            )
            .map(len)
            .map(lambda length: length > 0)
        )
        assert result.is_some()
        assert result.unwrap(lambda: False) is True

    def test_missing_email_short_circuits(self) -> None:
        customer = create_customer(include_number=False, include_country=False)
        result = (
            customer.email.map(str.upper)
            .bind(lambda upper: some(f"Email: {upper}"))
            .map(len)
            .map(lambda length: length > 0)
        )
        assert result.is_none()

    def test_nothing_anywhere(self) -> None:
        customer = Customer(1, "John Doe", none(), none())
        order = Order(1, customer, Decimal("50"), none())
        assert customer.shipping_label().is_none()
        assert customer.email_confirmation().is_none()
        assert order.invoice().is_none()
        assert order.final_total() == Decimal("50")


class TestOutcomeComposition:
    def test_address_into_customer(self) -> None:
        customer = (
            Address.create("1 Elm Rd", "Ogdenville", "99999")
            .on_success(lambda address: Customer(2, "Jane Roe", some(address), none()))
            .on_success(lambda c: c.shipping_label())
        )
        assert customer.match(
            lambda label: label.unwrap(lambda: ""), lambda error: error
        ) == "Jane Roe\n1 Elm Rd\nOgdenville 99999"

    def test_first_failure_reaches_the_end(self) -> None:
        calls = []
        result = (
            Address.create("", "", "")
            .on_success(lambda address: calls.append(address))
            .bind(lambda _: ok("unreachable"))
        )
        assert result.get_error() == "Invalid street"
        assert calls == []

    @pytest.mark.parametrize(
        ("percentage", "expected"),
        [(150, "between 0 and 100"), (-1, "between 0 and 100")],
    )
    def test_discount_errors_surface_as_text(self, percentage: int, expected: str) -> None:
        order_total = Discount.create(percentage).on_success(
            lambda d: Order(1, create_customer(), Decimal("100"), some(d)).final_total()
        )
        assert expected in order_total.match(str, lambda error: error)
