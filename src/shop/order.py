"""Orders, totals and invoices."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from src.core.option import Option
from src.shop.customer import Customer
from src.shop.discount import Discount

CENT = Decimal("0.01")


def format_money(amount: Decimal, currency_symbol: str = "$") -> str:
    """Two decimal places, midpoints rounded away from zero."""
    return f"{currency_symbol}{Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP):f}"


@dataclass(frozen=True, slots=True)
class Order:
    """An order for a customer with an optional discount."""

    id: int
    customer: Customer
    total: Decimal
    discount: Option[Discount]

    def final_total(self) -> Decimal:
        """Total after discount. Date restrictions do not affect the amount."""
        return self.discount.map(
            lambda d: self.total - (self.total * d.percentage / 100)
        ).unwrap(lambda: self.total)

    def invoice(self, currency_symbol: str = "$") -> Option[str]:
        """Render the invoice, or Nothing if the customer has no shipping address."""
        discount_lines = self.discount.map(
            lambda d: (
                f"Discount: {d.percentage:f}%\n"
                f"Final Total: {format_money(self.final_total(), currency_symbol)}"
            )
        ).unwrap(lambda: "No discount applied")

        return self.customer.shipping_label().map(
            lambda label: (
                f"Invoice #{self.id}\n\n"
                f"{label}\n\n"
                f"Total: {format_money(self.total, currency_symbol)}\n\n"
                f"{discount_lines}"
            )
        )
