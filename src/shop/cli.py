"""CLI interface for the shop sample.

Provides command-line access to the domain operations:
- demo: Build a sample customer and order and print label, email and invoice
- address: Validate an address and print it
- discount: Validate a discount and print the discounted total
"""

from __future__ import annotations

import argparse
import json
import sys
from decimal import Decimal, InvalidOperation
from typing import Optional

from src.core.option import Nothing, Option, Some
from src.shop.address import Address
from src.shop.config import ShopConfig
from src.shop.customer import Customer
from src.shop.discount import Discount
from src.shop.logging import configure_logging
from src.shop.order import Order, format_money


SAMPLE_ADDRESS = {
    "street": "123 Main St",
    "city": "Springfield",
    "postal_code": "12345",
    "number": "4B",
    "country": "USA",
}
SAMPLE_EMAIL = "john@example.com"
SAMPLE_TOTAL = Decimal("100")
SAMPLE_DISCOUNT = Decimal("20")


def _optional(value: Optional[str]) -> Option[str]:
    return Nothing() if value is None else Some(value)


def _fail(message: str) -> None:
    print(f"ERROR: {message}")
    sys.exit(1)


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Shop sample - Option and Outcome in a small order domain"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", help="Emit JSON log lines")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    subparsers.add_parser("demo", help="Run a complete demo")

    # Address command
    address_parser = subparsers.add_parser("address", help="Validate an address")
    address_parser.add_argument("street", help="Street name")
    address_parser.add_argument("city", help="City")
    address_parser.add_argument("postal_code", help="Postal code")
    address_parser.add_argument("--number", default=None, help="Building number")
    address_parser.add_argument("--country", default=None, help="Country")

    # Discount command
    discount_parser = subparsers.add_parser("discount", help="Apply a discount")
    discount_parser.add_argument("percentage", help="Discount percentage (0-100)")
    discount_parser.add_argument("--total", default="100", help="Order total")

    args = parser.parse_args(argv)

    config = ShopConfig()
    configure_logging(
        verbose=args.verbose or config.verbose,
        log_json=args.log_json or config.log_json,
    )

    if args.command == "demo":
        run_demo(config)
    elif args.command == "address":
        run_address(
            args.street,
            args.city,
            args.postal_code,
            _optional(args.number),
            _optional(args.country),
        )
    elif args.command == "discount":
        run_discount(args.percentage, args.total, config)
    else:
        parser.print_help()
        sys.exit(1)


def build_sample_order(config: ShopConfig) -> Order:
    """Build the demo order. The sample data is known to be valid."""
    address = Address.create(
        SAMPLE_ADDRESS["street"],
        SAMPLE_ADDRESS["city"],
        SAMPLE_ADDRESS["postal_code"],
        Some(SAMPLE_ADDRESS["number"]),
        Some(SAMPLE_ADDRESS["country"]),
    )
    discount = Discount.create(SAMPLE_DISCOUNT)
    if address.is_err() or discount.is_err():
        raise RuntimeError(
            f"Sample data is invalid: {address.get_error() or discount.get_error()}"
        )

    customer = Customer(
        id=1,
        name=config.customer_name,
        shipping_address=Some(address.value),  # type: ignore[union-attr]
        email=Some(SAMPLE_EMAIL),
    )
    return Order(
        id=1,
        customer=customer,
        total=SAMPLE_TOTAL,
        discount=Some(discount.value),  # type: ignore[union-attr]
    )


def run_demo(config: Optional[ShopConfig] = None) -> None:
    """Run a complete demo with sample data."""
    config = config or ShopConfig()
    order = build_sample_order(config)
    customer = order.customer

    print("=" * 60)
    print("Shop Sample - Demo Mode")
    print("=" * 60)
    print()

    print("[1/3] Shipping label:")
    print(customer.shipping_label().unwrap(lambda: "(no shipping address)"))
    print()

    print("[2/3] Email confirmation:")
    print(customer.email_confirmation().unwrap(lambda: "(no confirmation email)"))
    print()

    print("[3/3] Invoice:")
    print("-" * 60)
    invoice = order.invoice(config.currency_symbol)
    print(invoice.unwrap(lambda: "(invoice unavailable)"))
    print("=" * 60)

    # JSON output for programmatic use
    json_output = {
        "order_id": order.id,
        "customer": customer.name,
        "total": f"{order.total:f}",
        "final_total": f"{order.final_total():f}",
        "discount": order.discount.map(lambda d: f"{d.percentage:f}").unwrap_or(None),
        "has_invoice": invoice.is_some(),
    }
    print("JSON output:")
    print(json.dumps(json_output, indent=2))


def run_address(
    street: str,
    city: str,
    postal_code: str,
    number: Option[str],
    country: Option[str],
) -> None:
    """Validate an address and print it, or the first error."""
    result = Address.create(street, city, postal_code, number, country)
    result.match(print, _fail)


def run_discount(percentage: str, total: str, config: Optional[ShopConfig] = None) -> None:
    """Validate a discount and print the discounted total."""
    config = config or ShopConfig()
    try:
        amount = Decimal(total)
    except InvalidOperation:
        _fail(f"Invalid total: {total}")
        return

    result = Discount.create(percentage)
    result.match(
        lambda discount: print(json.dumps({
            "total": f"{amount:f}",
            "percentage": f"{discount.percentage:f}",
            "final_total": format_money(_discounted(amount, discount), config.currency_symbol),
        }, indent=2)),
        _fail,
    )


def _discounted(total: Decimal, discount: Discount) -> Decimal:
    customer = Customer(id=0, name="", shipping_address=Nothing(), email=Nothing())
    return Order(id=0, customer=customer, total=total, discount=Some(discount)).final_total()


if __name__ == "__main__":
    main()
