"""Customer with optional shipping address and email."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.core.option import Nothing, Option, Some
from src.shop.address import Address


def _is_valid_email(email: Optional[str]) -> bool:
    if email is None or not email.strip():
        return False
    parts = email.split("@")
    return (
        len(parts) == 2
        and bool(parts[0].strip())
        and bool(parts[1].strip())
        and "." in parts[1]
    )


@dataclass(frozen=True, slots=True)
class Customer:
    """A customer. Missing address or email are Nothing, never None."""

    id: int
    name: str
    shipping_address: Option[Address]
    email: Option[str]

    def shipping_label(self) -> Option[str]:
        return self.shipping_address.map(lambda address: f"{self.name}\n{address}")

    def email_confirmation(self) -> Option[str]:
        """Confirmation line for a well-formed email, Nothing otherwise."""
        return self.email.bind(
            lambda email: Some(f"Order confirmation will be sent to: {email}")
            if _is_valid_email(email)
            else Nothing()
        )
