"""Shop sample - address, customer, discount and order built on Option and Outcome."""

from src.shop.address import Address
from src.shop.components import BuildingNumber, City, Country, PostalCode, Street
from src.shop.config import DemoConfig, ShopConfig
from src.shop.customer import Customer
from src.shop.discount import Discount, Weekday
from src.shop.order import Order

__all__ = [
    "Address",
    "BuildingNumber",
    "City",
    "Country",
    "PostalCode",
    "Street",
    "DemoConfig",
    "ShopConfig",
    "Customer",
    "Discount",
    "Weekday",
    "Order",
]
