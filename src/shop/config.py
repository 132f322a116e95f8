"""Configuration management for the shop sample.

All settings can be overridden via environment variables with the SHOP_ prefix.
Example: SHOP_VERBOSE=true, SHOP_CURRENCY_SYMBOL=EUR
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ShopConfig(BaseSettings):
    """Main shop configuration."""

    model_config = {"env_prefix": "SHOP_"}

    # Invoice formatting
    currency_symbol: str = Field(default="$", description="Prefix for monetary amounts")

    # Demo data
    customer_name: str = Field(default="John Doe", description="Name used by the demo")

    # Logging
    verbose: bool = Field(default=False, description="Enable debug logging")
    log_json: bool = Field(default=False, description="Emit JSON log lines")


class DemoConfig:
    """Configuration presets for the CLI demo and tests."""

    @staticmethod
    def default() -> ShopConfig:
        """Create a default demo configuration."""
        return ShopConfig()

    @staticmethod
    def with_overrides(**kwargs: object) -> ShopConfig:
        """Create demo config with specific overrides."""
        return ShopConfig(**kwargs)  # type: ignore[arg-type]
