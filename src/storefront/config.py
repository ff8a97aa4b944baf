"""Runtime settings for the storefront client, read from the environment."""

import os
from dataclasses import dataclass
from decimal import Decimal

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_API_TIMEOUT = 10.0
DEFAULT_TAX_RATE = "0.10"


@dataclass(frozen=True)
class StorefrontSettings:
    """Connection and pricing settings.

    ``tax_rate`` is the flat percentage applied to every order subtotal.
    """

    api_url: str = DEFAULT_API_URL
    api_timeout: float = DEFAULT_API_TIMEOUT
    api_adapter: str = "http"
    tax_rate: Decimal = Decimal(DEFAULT_TAX_RATE)

    @classmethod
    def from_env(cls) -> "StorefrontSettings":
        tax_rate = Decimal(os.environ.get("STOREFRONT_TAX_RATE", DEFAULT_TAX_RATE))
        if tax_rate < 0:
            raise ValueError(f"STOREFRONT_TAX_RATE must not be negative: {tax_rate}")

        return cls(
            api_url=os.environ.get("STOREFRONT_API_URL", DEFAULT_API_URL).rstrip("/"),
            api_timeout=float(os.environ.get("STOREFRONT_API_TIMEOUT", DEFAULT_API_TIMEOUT)),
            api_adapter=os.environ.get("STOREFRONT_API_ADAPTER", "http"),
            tax_rate=tax_rate,
        )
