"""Order totals: subtotal, flat-rate tax, and grand total."""

from dataclasses import dataclass
from decimal import Decimal

from storefront.config import DEFAULT_TAX_RATE

TAX_RATE = Decimal(DEFAULT_TAX_RATE)


@dataclass(frozen=True)
class Totals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal

    @classmethod
    def from_subtotal(cls, subtotal: Decimal, tax_rate: Decimal = TAX_RATE) -> "Totals":
        tax = subtotal * tax_rate
        return cls(subtotal=subtotal, tax=tax, total=subtotal + tax)

    @classmethod
    def for_cart(cls, cart, tax_rate: Decimal = TAX_RATE) -> "Totals":
        """Derive totals from the cart's current lines."""
        return cls.from_subtotal(cart.subtotal(), tax_rate)
