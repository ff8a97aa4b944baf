"""Money helpers: exact decimal arithmetic over float-valued prices."""

from decimal import Decimal


def to_decimal(amount) -> Decimal:
    """Convert a stored price to ``Decimal`` without binary float noise.

    Prices travel as JSON numbers and are held in protean ``Float`` fields, so
    ``19.99`` goes through its shortest string form to become exactly
    ``Decimal("19.99")``.
    """
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def to_wire(amount: Decimal) -> float:
    """Render a decimal amount as a JSON number."""
    return float(amount)
