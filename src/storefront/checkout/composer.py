"""Order composer: turns the cart and checkout details into an OrderDraft.

Composition is a pure derivation: nothing is mutated, and an incomplete
checkout is rejected before anything reaches the network.
"""

from decimal import Decimal

import structlog
from protean.exceptions import ValidationError

from storefront.checkout.draft import ADDRESS_FIELDS, Address, DraftLine, OrderDraft
from storefront.checkout.pricing import TAX_RATE, Totals

logger = structlog.get_logger(__name__)


def _clean(value) -> str:
    return "" if value is None else str(value).strip()


def compose_order(cart, customer_name: str, address, tax_rate: Decimal = TAX_RATE) -> OrderDraft:
    """Validate checkout details and snapshot the cart into an OrderDraft.

    Args:
        cart: The session's ``Cart``; read, never modified.
        customer_name: Full name entered at checkout.
        address: An ``Address`` or a mapping with street, city, state,
            postal_code and country.
        tax_rate: Flat rate applied to the subtotal.

    Raises:
        ValidationError: naming every blank field, and ``cart`` when the cart
            is empty.
    """
    values = address.to_dict() if isinstance(address, Address) else dict(address or {})

    errors = {}

    name = _clean(customer_name)
    if not name:
        errors["customer_name"] = ["Customer name is required"]

    cleaned_address = {field: _clean(values.get(field)) for field in ADDRESS_FIELDS}
    for field, value in cleaned_address.items():
        if not value:
            errors[field] = [f"{field.replace('_', ' ').capitalize()} is required"]

    if cart.is_empty:
        errors["cart"] = ["Cannot place an order for an empty cart"]

    if errors:
        logger.info("Order draft rejected", fields=sorted(errors))
        raise ValidationError(errors)

    lines = tuple(
        DraftLine(
            product_id=item.product_id,
            quantity=item.quantity,
            price_at_time=item.unit_price,
        )
        for item in cart.items
    )

    return OrderDraft(
        customer_name=name,
        address=Address(**cleaned_address),
        lines=lines,
        totals=Totals.for_cart(cart, tax_rate),
    )
