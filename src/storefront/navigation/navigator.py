"""Navigation state machine: which top-level view the storefront shows.

State Machine (3 states, none terminal):
    CATALOG → CART → CHECKOUT → CATALOG
    CART → CATALOG, CHECKOUT → CART (back-navigation)

CART → CHECKOUT requires a non-empty cart; on an empty cart the request is
ignored and the view stays on CART.
"""

from enum import Enum

import structlog
from protean.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class View(Enum):
    CATALOG = "catalog"
    CART = "cart"
    CHECKOUT = "checkout"


# State machine transition map
_VALID_TRANSITIONS = {
    View.CATALOG: {View.CART},
    View.CART: {View.CHECKOUT, View.CATALOG},
    View.CHECKOUT: {View.CATALOG, View.CART},
}


class Navigator:
    def __init__(self, view: View = View.CATALOG):
        self.view = view

    def _checkout_guard(self, target: View, cart_is_empty: bool | None) -> bool:
        """True when a move to checkout must be held back on an empty cart."""
        if target != View.CHECKOUT:
            return False
        if cart_is_empty is None:
            raise TypeError("cart_is_empty is required when navigating to checkout")
        return cart_is_empty

    def can_navigate(self, target: View, *, cart_is_empty: bool | None = None) -> bool:
        if target == self.view:
            return True
        if target not in _VALID_TRANSITIONS[self.view]:
            return False
        return not self._checkout_guard(target, cart_is_empty)

    def navigate(self, target: View, *, cart_is_empty: bool | None = None) -> View:
        """Move to ``target`` and return the resulting view.

        ``cart_is_empty`` must be given for a move to checkout, which is
        ignored when the cart is empty.
        """
        if target == self.view:
            return self.view

        if target not in _VALID_TRANSITIONS[self.view]:
            raise ValidationError({"view": [f"Cannot navigate from {self.view.value} to {target.value}"]})

        if self._checkout_guard(target, cart_is_empty):
            logger.info("Checkout requested with an empty cart, staying on cart")
            return self.view

        logger.debug("Navigating", from_view=self.view.value, to_view=target.value)
        self.view = target
        return self.view

    def reset(self) -> View:
        """Return to the catalogue, e.g. after an order has been placed."""
        self.view = View.CATALOG
        return self.view
