"""Storefront session: the single state container behind the storefront UI.

The session owns the catalogue loader, the cart, the navigator and the
submission flow, and exposes one method per user action. Run it inside the
storefront domain context::

    storefront.init()
    with storefront.domain_context():
        session = StorefrontSession.start()
        session.add_to_cart(1)
        session.end()
"""

from decimal import Decimal
from uuid import uuid4

import structlog
from protean.exceptions import ValidationError

from storefront.cart.cart import Cart
from storefront.cart.quantity import coerce_quantity
from storefront.catalogue.loader import CatalogLoader
from storefront.checkout.composer import compose_order
from storefront.checkout.pricing import TAX_RATE, Totals
from storefront.checkout.submission import SubmissionFlow
from storefront.config import StorefrontSettings
from storefront.gateway import get_gateway
from storefront.gateway.port import OrderResult
from storefront.navigation.navigator import Navigator, View
from storefront.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


class StorefrontSession:
    def __init__(self, gateway, tax_rate: Decimal = TAX_RATE):
        self.gateway = gateway
        self.tax_rate = tax_rate
        self.catalog = CatalogLoader()
        self.cart = Cart.create()
        self.navigator = Navigator()
        self.submission = SubmissionFlow(gateway, self.cart, self.navigator)
        self.session_id = str(uuid4())

    @classmethod
    def start(cls, gateway=None, settings: StorefrontSettings | None = None) -> "StorefrontSession":
        """Open a session and load the catalogue once."""
        settings = settings or StorefrontSettings.from_env()
        session = cls(gateway or get_gateway(), tax_rate=settings.tax_rate)
        add_context(session_id=session.session_id)
        logger.info("Storefront session started")
        session.load_catalog()
        return session

    def end(self) -> None:
        """Detach this session from the log context."""
        logger.info("Storefront session ended", item_count=self.item_count())
        clear_context()

    def _settle_cart(self) -> None:
        for event in self.cart.drain_events():
            logger.debug("Cart event", event_type=event.__class__.__name__, **event.payload)

    # -------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------
    @property
    def view(self) -> View:
        return self.navigator.view

    def item_count(self) -> int:
        return self.cart.item_count()

    def totals(self) -> Totals:
        return Totals.for_cart(self.cart, self.tax_rate)

    def can_checkout(self) -> bool:
        return self.navigator.can_navigate(View.CHECKOUT, cart_is_empty=self.cart.is_empty)

    # -------------------------------------------------------------------
    # Catalogue
    # -------------------------------------------------------------------
    def load_catalog(self) -> bool:
        return self.catalog.load(self.gateway)

    # -------------------------------------------------------------------
    # Cart actions
    # -------------------------------------------------------------------
    def add_to_cart(self, product_or_id):
        """Add one unit of a product, given the Product or its catalogue id."""
        product = product_or_id
        if not hasattr(product_or_id, "product_id"):
            product = self.catalog.find(product_or_id)
            if product is None:
                raise ValidationError({"product_id": [f"Product {product_or_id} is not in the catalogue"]})
        self.cart.add_item(product)
        self._settle_cart()

    def remove_from_cart(self, product_id):
        self.cart.remove_item(product_id)
        self._settle_cart()

    def update_quantity(self, product_id, raw_quantity):
        """Set a line's quantity from raw user input, coercing it leniently."""
        quantity = coerce_quantity(raw_quantity)
        if quantity != raw_quantity:
            logger.debug("Quantity input coerced", raw=repr(raw_quantity), quantity=quantity)
        self.cart.set_quantity(product_id, quantity)
        self._settle_cart()

    # -------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------
    def show_catalog(self) -> View:
        return self.navigator.navigate(View.CATALOG)

    def show_cart(self) -> View:
        return self.navigator.navigate(View.CART)

    def proceed_to_checkout(self) -> View:
        return self.navigator.navigate(View.CHECKOUT, cart_is_empty=self.cart.is_empty)

    def back_to_cart(self) -> View:
        return self.navigator.navigate(View.CART)

    def cancel_checkout(self) -> View:
        return self.navigator.navigate(View.CATALOG)

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def place_order(self, customer_name: str, address) -> OrderResult:
        """Compose and submit an order.

        Raises:
            ValidationError: when the checkout details are incomplete or the
                cart is empty, or when the session is not at checkout;
                nothing is sent in that case.
        """
        if self.view != View.CHECKOUT:
            raise ValidationError({"view": ["Orders can only be placed from checkout"]})

        draft = compose_order(self.cart, customer_name, address, self.tax_rate)
        try:
            return self.submission.submit(draft)
        finally:
            self._settle_cart()
