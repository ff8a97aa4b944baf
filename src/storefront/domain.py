"""Storefront bounded context: catalogue browsing, shopping cart and checkout.

The storefront is a client of the store API: it loads the product catalogue,
keeps the customer's cart, and submits orders. All state lives in explicit
objects composed by ``storefront.session.StorefrontSession``.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
