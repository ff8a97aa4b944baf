"""Fake store API: deterministic in-memory adapter for testing and development.

Serves a fixed catalogue and records every submitted order payload.
Configurable success/failure behavior for exercising the failure paths.
"""

from storefront.catalogue.product import Product
from storefront.gateway.port import CatalogResult, OrderResult, ProductResult, StoreApi


class FakeStoreApi(StoreApi):
    """Fake store API that always succeeds by default."""

    def __init__(self, products=None):
        self.products = list(products or [])
        self.submitted_orders = []
        self.should_succeed = True
        self.failure_reason = "Store API unavailable"
        self._next_order_id = 1001

    def configure(self, should_succeed: bool = True, failure_reason: str = "Store API unavailable"):
        """Configure the fake store behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def fetch_products(self) -> CatalogResult:
        if not self.should_succeed:
            return CatalogResult(success=False, failure_reason=self.failure_reason)
        return CatalogResult(success=True, products=tuple(self.products))

    def submit_order(self, draft) -> OrderResult:
        if not self.should_succeed:
            return OrderResult(success=False, failure_reason=self.failure_reason)

        self.submitted_orders.append(draft.to_payload())
        order_id = str(self._next_order_id)
        self._next_order_id += 1
        return OrderResult(success=True, order_id=order_id)

    def create_product(self, new_product) -> ProductResult:
        if not self.should_succeed:
            return ProductResult(success=False, failure_reason=self.failure_reason)

        product = Product(
            product_id=max((p.product_id for p in self.products), default=0) + 1,
            name=new_product.name,
            description=new_product.description,
            price=new_product.price,
            image_url=new_product.image_url,
            category=new_product.category,
            sku=new_product.sku,
            stock_quantity=new_product.stock_quantity,
        )
        self.products.append(product)
        return ProductResult(success=True, product=product)
