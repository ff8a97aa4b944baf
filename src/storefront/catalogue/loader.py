"""Catalogue loader: fetches the product list and tracks its load status.

Each fetch is tagged with a request token. Only the response to the most
recent request is applied; a late response to an earlier request is dropped.
A failed load leaves the product list empty. There is no automatic retry.
"""

from enum import Enum

import structlog

from storefront.gateway.port import CatalogResult

logger = structlog.get_logger(__name__)


class CatalogStatus(Enum):
    LOADING = "Loading"
    ERROR = "Error"
    READY = "Ready"


class CatalogLoader:
    def __init__(self):
        self.status = CatalogStatus.LOADING
        self.products: tuple = ()
        self.error: str | None = None
        self._token = 0

    @property
    def is_ready(self) -> bool:
        return self.status == CatalogStatus.READY

    def begin(self) -> int:
        """Mark a fetch as started and return its request token."""
        self._token += 1
        self.status = CatalogStatus.LOADING
        self.error = None
        return self._token

    def apply(self, token: int, result: CatalogResult) -> bool:
        """Apply a fetch result. Returns False when the result is stale."""
        if token != self._token:
            logger.info("Ignoring stale catalogue response", token=token, current_token=self._token)
            return False

        if result.success:
            self.products = tuple(result.products)
            self.status = CatalogStatus.READY
            self.error = None
            logger.info("Catalogue loaded", product_count=len(self.products))
        else:
            self.products = ()
            self.status = CatalogStatus.ERROR
            self.error = result.failure_reason or "Failed to fetch products"
            logger.warning("Catalogue load failed", error=self.error)
        return True

    def load(self, gateway) -> bool:
        token = self.begin()
        return self.apply(token, gateway.fetch_products())

    def find(self, product_id):
        return next((p for p in self.products if p.product_id == product_id), None)
