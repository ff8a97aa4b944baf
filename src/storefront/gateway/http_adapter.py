"""HTTP store API adapter: talks to the store backend with httpx.

Transport errors, non-success statuses, and bodies that do not match the wire
schemas are all reported as failed results, never raised.
"""

import httpx
import structlog
from protean.exceptions import ValidationError as DomainValidationError
from pydantic import TypeAdapter

from storefront.api.schemas import OrderCreatedResponse, ProductSchema
from storefront.catalogue.product import Product
from storefront.config import DEFAULT_API_TIMEOUT, DEFAULT_API_URL
from storefront.gateway.port import CatalogResult, OrderResult, ProductResult, StoreApi

logger = structlog.get_logger(__name__)

PRODUCTS_PATH = "/api/products"
ORDERS_PATH = "/api/orders"

_PRODUCT_LIST = TypeAdapter(list[ProductSchema])

# json decoding and pydantic validation errors are both ValueErrors
_MALFORMED = (ValueError, DomainValidationError)


def _describe(exc: Exception) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return f"server responded {exc.response.status_code}"
    if isinstance(exc, httpx.RequestError):
        return f"network error: {exc}"
    return "malformed response"


class HttpStoreApi(StoreApi):
    """Store API adapter over a synchronous ``httpx.Client``."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_API_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def fetch_products(self) -> CatalogResult:
        try:
            response = self._client.get(PRODUCTS_PATH)
            response.raise_for_status()
            products = tuple(Product.from_schema(schema) for schema in _PRODUCT_LIST.validate_python(response.json()))
        except (httpx.HTTPError, *_MALFORMED) as exc:
            reason = f"Failed to fetch products: {_describe(exc)}"
            logger.warning("Catalogue fetch failed", reason=reason, error=str(exc))
            return CatalogResult(success=False, failure_reason=reason)

        logger.debug("Catalogue fetched", product_count=len(products))
        return CatalogResult(success=True, products=products)

    def submit_order(self, draft) -> OrderResult:
        try:
            response = self._client.post(ORDERS_PATH, json=draft.to_payload())
            response.raise_for_status()
            created = OrderCreatedResponse.model_validate(response.json())
        except (httpx.HTTPError, *_MALFORMED) as exc:
            reason = f"Failed to place order: {_describe(exc)}"
            logger.warning("Order submission failed", reason=reason, error=str(exc))
            return OrderResult(success=False, failure_reason=reason)

        logger.info("Order submitted", order_id=str(created.order_id), line_count=len(draft.lines))
        return OrderResult(success=True, order_id=str(created.order_id))

    def create_product(self, new_product) -> ProductResult:
        try:
            response = self._client.post(PRODUCTS_PATH, json=new_product.model_dump(by_alias=True))
            response.raise_for_status()
            product = Product.from_schema(ProductSchema.model_validate(response.json()))
        except (httpx.HTTPError, *_MALFORMED) as exc:
            reason = f"Failed to add product: {_describe(exc)}"
            logger.warning("Product creation failed", reason=reason, error=str(exc))
            return ProductResult(success=False, failure_reason=reason)

        logger.info("Product created", product_id=product.product_id)
        return ProductResult(success=True, product=product)
