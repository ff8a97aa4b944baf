"""Admin product form: a partially filled product awaiting promotion.

The admin dialog edits a product one field at a time, so every field is
optional while editing. ``promote()`` is the validation step that turns the
form into a complete ``NewProductRequest``.
"""

from __future__ import annotations

import structlog
from protean.exceptions import ValidationError
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from storefront.api.schemas import NewProductRequest
from storefront.gateway.port import ProductResult

logger = structlog.get_logger(__name__)


class ProductForm(BaseModel):
    model_config = {"validate_assignment": True}

    name: str | None = ""
    description: str | None = ""
    price: float | None = 0.0
    image_url: str | None = ""
    category: str | None = ""
    sku: str | None = ""
    stock_quantity: int | None = 0

    def promote(self) -> NewProductRequest:
        """Validate the form into a product creation request.

        Raises:
            ValidationError: keyed by form field.
        """
        try:
            return NewProductRequest(
                name=(self.name or "").strip(),
                description=(self.description or "").strip(),
                price=self.price,
                image_url=(self.image_url or "").strip(),
                category=self.category or None,
                sku=self.sku or None,
                stock_quantity=self.stock_quantity,
            )
        except SchemaValidationError as exc:
            errors = {}
            for error in exc.errors():
                field = str(error["loc"][0]) if error["loc"] else "product"
                errors.setdefault(field, []).append(error["msg"])
            raise ValidationError(errors) from exc


def add_product(gateway, form: ProductForm) -> ProductResult:
    """Promote ``form`` and create the product through the store API."""
    new_product = form.promote()
    result = gateway.create_product(new_product)
    if result.success:
        logger.info("Product added", name=new_product.name)
    else:
        logger.warning("Product not added", reason=result.failure_reason)
    return result
