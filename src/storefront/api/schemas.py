"""Pydantic wire schemas for the store API.

These are the external contracts (anti-corruption layer) shared by the HTTP
gateway adapter and the development server. Field names are snake_case in
Python and camelCase on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class ProductSchema(BaseModel):
    model_config = {
        **_WIRE_CONFIG,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "name": "Classic Black T-Shirt",
                    "description": "Premium cotton crew-neck tee in black.",
                    "price": 19.99,
                    "imageUrl": "https://placehold.co/300x200?text=T-Shirt",
                    "category": "Apparel",
                    "sku": "TSHIRT-BLK-M",
                    "stockQuantity": 40,
                }
            ]
        },
    }

    id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    image_url: str | None = None
    category: str | None = None
    sku: str | None = None
    stock_quantity: int | None = Field(None, ge=0)


class NewProductRequest(BaseModel):
    model_config = _WIRE_CONFIG

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    image_url: str = Field(..., min_length=1)
    category: str | None = None
    sku: str | None = Field(None, max_length=50)
    stock_quantity: int | None = Field(None, ge=0)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class AddressSchema(BaseModel):
    model_config = _WIRE_CONFIG

    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)


class UserDetailsSchema(BaseModel):
    model_config = _WIRE_CONFIG

    name: str = Field(..., min_length=1)
    address: AddressSchema


class OrderItemSchema(BaseModel):
    model_config = _WIRE_CONFIG

    product_id: int
    quantity: int = Field(..., ge=1)
    price_at_time: float = Field(..., ge=0)


class OrderRequest(BaseModel):
    model_config = {
        **_WIRE_CONFIG,
        "json_schema_extra": {
            "examples": [
                {
                    "userDetails": {
                        "name": "Ada Lovelace",
                        "address": {
                            "street": "123 Main St",
                            "city": "Springfield",
                            "state": "IL",
                            "postalCode": "62701",
                            "country": "US",
                        },
                    },
                    "items": [{"productId": 1, "quantity": 3, "priceAtTime": 19.99}],
                    "subtotal": 59.97,
                    "tax": 5.997,
                    "total": 65.967,
                }
            ]
        },
    }

    user_details: UserDetailsSchema
    items: list[OrderItemSchema] = Field(..., min_length=1)
    subtotal: float = Field(..., ge=0)
    tax: float = Field(..., ge=0)
    total: float = Field(..., ge=0)


class OrderCreatedResponse(BaseModel):
    model_config = _WIRE_CONFIG

    order_id: int | str


class HealthResponse(BaseModel):
    status: str = "ok"
