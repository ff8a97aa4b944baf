"""Order draft: a validated, price-snapshotted order ready to submit.

A draft records each line's unit price at the moment it was composed. Later
catalogue price changes never reach an order that has already been drafted.
"""

from dataclasses import dataclass

from protean.fields import String

from storefront.api.schemas import AddressSchema, OrderItemSchema, OrderRequest, UserDetailsSchema
from storefront.checkout.pricing import Totals
from storefront.domain import storefront
from storefront.shared.money import to_wire

ADDRESS_FIELDS = ("street", "city", "state", "postal_code", "country")


@storefront.value_object
class Address:
    """Shipping address captured at checkout. Every part is mandatory."""

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


@dataclass(frozen=True)
class DraftLine:
    product_id: int
    quantity: int
    price_at_time: float


@dataclass(frozen=True)
class OrderDraft:
    customer_name: str
    address: Address
    lines: tuple[DraftLine, ...]
    totals: Totals

    def to_request(self) -> OrderRequest:
        return OrderRequest(
            user_details=UserDetailsSchema(
                name=self.customer_name,
                address=AddressSchema(**{field: getattr(self.address, field) for field in ADDRESS_FIELDS}),
            ),
            items=[
                OrderItemSchema(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    price_at_time=line.price_at_time,
                )
                for line in self.lines
            ],
            subtotal=to_wire(self.totals.subtotal),
            tax=to_wire(self.totals.tax),
            total=to_wire(self.totals.total),
        )

    def to_payload(self) -> dict:
        """The JSON body for ``POST /api/orders``."""
        return self.to_request().model_dump(by_alias=True)
