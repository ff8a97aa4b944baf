"""Cart aggregate: the customer's shopping cart for one storefront session.

The cart holds at most one line per product. Adding a product that is already
in the cart grows its line by one; a quantity below one removes the line.
Each line keeps a copy of the product's name and unit price as they were when
the product was added, so the cart renders without the catalogue.
"""

from datetime import UTC, datetime
from decimal import Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from storefront.domain import storefront
from storefront.shared.money import to_decimal


@storefront.entity(part_of="Cart")
class LineItem:
    product_id = Integer(required=True)
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    image_url = String(max_length=2048)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self) -> Decimal:
        return to_decimal(self.unit_price) * self.quantity


@storefront.aggregate
class Cart:
    items = HasMany(LineItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [item.product_id for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear on only one cart line"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls):
        now = datetime.now(UTC)
        return cls(created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def is_empty(self) -> bool:
        return not self.items

    def line_for(self, product_id):
        return next((i for i in self.items if i.product_id == product_id), None)

    def item_count(self) -> int:
        """Total units across all lines (the cart badge)."""
        return sum(item.quantity for item in self.items)

    def subtotal(self) -> Decimal:
        return sum((item.line_total for item in self.items), Decimal("0"))

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product):
        """Add one unit of ``product``, merging into its existing line."""
        existing = self.line_for(product.product_id)
        now = datetime.now(UTC)

        if existing:
            existing.quantity += 1
            quantity = existing.quantity
        else:
            self.add_items(
                LineItem(
                    product_id=product.product_id,
                    name=product.name,
                    unit_price=product.price,
                    image_url=product.image_url,
                    quantity=1,
                    added_at=now,
                )
            )
            quantity = 1

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=product.product_id,
                quantity=quantity,
            )
        )

    def remove_item(self, product_id):
        """Remove the line for ``product_id``. Absent products are ignored."""
        item = self.line_for(product_id)
        if item is None:
            return

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                product_id=product_id,
            )
        )

    def set_quantity(self, product_id, quantity):
        """Replace a line's quantity; anything below one removes the line."""
        if quantity < 1:
            self.remove_item(product_id)
            return

        item = self.line_for(product_id)
        if item is None:
            return

        previous_quantity = item.quantity
        if previous_quantity == quantity:
            return

        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=product_id,
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def clear(self):
        """Remove every line."""
        items_cleared = len(self.items)
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                items_cleared=items_cleared,
            )
        )

    def drain_events(self) -> list:
        """Hand over the pending events and forget them, as a unit of work does on commit."""
        events, self._events = self._events, []
        return events
