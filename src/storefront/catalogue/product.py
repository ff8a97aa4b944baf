"""Product value object: a catalogue entry as fetched from the store API.

Products are immutable once fetched. The catalogue loader owns them for the
lifetime of the session; the cart copies what it needs into its line items.
"""

from protean.fields import Float, Integer, String, Text

from storefront.domain import storefront


@storefront.value_object
class Product:
    product_id = Integer(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    image_url = String(max_length=2048)
    category = String(max_length=100)
    sku = String(max_length=50)
    stock_quantity = Integer(min_value=0)

    @classmethod
    def from_schema(cls, schema):
        """Build a Product from a validated ``ProductSchema``."""
        return cls(
            product_id=schema.id,
            name=schema.name,
            description=schema.description,
            price=schema.price,
            image_url=schema.image_url,
            category=schema.category,
            sku=schema.sku,
            stock_quantity=schema.stock_quantity,
        )
