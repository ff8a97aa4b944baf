"""In-memory backing store for the development store API."""

from itertools import count

from storefront.api.schemas import NewProductRequest, OrderRequest, ProductSchema

SAMPLE_PRODUCTS = [
    {
        "id": 1,
        "name": "Classic Black T-Shirt",
        "description": "Premium cotton crew-neck tee in black.",
        "price": 19.99,
        "imageUrl": "https://placehold.co/300x200?text=T-Shirt",
        "category": "Apparel",
        "sku": "TSHIRT-BLK-M",
        "stockQuantity": 40,
    },
    {
        "id": 2,
        "name": "Canvas Tote Bag",
        "description": "Heavy canvas tote with reinforced handles.",
        "price": 24.5,
        "imageUrl": "https://placehold.co/300x200?text=Tote",
        "category": "Accessories",
        "sku": "TOTE-NAT",
        "stockQuantity": 15,
    },
    {
        "id": 3,
        "name": "Ceramic Mug",
        "description": "Stoneware mug, 350 ml.",
        "price": 12.0,
        "imageUrl": "https://placehold.co/300x200?text=Mug",
        "category": "Home",
        "sku": "MUG-350",
        "stockQuantity": 60,
    },
]


class InMemoryStore:
    """Products and orders held in process memory."""

    def __init__(self, products=None):
        self.products: list[ProductSchema] = [ProductSchema.model_validate(p) for p in (products or [])]
        self.orders: dict[int, OrderRequest] = {}
        self.should_succeed = True
        self._order_ids = count(1)

    def configure(self, should_succeed: bool = True):
        """Make every endpoint fail (or succeed again) for testing."""
        self.should_succeed = should_succeed

    def add_product(self, request: NewProductRequest) -> ProductSchema:
        product = ProductSchema(
            id=max((p.id for p in self.products), default=0) + 1,
            **request.model_dump(),
        )
        self.products.append(product)
        return product

    def place_order(self, request: OrderRequest) -> int:
        order_id = next(self._order_ids)
        self.orders[order_id] = request
        return order_id
