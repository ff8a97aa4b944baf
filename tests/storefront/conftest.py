import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture()
def tshirt():
    from storefront.catalogue.product import Product

    return Product(
        product_id=1,
        name="Classic Black T-Shirt",
        description="Premium cotton crew-neck tee in black.",
        price=19.99,
        image_url="https://placehold.co/300x200?text=T-Shirt",
        category="Apparel",
        sku="TSHIRT-BLK-M",
        stock_quantity=40,
    )


@pytest.fixture()
def mug():
    from storefront.catalogue.product import Product

    return Product(
        product_id=3,
        name="Ceramic Mug",
        description="Stoneware mug, 350 ml.",
        price=12.0,
        image_url="https://placehold.co/300x200?text=Mug",
    )


@pytest.fixture()
def address():
    return {
        "street": "123 Main St",
        "city": "Springfield",
        "state": "IL",
        "postal_code": "62701",
        "country": "US",
    }


@pytest.fixture()
def fake_api(tshirt, mug):
    from storefront.gateway.fake_adapter import FakeStoreApi

    return FakeStoreApi(products=[tshirt, mug])
