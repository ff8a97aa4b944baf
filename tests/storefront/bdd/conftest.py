"""Shared BDD fixtures and step definitions for the storefront."""

from decimal import Decimal

import pytest
from pytest_bdd import given, parsers, then, when
from storefront.api.store import SAMPLE_PRODUCTS
from storefront.api.schemas import ProductSchema
from storefront.catalogue.product import Product
from storefront.config import StorefrontSettings
from storefront.gateway.fake_adapter import FakeStoreApi
from storefront.navigation.navigator import View
from storefront.session import StorefrontSession


@pytest.fixture()
def outcome():
    """Container for the result or validation error of the last action."""
    return {"result": None, "exc": None}


@pytest.fixture()
def sample_api():
    products = [Product.from_schema(ProductSchema.model_validate(p)) for p in SAMPLE_PRODUCTS]
    return FakeStoreApi(products=products)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a storefront with the sample catalogue", target_fixture="session")
def storefront_session(sample_api):
    return StorefrontSession.start(gateway=sample_api, settings=StorefrontSettings())


@given(parsers.cfparse("the customer adds product {product_id:d} to the cart"))
@when(parsers.cfparse("the customer adds product {product_id:d} to the cart"))
def add_product(session, product_id):
    session.add_to_cart(product_id)


@given("the customer is at checkout")
def at_checkout(session):
    session.show_cart()
    session.proceed_to_checkout()
    assert session.view == View.CHECKOUT


@given("the store API is unavailable")
def store_unavailable(sample_api):
    sample_api.configure(should_succeed=False, failure_reason="Failed to place order")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the cart is empty")
def cart_is_empty(session):
    assert session.cart.is_empty


@then(parsers.cfparse("the line for product {product_id:d} has quantity {quantity:d}"))
def line_quantity(session, product_id, quantity):
    assert session.cart.line_for(product_id).quantity == quantity


@then(parsers.cfparse('the current view is "{view}"'))
def current_view(session, view):
    assert session.view == View(view)


@then(parsers.cfparse("the subtotal is {amount}"))
def subtotal_is(session, amount):
    assert session.totals().subtotal == Decimal(amount)


@then(parsers.cfparse("the tax is {amount}"))
def tax_is(session, amount):
    assert session.totals().tax == Decimal(amount)


@then(parsers.cfparse("the total is {amount}"))
def total_is(session, amount):
    assert session.totals().total == Decimal(amount)
