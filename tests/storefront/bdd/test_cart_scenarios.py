"""BDD tests for the shopping cart."""

from pytest_bdd import parsers, scenarios, then, when

scenarios("features/cart.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the customer sets the quantity of product {product_id:d} to "{quantity}"'))
def set_quantity(session, product_id, quantity):
    session.update_quantity(product_id, quantity)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_n_lines(session, count):
    assert len(session.cart.items) == count


@then(parsers.cfparse("the cart lines are for products {product_ids}"))
def cart_lines_in_order(session, product_ids):
    expected = [int(value) for value in product_ids.split(",")]
    assert [item.product_id for item in session.cart.items] == expected
