"""Tests for the storefront session: user actions end to end against the fake API."""

from decimal import Decimal

import pytest
import structlog
from protean.exceptions import ValidationError
from storefront.catalogue.loader import CatalogStatus
from storefront.config import StorefrontSettings
from storefront.navigation.navigator import View
from storefront.session import StorefrontSession


@pytest.fixture()
def session(fake_api):
    session = StorefrontSession.start(gateway=fake_api, settings=StorefrontSettings())
    yield session
    session.end()


class TestStart:
    def test_start_loads_catalogue_once(self, session):
        assert session.catalog.status == CatalogStatus.READY
        assert len(session.catalog.products) == 2

    def test_start_with_failing_api_shows_error(self, fake_api):
        fake_api.configure(should_succeed=False, failure_reason="Failed to fetch products")
        session = StorefrontSession.start(gateway=fake_api, settings=StorefrontSettings())
        assert session.catalog.status == CatalogStatus.ERROR
        assert session.catalog.products == ()
        assert session.view == View.CATALOG

    def test_start_uses_configured_gateway(self, tshirt):
        from storefront.gateway import set_gateway
        from storefront.gateway.fake_adapter import FakeStoreApi

        set_gateway(FakeStoreApi(products=[tshirt]))
        session = StorefrontSession.start(settings=StorefrontSettings())
        assert [p.product_id for p in session.catalog.products] == [1]

    def test_tax_rate_comes_from_settings(self, fake_api):
        session = StorefrontSession.start(gateway=fake_api, settings=StorefrontSettings(tax_rate=Decimal("0.2")))
        session.add_to_cart(3)
        assert session.totals().tax == Decimal("2.4")


class TestCartActions:
    def test_add_by_catalogue_id(self, session):
        session.add_to_cart(1)
        session.add_to_cart(1)
        assert session.item_count() == 2
        assert len(session.cart.items) == 1

    def test_add_product_object(self, session, mug):
        session.add_to_cart(mug)
        assert session.cart.line_for(3).quantity == 1

    def test_add_unknown_product_is_rejected(self, session):
        with pytest.raises(ValidationError) as exc_info:
            session.add_to_cart(99)
        assert "product_id" in exc_info.value.messages
        assert session.cart.is_empty

    def test_remove(self, session):
        session.add_to_cart(1)
        session.remove_from_cart(1)
        assert session.cart.is_empty

    @pytest.mark.parametrize("raw", ["", "abc", None, "0"])
    def test_malformed_quantity_becomes_one(self, session, raw):
        session.add_to_cart(1)
        session.update_quantity(1, "4")
        session.update_quantity(1, raw)
        assert session.cart.line_for(1).quantity == 1

    def test_negative_quantity_removes_line(self, session):
        session.add_to_cart(1)
        session.update_quantity(1, "-5")
        assert session.cart.line_for(1) is None

    def test_totals(self, session):
        session.add_to_cart(1)
        session.update_quantity(1, "3")
        totals = session.totals()
        assert (totals.subtotal, totals.tax, totals.total) == (
            Decimal("59.97"),
            Decimal("5.997"),
            Decimal("65.967"),
        )


class TestNavigation:
    def test_cannot_checkout_with_empty_cart(self, session):
        session.show_cart()
        assert session.can_checkout() is False
        assert session.proceed_to_checkout() == View.CART

    def test_checkout_with_items(self, session):
        session.add_to_cart(1)
        session.show_cart()
        assert session.can_checkout() is True
        assert session.proceed_to_checkout() == View.CHECKOUT

    def test_back_navigation(self, session):
        session.add_to_cart(1)
        session.show_cart()
        session.proceed_to_checkout()
        assert session.back_to_cart() == View.CART
        assert session.show_catalog() == View.CATALOG

    def test_cancel_checkout(self, session):
        session.add_to_cart(1)
        session.show_cart()
        session.proceed_to_checkout()
        assert session.cancel_checkout() == View.CATALOG
        assert session.item_count() == 1


class TestPlaceOrder:
    def _at_checkout(self, session):
        session.add_to_cart(1)
        session.add_to_cart(3)
        session.show_cart()
        session.proceed_to_checkout()

    def test_successful_order(self, session, address, fake_api):
        self._at_checkout(session)

        result = session.place_order("Ada Lovelace", address)

        assert result.success
        assert result.order_id == "1001"
        assert session.cart.is_empty
        assert session.view == View.CATALOG
        assert fake_api.submitted_orders[0]["items"] == [
            {"productId": 1, "quantity": 1, "priceAtTime": 19.99},
            {"productId": 3, "quantity": 1, "priceAtTime": 12.0},
        ]

    def test_invalid_details_never_reach_the_api(self, session, address, fake_api):
        self._at_checkout(session)
        address["street"] = ""

        with pytest.raises(ValidationError):
            session.place_order("Ada Lovelace", address)

        assert fake_api.submitted_orders == []
        assert session.view == View.CHECKOUT
        assert session.item_count() == 2

    def test_failed_order_keeps_state(self, session, address, fake_api):
        self._at_checkout(session)
        fake_api.configure(should_succeed=False, failure_reason="Failed to place order")

        result = session.place_order("Ada Lovelace", address)

        assert not result.success
        assert session.view == View.CHECKOUT
        assert session.item_count() == 2
        assert not session.submission.in_flight

    def test_order_outside_checkout_is_rejected(self, session, address, fake_api):
        session.add_to_cart(1)
        session.show_cart()

        with pytest.raises(ValidationError) as exc_info:
            session.place_order("Ada Lovelace", address)

        assert "view" in exc_info.value.messages
        assert fake_api.submitted_orders == []
        assert session.item_count() == 1


class TestCartEvents:
    def test_pending_events_stay_bounded_over_a_long_session(self, session):
        for _ in range(500):
            session.add_to_cart(1)
            session.update_quantity(1, "3")
            session.remove_from_cart(1)
            assert session.cart._events == []

    def test_successful_order_leaves_no_pending_events(self, session, address):
        session.add_to_cart(1)
        session.show_cart()
        session.proceed_to_checkout()

        assert session.place_order("Ada Lovelace", address).success
        assert session.cart._events == []


class TestLogContext:
    def test_start_binds_the_session_id(self, session):
        assert structlog.contextvars.get_contextvars()["session_id"] == session.session_id

    def test_end_clears_the_session_id(self, fake_api):
        session = StorefrontSession.start(gateway=fake_api, settings=StorefrontSettings())
        session.end()
        assert "session_id" not in structlog.contextvars.get_contextvars()
