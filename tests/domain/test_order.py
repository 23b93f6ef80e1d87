"""Unit tests for the Order aggregate and its business rules."""

from datetime import datetime, timedelta, timezone

import pytest

from storefront.domain.exceptions import (
    EmptyCartError,
    InvalidTransitionError,
    ValidationError,
)
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import CartTotals, Money, ShippingAddress
from storefront.domain.service.pricing import PricingConfig, compute_totals

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
ADDRESS = ShippingAddress(
    first_name="Ada",
    last_name="Lovelace",
    email="ada@example.com",
    address="12 Analytical Way",
    city="Portland",
    state="OR",
    zip_code="97201",
)


def _cart(qty: int = 2, price: str = "24.99") -> Cart:
    cart = Cart()
    cart.add(Product(id="p1", name="Truffle Box", price=Money.of(price)), qty)
    return cart


def _place(cart: Cart | None = None) -> Order:
    cart = cart if cart is not None else _cart()
    return Order.place(
        cart=cart,
        shipping_address=ADDRESS,
        totals=compute_totals(cart, PricingConfig()),
        order_number="BG-TEST-00001",
        now=NOW,
    )


class TestOrderPlacement:

    def test_happy_path(self):
        order = _place()
        assert order.status == OrderStatus.PLACED
        assert order.order_number == "BG-TEST-00001"
        assert order.created_at == NOW
        assert order.totals.total == Money.of("59.97")
        assert order.shipping_address == ADDRESS
        assert order.item_count() == 2

    def test_id_is_none_for_new_orders(self):
        assert _place().id is None  # assigned by repository

    def test_estimated_delivery_is_four_days_out(self):
        assert _place().estimated_delivery == NOW + timedelta(days=4)

    def test_items_are_frozen_copy_of_cart(self):
        cart = _cart()
        order = _place(cart)
        cart.set_quantity("p1", 5)
        cart.clear()
        assert len(order.items) == 1
        assert order.items[0].quantity == 2

    def test_does_not_clear_cart(self):
        cart = _cart()
        _place(cart)
        assert not cart.is_empty

    def test_empty_cart_rejected(self):
        with pytest.raises(EmptyCartError, match="empty cart"):
            Order.place(Cart(), ADDRESS, CartTotals.zero(), "BG-X-00000", NOW)

    def test_zero_total_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Order.place(_cart(), ADDRESS, CartTotals.zero(), "BG-X-00000", NOW)


class TestOrderStatusTransitions:

    @pytest.mark.parametrize("status", list(OrderStatus))
    def test_any_status_allowed_from_placed(self, status):
        order = _place()
        assert order.with_status(status).status == status

    def test_only_status_changes(self):
        order = _place()
        shipped = order.with_status(OrderStatus.SHIPPED)
        assert shipped.order_number == order.order_number
        assert shipped.items == order.items
        assert shipped.totals == order.totals
        assert shipped.created_at == order.created_at
        assert order.status == OrderStatus.PLACED

    @pytest.mark.parametrize("terminal", [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
    @pytest.mark.parametrize("target", list(OrderStatus))
    def test_terminal_orders_are_locked(self, terminal, target):
        order = _place().with_status(terminal)
        with pytest.raises(InvalidTransitionError, match="cannot change status"):
            order.with_status(target)
        assert order.status == terminal

    def test_cancel_from_processing_then_locked(self):
        order = _place().with_status(OrderStatus.PROCESSING)
        cancelled = order.with_status(OrderStatus.CANCELLED)
        assert cancelled.status == OrderStatus.CANCELLED
        with pytest.raises(InvalidTransitionError):
            cancelled.with_status(OrderStatus.PROCESSING)


class TestOrderStatus:

    def test_terminal_flags(self):
        assert {s for s in OrderStatus if s.is_terminal} == {
            OrderStatus.DELIVERED,
            OrderStatus.CANCELLED,
        }

    def test_label(self):
        assert OrderStatus.IN_TRANSIT.label == "In Transit"
