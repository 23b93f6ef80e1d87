"""Tests for the outbox email notifier."""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from storefront.domain.model.cart import Cart
from storefront.domain.model.events import StatusChangeEvent
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, ShippingAddress
from storefront.domain.service.pricing import PricingConfig, compute_totals
from storefront.infrastructure.notification.email_notifier import OutboxEmailNotifier

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


@pytest.fixture
def order():
    cart = Cart()
    cart.add(Product(id="1", name="Truffle Box", price=Money.of("24.99")), 2)
    placed = Order.place(cart, ADDRESS, compute_totals(cart, PricingConfig()), "BG-M7Q2-ABCDE", NOW)
    return replace(placed, id=1)


@pytest.fixture
def notifier(tmp_path):
    return OutboxEmailNotifier(
        tmp_path / "outbox.json",
        store_name="Bella Simply Goods",
        store_email="hello@example.com",
    )


def _event(status, previous=OrderStatus.PLACED, **kwargs):
    return StatusChangeEvent("BG-M7Q2-ABCDE", status, NOW, previous_status=previous, **kwargs)


def test_confirmation_email(notifier, order):
    result = notifier.notify(order, _event(OrderStatus.PLACED, previous=None))

    assert result.sent
    [message] = notifier.messages()
    assert message["template"] == "order_confirmation"
    assert message["to"] == "ada@example.com"
    assert message["to_name"] == "Ada Lovelace"
    assert message["from_name"] == "Bella Simply Goods"
    assert message["reply_to"] == "hello@example.com"
    assert message["subject"] == "Order confirmation BG-M7Q2-ABCDE"
    assert "Truffle Box (Qty: 2) - $49.98" in message["body"]
    assert "Total: $59.97" in message["body"]
    assert "Estimated delivery: 2025-03-05" in message["body"]


def test_status_update_email(notifier, order):
    notifier.notify(order, _event(OrderStatus.SHIPPED, tracking_number="1Z999"))

    [message] = notifier.messages()
    assert message["template"] == "order_status_update"
    assert message["subject"] == "Order BG-M7Q2-ABCDE: Shipped"
    assert message["status"] == "shipped"
    assert message["tracking_number"] == "1Z999"
    assert "on its way" in message["body"]
    assert "Tracking number: 1Z999" in message["body"]


def test_delivered_sends_feedback_request(notifier, order):
    notifier.notify(order, _event(OrderStatus.DELIVERED))

    [message] = notifier.messages()
    assert message["template"] == "feedback_request"
    assert "We'd love to hear what you think" in message["body"]
    assert "Estimated delivery" not in message["body"]


def test_cancelled_uses_status_template(notifier, order):
    notifier.notify(order, _event(OrderStatus.CANCELLED))
    [message] = notifier.messages()
    assert message["template"] == "order_status_update"
    assert "cancelled" in message["body"]


def test_messages_accumulate(notifier, order):
    notifier.notify(order, _event(OrderStatus.PLACED, previous=None))
    notifier.notify(order, _event(OrderStatus.PROCESSING))
    ids = [m["message_id"] for m in notifier.messages()]
    assert len(ids) == 2
    assert len(set(ids)) == 2


def test_missing_email_is_a_failed_delivery(notifier, order):
    no_email = replace(order, shipping_address=replace(ADDRESS, email=" "))
    result = notifier.notify(no_email, _event(OrderStatus.SHIPPED))
    assert not result.sent
    assert "no recipient" in result.error
    assert notifier.messages() == []


def test_unwritable_outbox_is_a_failed_delivery(tmp_path, order):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    notifier = OutboxEmailNotifier(blocker / "outbox.json")

    result = notifier.notify(order, _event(OrderStatus.SHIPPED))

    assert not result.sent
    assert result.error.startswith("Could not write to outbox")
