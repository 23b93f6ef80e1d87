"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON adapters
but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.events import StatusChangeEvent
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.notifier import DeliveryResult, Notifier
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self.records: dict[int, dict[str, Any]] = {}
        self._next_id = 1

    def save(self, order: Order, extra: dict[str, Any] | None = None) -> int:
        order_id = order.id
        if order_id is None:
            order_id = self._next_id
            self._next_id += 1
        self._store[order_id] = replace(order, id=order_id)
        self.records.setdefault(order_id, {}).update(extra or {})
        return order_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def get_by_order_number(self, order_number: str) -> Order | None:
        for order in self._store.values():
            if order.order_number.lower() == order_number.lower():
                return order
        return None

    def load(self, status: OrderStatus | None = None) -> list[Order]:
        orders = [o for o in self._store.values() if status is None or o.status == status]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def update(self, order_id: int, fields: dict[str, Any]) -> None:
        if order_id not in self._store:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        self.records[order_id].update(fields)
        if "status" in fields:
            self._store[order_id] = replace(
                self._store[order_id], status=OrderStatus(fields["status"])
            )


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeCartRepository(CartRepository):

    def __init__(self, cart: Cart | None = None) -> None:
        self.cart = cart if cart is not None else Cart()
        self.saves = 0

    def load(self) -> Cart:
        return Cart(lines=list(self.cart.lines))

    def save(self, cart: Cart) -> None:
        self.cart = Cart(lines=list(cart.lines))
        self.saves += 1


class FakeNotifier(Notifier):
    """Records every notification; can be told to fail or to raise."""

    def __init__(self, fail_with: str | None = None, raise_with: Exception | None = None) -> None:
        self.sent: list[tuple[Order, StatusChangeEvent]] = []
        self.fail_with = fail_with
        self.raise_with = raise_with

    def notify(self, order: Order, event: StatusChangeEvent) -> DeliveryResult:
        self.sent.append((order, event))
        if self.raise_with is not None:
            raise self.raise_with
        if self.fail_with is not None:
            return DeliveryResult(sent=False, error=self.fail_with)
        return DeliveryResult(sent=True)


class FixedClock:
    """Callable clock that returns a set time and can be advanced."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)
