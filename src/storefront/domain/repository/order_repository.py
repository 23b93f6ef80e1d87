"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def save(self, order: Order, extra: dict[str, Any] | None = None) -> int:
        """Persist an order and return its ID.

        ``extra`` holds record-only fields (e.g. the payment token) stored in
        the same write as the order.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_order_number(self, order_number: str) -> Order | None:
        """Return an order by its order number (case-insensitive), or None."""

    @abstractmethod
    def load(self, status: OrderStatus | None = None) -> list[Order]:
        """Return active orders, newest first, optionally filtered by status."""

    @abstractmethod
    def update(self, order_id: int, fields: dict[str, Any]) -> None:
        """Apply a partial update to a stored order record."""
