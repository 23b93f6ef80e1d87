"""Order aggregate — the frozen record of a checkout.

An Order is created once from a non-empty cart and never edited afterwards,
except for advancing its status. Every state change produces a new Order
instance; the previous instance is left untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from storefront.domain.exceptions import (
    EmptyCartError,
    InvalidTransitionError,
    ValidationError,
)
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import CartTotals, ShippingAddress


class OrderStatus(Enum):
    PLACED = "placed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
DELIVERY_ESTIMATE = timedelta(days=4)


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders. The constructor stays simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    order_number: str
    items: tuple[CartLine, ...]
    shipping_address: ShippingAddress
    totals: CartTotals
    status: OrderStatus
    created_at: datetime
    estimated_delivery: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(
        cart: Cart,
        shipping_address: ShippingAddress,
        totals: CartTotals,
        order_number: str,
        now: datetime,
    ) -> Order:
        """Freeze *cart* into a new PLACED order.

        The cart itself is left as it is; clearing it is the caller's job
        once the order has been stored.
        """
        if cart.is_empty:
            raise EmptyCartError("Cannot place an order from an empty cart")

        if totals.total.is_zero:
            raise ValidationError("Order total must be greater than zero")

        return Order(
            id=None,
            order_number=order_number,
            items=tuple(cart.lines),
            shipping_address=shipping_address,
            totals=totals,
            status=OrderStatus.PLACED,
            created_at=now,
            estimated_delivery=now + DELIVERY_ESTIMATE,
        )

    # --- State transitions ----------------------------------------------------

    def with_status(self, new_status: OrderStatus) -> Order:
        """Return a copy of this order in *new_status*.

        Any status may follow any non-terminal status; skipping steps of the
        usual placed → delivered path is allowed.
        """
        if self.status.is_terminal:
            raise InvalidTransitionError(
                f"Order {self.order_number} is {self.status.value} "
                f"and cannot change status"
            )
        return replace(self, status=new_status)

    # --- Computed properties --------------------------------------------------

    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
