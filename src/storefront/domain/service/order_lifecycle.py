"""Domain service: Order Lifecycle.

Places orders from carts and moves them between statuses. Each status
change is announced to the Notifier as a StatusChangeEvent. Notification
is best effort: a failed or crashing notifier is logged and reported in the
result, and the status change stands.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

import structlog

from storefront.domain.model.cart import Cart
from storefront.domain.model.events import StatusChangeEvent
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.value_objects import CartTotals, ShippingAddress
from storefront.domain.notifier import DeliveryResult, Notifier
from storefront.domain.service.order_number import OrderNumberGenerator

logger = structlog.get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class StatusUpdateMeta:
    """Optional details an admin attaches to a status change."""

    tracking_number: str | None = None
    notes: str | None = None
    updated_by: str | None = None


@dataclass(frozen=True)
class StatusUpdateResult:
    order: Order
    event: StatusChangeEvent
    delivery: DeliveryResult

    @property
    def warning(self) -> str | None:
        if self.delivery.sent:
            return None
        return (
            f"Order {self.order.order_number} updated but the customer "
            f"notification failed: {self.delivery.error or 'unknown error'}"
        )


class OrderLifecycleService:

    def __init__(
        self,
        notifier: Notifier,
        number_generator: OrderNumberGenerator | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._notifier = notifier
        self._number_generator = number_generator or OrderNumberGenerator(clock=clock)
        self._clock = clock

    def place_order(
        self,
        cart: Cart,
        shipping_address: ShippingAddress,
        totals: CartTotals,
    ) -> Order:
        """Freeze *cart* into a new PLACED order (the cart is not cleared)."""
        order = Order.place(
            cart=cart,
            shipping_address=shipping_address,
            totals=totals,
            order_number=self._number_generator.generate(),
            now=self._clock(),
        )
        logger.info(
            "Order placed",
            order_number=order.order_number,
            total=str(order.totals.total),
            items=order.item_count(),
        )
        return order

    def update_status(
        self,
        order: Order,
        new_status: OrderStatus,
        meta: StatusUpdateMeta | None = None,
        on_change: Callable[[Order, StatusChangeEvent], None] | None = None,
    ) -> StatusUpdateResult:
        """Move *order* to *new_status* and notify the customer.

        ``on_change`` runs after the transition is validated and before the
        notification is dispatched (used to persist the change first).
        """
        meta = meta or StatusUpdateMeta()
        updated = order.with_status(new_status)

        event = StatusChangeEvent(
            order_number=order.order_number,
            new_status=new_status,
            occurred_at=self._clock(),
            previous_status=order.status,
            tracking_number=meta.tracking_number,
            notes=meta.notes,
            updated_by=meta.updated_by,
        )
        logger.info(
            "Order status changed",
            order_number=order.order_number,
            previous_status=order.status.value,
            status=new_status.value,
            updated_by=meta.updated_by,
        )

        if on_change is not None:
            on_change(updated, event)

        delivery = self.dispatch(updated, event)
        return StatusUpdateResult(order=updated, event=event, delivery=delivery)

    def dispatch(self, order: Order, event: StatusChangeEvent) -> DeliveryResult:
        """Hand *event* to the notifier, turning adapter crashes into a failed result."""
        try:
            delivery = self._notifier.notify(order, event)
        except Exception as exc:
            logger.exception(
                "Notifier raised while dispatching",
                order_number=order.order_number,
                status=event.new_status.value,
            )
            return DeliveryResult(sent=False, error=str(exc))

        if not delivery.sent:
            logger.warning(
                "Customer notification failed",
                order_number=order.order_number,
                status=event.new_status.value,
                error=delivery.error,
            )
        return delivery

    def placement_event(self, order: Order) -> StatusChangeEvent:
        return StatusChangeEvent(
            order_number=order.order_number,
            new_status=order.status,
            occurred_at=order.created_at,
        )
