"""Email notifier that writes rendered messages to a JSON outbox file.

A mail relay drains the outbox and talks to the transactional email API;
this adapter only decides which template applies and renders it.

Templates:
- ``order_confirmation``  placement event (no previous status)
- ``feedback_request``    order delivered
- ``order_status_update`` every other status change
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

import structlog

from storefront.application.dto import format_shipping
from storefront.domain.model.events import StatusChangeEvent
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.notifier import DeliveryResult, Notifier

logger = structlog.get_logger(__name__)

STATUS_MESSAGES = {
    OrderStatus.PLACED: "Your order has been placed and will be processed soon.",
    OrderStatus.PROCESSING: "Your order is being prepared with care.",
    OrderStatus.SHIPPED: "Your order is on its way!",
    OrderStatus.IN_TRANSIT: "Your order is currently in transit.",
    OrderStatus.DELIVERED: "Your order has been delivered. Enjoy!",
    OrderStatus.CANCELLED: "Your order has been cancelled.",
}


class OutboxEmailNotifier(Notifier):

    def __init__(
        self,
        outbox_path: Path,
        store_name: str = "Bella Simply Goods",
        store_email: str = "",
    ) -> None:
        self._outbox_path = outbox_path
        self._store_name = store_name
        self._store_email = store_email

    def notify(self, order: Order, event: StatusChangeEvent) -> DeliveryResult:
        recipient = order.shipping_address.email.strip()
        if not recipient:
            return DeliveryResult(sent=False, error="Order has no recipient email address")

        message = self.render(order, event)
        message["to"] = recipient
        try:
            self._append(message)
        except OSError as exc:
            return DeliveryResult(sent=False, error=f"Could not write to outbox: {exc}")

        logger.info(
            "Email queued",
            template=message["template"],
            order_number=order.order_number,
            message_id=message["message_id"],
        )
        return DeliveryResult(sent=True)

    # --- Rendering ------------------------------------------------------------

    def render(self, order: Order, event: StatusChangeEvent) -> dict:
        if event.is_placement:
            template = "order_confirmation"
            subject = f"Order confirmation {order.order_number}"
            body = self._confirmation_body(order)
        else:
            template = "feedback_request" if event.requests_feedback else "order_status_update"
            subject = f"Order {order.order_number}: {event.new_status.label}"
            body = self._status_body(order, event)

        return {
            "message_id": f"email-{uuid4().hex[:12]}",
            "template": template,
            "to_name": order.shipping_address.full_name,
            "from_name": self._store_name,
            "reply_to": self._store_email,
            "subject": subject,
            "body": body,
            "order_number": order.order_number,
            "status": event.new_status.value,
            "tracking_number": event.tracking_number or "",
            "queued_at": datetime.now(timezone.utc).isoformat(),
        }

    def _confirmation_body(self, order: Order) -> str:
        totals = order.totals
        lines = [
            f"Hi {order.shipping_address.full_name},",
            "",
            f"Thank you for your order {order.order_number}.",
            "",
        ]
        lines += [
            f"{item.product_name} (Qty: {item.quantity}) - {item.line_total}"
            for item in order.items
        ]
        lines += [
            "",
            f"Subtotal: {totals.subtotal}",
            f"Tax: {totals.tax}",
            f"Shipping: {format_shipping(totals.shipping)}",
            f"Total: {totals.total}",
            "",
            f"Shipping to: {order.shipping_address}",
            f"Estimated delivery: {self._estimated_delivery(order)}",
        ]
        return "\n".join(lines)

    def _status_body(self, order: Order, event: StatusChangeEvent) -> str:
        lines = [
            f"Hi {order.shipping_address.full_name},",
            "",
            STATUS_MESSAGES[event.new_status],
        ]
        if event.tracking_number:
            lines.append(f"Tracking number: {event.tracking_number}")
        if event.new_status not in (OrderStatus.DELIVERED, OrderStatus.CANCELLED):
            lines.append(f"Estimated delivery: {self._estimated_delivery(order)}")
        if event.requests_feedback:
            lines += [
                "",
                "We'd love to hear what you think. Reply with a review quoting "
                f"order {order.order_number}.",
            ]
        return "\n".join(lines)

    @staticmethod
    def _estimated_delivery(order: Order) -> str:
        if order.estimated_delivery is None:
            return "TBD"
        return order.estimated_delivery.strftime("%Y-%m-%d")

    # --- Outbox file ----------------------------------------------------------

    def _append(self, message: dict) -> None:
        messages = self.messages()
        messages.append(message)
        self._outbox_path.parent.mkdir(parents=True, exist_ok=True)
        self._outbox_path.write_text(
            json.dumps(messages, indent=2) + "\n", encoding="utf-8"
        )

    def messages(self) -> list[dict]:
        if not self._outbox_path.exists():
            return []
        return json.loads(self._outbox_path.read_text(encoding="utf-8"))
