"""Domain events emitted by the order lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.model.order import OrderStatus


@dataclass(frozen=True)
class StatusChangeEvent:
    """An order entered a new status.

    ``previous_status`` is None for the placement event sent at checkout.
    """

    order_number: str
    new_status: OrderStatus
    occurred_at: datetime
    previous_status: OrderStatus | None = None
    tracking_number: str | None = None
    notes: str | None = None
    updated_by: str | None = None

    @property
    def is_placement(self) -> bool:
        return self.previous_status is None

    @property
    def requests_feedback(self) -> bool:
        return self.new_status == OrderStatus.DELIVERED
