"""Application service: Update Order Status use case (admin).

The new status is stored before the customer is notified, so a failing
notification channel can never undo or block the change.
"""

from __future__ import annotations

from storefront.application.dto import OrderResultDTO, to_order_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.events import StatusChangeEvent
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_lifecycle import (
    OrderLifecycleService,
    StatusUpdateMeta,
)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        lifecycle: OrderLifecycleService,
    ) -> None:
        self._order_repo = order_repo
        self._lifecycle = lifecycle

    def handle(
        self,
        order_id: int,
        new_status: OrderStatus,
        tracking_number: str | None = None,
        notes: str | None = None,
        updated_by: str | None = None,
    ) -> OrderResultDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        meta = StatusUpdateMeta(
            tracking_number=tracking_number or None,
            notes=notes or None,
            updated_by=updated_by or None,
        )
        result = self._lifecycle.update_status(
            order, new_status, meta, on_change=self._persist
        )

        return OrderResultDTO(
            order=to_order_dto(result.order),
            notification_sent=result.delivery.sent,
            warning=result.warning,
        )

    def _persist(self, order: Order, event: StatusChangeEvent) -> None:
        fields = {
            "status": order.status.value,
            "updated_at": event.occurred_at.isoformat(),
        }
        if event.tracking_number:
            fields["tracking_number"] = event.tracking_number
        if event.notes:
            fields["notes"] = event.notes
        if event.updated_by:
            fields["updated_by"] = event.updated_by
        self._order_repo.update(order.id, fields)  # type: ignore[arg-type]
