"""Application service: Show Order use case (query).

Orders can be looked up by internal ID (admin) or by order number
(customer tracking page).
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return to_order_dto(order)

    def track(self, order_number: str) -> OrderDTO:
        order = self._order_repo.get_by_order_number(order_number.strip())
        if order is None:
            raise EntityNotFoundError(f"No order found with number '{order_number}'")
        return to_order_dto(order)
