"""Notification dispatch port.

The order lifecycle asks for a customer notification whenever an order
changes status. Delivery (email, SMS, ...) lives in infrastructure adapters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.model.events import StatusChangeEvent
from storefront.domain.model.order import Order


@dataclass(frozen=True)
class DeliveryResult:
    sent: bool
    error: str | None = None


class Notifier(ABC):

    @abstractmethod
    def notify(self, order: Order, event: StatusChangeEvent) -> DeliveryResult:
        """Request a notification for *event*.

        Adapters report failures through the returned result.
        """
