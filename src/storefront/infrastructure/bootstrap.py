"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.domain.service.order_lifecycle import OrderLifecycleService
from storefront.domain.service.pricing import PricingConfig
from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.notification.email_notifier import OutboxEmailNotifier
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return load_settings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "cart.json")


def pricing_config() -> PricingConfig:
    return settings().pricing()


def notifier() -> OutboxEmailNotifier:
    current = settings()
    return OutboxEmailNotifier(
        current.data_dir / "outbox.json",
        store_name=current.store_name,
        store_email=current.store_email,
    )


def order_lifecycle() -> OrderLifecycleService:
    return OrderLifecycleService(notifier=notifier())
