"""Application service: Place Order (checkout) use case.

Orchestrates the session cart, the pricing engine and the order lifecycle:

1. Validate the shipping form.
2. Price the cart and freeze it into a PLACED order.
3. Persist the order (with the opaque payment token).
4. Clear the cart, only after the order is safely stored.
5. Send the order confirmation (best effort).
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from storefront.application.dto import OrderResultDTO, ShippingDetails, to_order_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_lifecycle import OrderLifecycleService
from storefront.domain.service.pricing import PricingConfig, compute_totals

logger = structlog.get_logger(__name__)

REQUIRED_SHIPPING_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "address",
    "city",
    "state",
    "zip_code",
)


class PlaceOrderHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
        lifecycle: OrderLifecycleService,
        pricing: PricingConfig,
    ) -> None:
        self._cart_repo = cart_repo
        self._order_repo = order_repo
        self._lifecycle = lifecycle
        self._pricing = pricing

    def handle(
        self,
        shipping: ShippingDetails,
        payment_token: str | None = None,
    ) -> OrderResultDTO:
        """Check out the session cart.

        Payment is assumed to be authorised already; ``payment_token`` is
        stored as-is and never inspected.
        """
        missing = [
            name for name in REQUIRED_SHIPPING_FIELDS
            if not getattr(shipping, name, "").strip()
        ]
        if missing:
            raise ValidationError(
                f"Missing required shipping fields: {', '.join(missing)}"
            )

        cart = self._cart_repo.load()
        totals = compute_totals(cart, self._pricing)
        order = self._lifecycle.place_order(cart, shipping.to_address(), totals)

        extra = {"payment_token": payment_token} if payment_token else None
        order_id = self._order_repo.save(order, extra)
        order = replace(order, id=order_id)

        cart.clear()
        self._cart_repo.save(cart)
        logger.info("Cart cleared after checkout", order_number=order.order_number)

        delivery = self._lifecycle.dispatch(order, self._lifecycle.placement_event(order))
        warning = None
        if not delivery.sent:
            warning = (
                f"Order {order.order_number} placed but the confirmation "
                f"email failed: {delivery.error or 'unknown error'}"
            )

        return OrderResultDTO(
            order=to_order_dto(order),
            notification_sent=delivery.sent,
            warning=warning,
        )
