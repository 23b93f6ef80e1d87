"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import CartTotals, Money, ShippingAddress


@dataclass(frozen=True)
class ShippingDetails:
    """Input: the checkout form."""

    first_name: str
    last_name: str
    email: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: str | None = None

    def to_address(self) -> ShippingAddress:
        return ShippingAddress(
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            email=self.email.strip(),
            address=self.address.strip(),
            city=self.city.strip(),
            state=self.state.strip().upper(),
            zip_code=self.zip_code.strip(),
            phone=self.phone.strip() if self.phone else None,
        )


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single cart or order line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class TotalsDTO:
    subtotal: str
    tax: str
    shipping: str  # "Free" when no shipping is charged
    total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[LineItemDTO]
    item_count: int
    totals: TotalsDTO
    can_checkout: bool


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    order_number: str
    status: str
    customer_name: str
    email: str
    shipping_address: str
    items: list[LineItemDTO]
    totals: TotalsDTO
    created_at: str
    estimated_delivery: str


@dataclass(frozen=True)
class OrderResultDTO:
    """Output: an order after a lifecycle step, plus how notification went."""

    order: OrderDTO
    notification_sent: bool
    warning: str | None = None


# --- Mapping ------------------------------------------------------------------


def format_shipping(shipping: Money) -> str:
    return "Free" if shipping.is_zero else str(shipping)


def to_line_dto(line: CartLine) -> LineItemDTO:
    return LineItemDTO(
        product_id=line.product_id,
        product_name=line.product_name,
        quantity=line.quantity,
        unit_price=str(line.unit_price),
        line_total=str(line.line_total),
    )


def to_totals_dto(totals: CartTotals) -> TotalsDTO:
    return TotalsDTO(
        subtotal=str(totals.subtotal),
        tax=str(totals.tax),
        shipping=format_shipping(totals.shipping),
        total=str(totals.total),
    )


def to_cart_dto(cart: Cart, totals: CartTotals) -> CartDTO:
    return CartDTO(
        items=[to_line_dto(line) for line in cart],
        item_count=cart.item_count(),
        totals=to_totals_dto(totals),
        can_checkout=totals.is_checkout_ready,
    )


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,
        status=order.status.value,
        customer_name=order.shipping_address.full_name,
        email=order.shipping_address.email,
        shipping_address=str(order.shipping_address),
        items=[to_line_dto(item) for item in order.items],
        totals=to_totals_dto(order.totals),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        estimated_delivery=(
            order.estimated_delivery.strftime("%Y-%m-%d")
            if order.estimated_delivery
            else "TBD"
        ),
    )
