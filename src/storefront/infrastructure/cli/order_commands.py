"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO, OrderResultDTO, ShippingDetails
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import (
    cart_repository,
    order_lifecycle,
    order_repository,
    pricing_config,
)

STATUS_CHOICE = click.Choice([s.value for s in OrderStatus])


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number}  (#{dto.id}, status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.email}>")
    click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Arriving: {dto.estimated_delivery}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {dto.totals.subtotal:>20}")
    click.echo(f"  {'Tax':<27} {dto.totals.tax:>20}")
    click.echo(f"  {'Shipping':<27} {dto.totals.shipping:>20}")
    click.echo(f"  {'Order Total':<27} {dto.totals.total:>20}")


def _echo_warning(result: OrderResultDTO) -> None:
    if result.warning:
        click.echo(f"Warning: {result.warning}", err=True)


@click.command("place")
@click.option("--first-name", required=True, help="Recipient first name.")
@click.option("--last-name", required=True, help="Recipient last name.")
@click.option("--email", required=True, help="Recipient email.")
@click.option("--phone", default=None, help="Recipient phone (optional).")
@click.option("--address", required=True, help="Street address.")
@click.option("--city", required=True, help="City.")
@click.option("--state", required=True, help="State code (e.g. CA).")
@click.option("--zip", "zip_code", required=True, help="Postal code.")
@click.option("--payment-token", default=None, help="Payment method token from the payment processor.")
def order_place(
    first_name: str,
    last_name: str,
    email: str,
    phone: str | None,
    address: str,
    city: str,
    state: str,
    zip_code: str,
    payment_token: str | None,
) -> None:
    """Check out the cart and place an order."""
    handler = PlaceOrderHandler(
        cart_repo=cart_repository(),
        order_repo=order_repository(),
        lifecycle=order_lifecycle(),
        pricing=pricing_config(),
    )
    shipping = ShippingDetails(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        address=address,
        city=city,
        state=state,
        zip_code=zip_code,
    )

    try:
        result = handler.handle(shipping, payment_token=payment_token)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {result.order.order_number} placed.")
    click.echo()
    _display_order(result.order)
    _echo_warning(result)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("track")
@click.argument("order_number")
def order_track(order_number: str) -> None:
    """Look up an order by its order number."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.track(order_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--status", type=STATUS_CHOICE, default=None, help="Only show orders in this status.")
def order_list(status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())
    orders = handler.handle(OrderStatus(status) if status else None)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<5} {'Order Number':<22} {'Status':<12} {'Customer':<20} {'Total':>10}")
    click.echo("-" * 73)
    for o in orders:
        click.echo(
            f"{o.id:<5} {o.order_number:<22} {o.status:<12} {o.customer_name:<20} {o.totals.total:>10}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--set", "new_status", required=True, type=STATUS_CHOICE, help="New status.")
@click.option("--tracking", "tracking_number", default=None, help="Carrier tracking number.")
@click.option("--notes", default=None, help="Internal notes.")
@click.option("--by", "updated_by", default=None, help="Admin identity recorded with the change.")
def order_status(
    order_id: int,
    new_status: str,
    tracking_number: str | None,
    notes: str | None,
    updated_by: str | None,
) -> None:
    """Update an order's status and email the customer."""
    handler = UpdateOrderStatusHandler(
        order_repo=order_repository(),
        lifecycle=order_lifecycle(),
    )

    try:
        result = handler.handle(
            order_id,
            OrderStatus(new_status),
            tracking_number=tracking_number,
            notes=notes,
            updated_by=updated_by,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {result.order.order_number} is now {result.order.status}.")
    if result.notification_sent:
        click.echo("Customer notified.")
    _echo_warning(result)
