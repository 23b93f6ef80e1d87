import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_status,
    order_track,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_stock,
    product_update,
)
from storefront.infrastructure.config import ConfigurationError
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront — cart, checkout and order tracking"""
    try:
        current = settings()
        current.pricing()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    configure_logging(current.log_level, json=current.log_json)


@cli.group()
def order() -> None:
    """Place, track and manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalogue."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


# Register subcommands
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
order.add_command(order_track)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_stock)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
