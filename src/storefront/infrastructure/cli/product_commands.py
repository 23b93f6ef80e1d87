"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", default="", help="Category label.")
@click.option("--description", default="", help="Short description.")
@click.option("--image", default="", help="Image URL or path.")
@click.option("--popular", is_flag=True, default=False, help="Feature as popular.")
@click.option("--out-of-stock", is_flag=True, default=False, help="Add as out of stock.")
@click.option("--rating", default=None, help="Rating from 0 to 5 (default 5).")
def product_add(
    name: str,
    price: str,
    category: str,
    description: str,
    image: str,
    popular: bool,
    out_of_stock: bool,
    rating: str | None,
) -> None:
    """Add a new product to the catalogue."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            price=price,
            category=category,
            description=description,
            image=image,
            in_stock=not out_of_stock,
            popular=popular,
            rating=rating,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--category", default=None, help="Only show this category.")
@click.option("--in-stock", "in_stock_only", is_flag=True, default=False, help="Hide out-of-stock products.")
def product_list(category: str | None, in_stock_only: bool) -> None:
    """List products in the catalogue."""
    handler = ListProductsHandler(product_repo=product_repository())
    products = handler.handle(category=category, in_stock_only=in_stock_only)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<14} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 61)
    for p in products:
        stock = "yes" if p.in_stock else "no"
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.category:<14} {str(p.price):>10} {stock:>7}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(product_id: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to {product.price}")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--out", "out_of_stock", is_flag=True, default=False, help="Mark out of stock instead.")
def product_stock(product_id: str, out_of_stock: bool) -> None:
    """Mark a product in stock (or out of stock with --out)."""
    in_stock = not out_of_stock
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id, in_stock=in_stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = "in stock" if in_stock else "out of stock"
    click.echo(f"Product #{product_id} marked {state}")
