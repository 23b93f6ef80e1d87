"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        in_stock: bool | None = None,
    ) -> Product:
        """Update a product's price and/or stock flag.

        Carts and orders keep the price they captured when the product
        was added.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if new_price is not None:
            product.update_price(Money.of(new_price))
        if in_stock is not None:
            product.set_stock(in_stock)

        self._product_repo.save(product)
        logger.info(
            "Product updated",
            product_id=product.id,
            price=str(product.price),
            in_stock=product.in_stock,
        )
        return product
