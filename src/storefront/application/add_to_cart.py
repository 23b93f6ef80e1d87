"""Application service: Add To Cart use case.

Looks the product up in the catalogue so the cart line captures the
current name and price.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, to_cart_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.pricing import PricingConfig, compute_totals

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        pricing: PricingConfig,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._pricing = pricing

    def handle(self, product_id: str, quantity: int = 1) -> CartDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if not product.in_stock:
            raise ValidationError(f"'{product.name}' is out of stock")

        cart = self._cart_repo.load()
        line = cart.add(product, quantity)
        self._cart_repo.save(cart)

        logger.info(
            "Added to cart",
            product_id=product.id,
            requested=quantity,
            line_quantity=line.quantity,
        )
        return to_cart_dto(cart, compute_totals(cart, self._pricing))
