"""Application service: Update Cart Quantity use case.

Setting a quantity of zero removes the line from the cart.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO, to_cart_dto
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.pricing import PricingConfig, compute_totals


class UpdateCartQuantityHandler:

    def __init__(self, cart_repo: CartRepository, pricing: PricingConfig) -> None:
        self._cart_repo = cart_repo
        self._pricing = pricing

    def handle(self, product_id: str, quantity: int) -> CartDTO:
        cart = self._cart_repo.load()
        cart.set_quantity(product_id, quantity)
        self._cart_repo.save(cart)
        return to_cart_dto(cart, compute_totals(cart, self._pricing))
