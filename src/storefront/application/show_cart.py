"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, to_cart_dto
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.pricing import PricingConfig, compute_totals


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository, pricing: PricingConfig) -> None:
        self._cart_repo = cart_repo
        self._pricing = pricing

    def handle(self) -> CartDTO:
        cart = self._cart_repo.load()
        return to_cart_dto(cart, compute_totals(cart, self._pricing))
