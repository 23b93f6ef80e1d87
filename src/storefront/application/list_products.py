"""Application service: List Products use case (query)."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        category: str | None = None,
        in_stock_only: bool = False,
    ) -> list[Product]:
        products = self._product_repo.list_all()
        if category:
            products = [p for p in products if p.category.lower() == category.lower()]
        if in_stock_only:
            products = [p for p in products if p.in_stock]
        return products
