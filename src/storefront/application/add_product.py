"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import structlog

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import MAX_RATING, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str = "",
        description: str = "",
        image: str = "",
        in_stock: bool = True,
        popular: bool = False,
        rating: str | None = None,
    ) -> Product:
        """Add a new product to the catalogue."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign the next numeric ID; imported ids like "p1" are skipped
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        next_id = str(max(numeric_ids, default=0) + 1)

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price),
            category=category.strip(),
            description=description.strip(),
            image=image.strip(),
            in_stock=in_stock,
            popular=popular,
            rating=_parse_rating(rating),
        )
        self._product_repo.save(product)
        logger.info("Product added", product_id=product.id, name=product.name)
        return product


def _parse_rating(raw: str | None) -> Decimal:
    if raw is None:
        return MAX_RATING
    try:
        rating = Decimal(raw)
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid rating: {raw!r}") from exc
    if not rating.is_finite():
        raise ValidationError(f"Invalid rating: {raw!r}")
    return rating
