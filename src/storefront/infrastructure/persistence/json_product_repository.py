"""JSON-file-backed implementation of ProductRepository.

The catalogue is a single JSON array. Records written before the storefront
fields existed (category, image, stock flag, rating) load with defaults.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import MAX_RATING, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        if not self._file_path.exists():
            self._write([])

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._read():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        wanted = name.lower()
        for raw in self._read():
            if raw["name"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._read()]

    def save(self, product: Product) -> None:
        records = [raw for raw in self._read() if raw["id"] != product.id]
        records.append(self._to_raw(product))
        records.sort(key=_catalogue_order)
        self._write(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "category": product.category,
            "description": product.description,
            "image": product.image,
            "in_stock": product.in_stock,
            "popular": product.popular,
            "rating": str(product.rating),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            category=raw.get("category", ""),
            description=raw.get("description", ""),
            image=raw.get("image", ""),
            in_stock=raw.get("in_stock", True),
            popular=raw.get("popular", False),
            rating=Decimal(raw.get("rating", str(MAX_RATING))),
        )

    # --- File helpers ---------------------------------------------------------

    def _read(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _write(self, records: list[dict]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )


def _catalogue_order(raw: dict) -> tuple:
    # Numeric ids sort numerically; anything else after them, by text.
    product_id = raw["id"]
    return (0, int(product_id), "") if product_id.isdigit() else (1, 0, product_id)
