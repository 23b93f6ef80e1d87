"""JSON-file-backed implementation of CartRepository.

One file holds one session's cart; the CLI treats the data directory as
the session.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> Cart:
        if not self._file_path.exists():
            return Cart()
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return Cart(
            lines=[
                CartLine(
                    product_id=line["product_id"],
                    product_name=line["product_name"],
                    unit_price=Money(
                        Decimal(line["unit_price"]), line.get("currency", "USD")
                    ),
                    quantity=line["quantity"],
                    image=line.get("image", ""),
                )
                for line in raw.get("lines", [])
            ]
        )

    def save(self, cart: Cart) -> None:
        raw = {
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                    "quantity": line.quantity,
                    "image": line.image,
                }
                for line in cart
            ]
        }
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )
