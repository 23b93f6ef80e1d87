"""JSON-file-backed implementation of OrderRepository.

Besides the order itself, each record keeps bookkeeping fields written by
``update()``: ``version`` (bumped on every write), ``updated_at``,
``updated_by``, ``tracking_number``, ``notes``, ``payment_token`` and
``is_active``. Records with ``is_active`` false are hidden from queries.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.value_objects import CartTotals, Money, ShippingAddress
from storefront.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def save(self, order: Order, extra: dict[str, Any] | None = None) -> int:
        orders = self._load_raw()

        order_id = order.id if order.id is not None else self._next_id(orders)
        record = {**(extra or {}), **self._to_raw(order, order_id)}

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order_id:
                orders[i] = {**raw, **record, "version": raw.get("version", 1) + 1}
                break
        else:
            orders.append({**record, "is_active": True, "version": 1})

        self._persist_raw(orders)
        return order_id

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def get_by_order_number(self, order_number: str) -> Order | None:
        wanted = order_number.lower()
        for raw in self._active():
            if raw["order_number"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def load(self, status: OrderStatus | None = None) -> list[Order]:
        records = self._active()
        if status is not None:
            records = [r for r in records if r["status"] == status.value]
        records.sort(key=lambda r: r["created_at"], reverse=True)
        return [self._to_domain(r) for r in records]

    def update(self, order_id: int, fields: dict[str, Any]) -> None:
        orders = self._load_raw()
        for raw in orders:
            if raw["id"] == order_id:
                raw.update(fields)
                if "updated_at" not in fields:
                    raw["updated_at"] = datetime.now(timezone.utc).isoformat()
                raw["version"] = raw.get("version", 1) + 1
                break
        else:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        self._persist_raw(orders)

    def record(self, order_id: int) -> dict[str, Any] | None:
        """Return the raw stored record, bookkeeping fields included."""
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return raw
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order, order_id: int) -> dict:
        address = order.shipping_address
        totals = order.totals
        return {
            "id": order_id,
            "order_number": order.order_number,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "estimated_delivery": (
                order.estimated_delivery.isoformat()
                if order.estimated_delivery
                else None
            ),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "image": item.image,
                }
                for item in order.items
            ],
            "shipping_address": {
                "first_name": address.first_name,
                "last_name": address.last_name,
                "email": address.email,
                "phone": address.phone,
                "address": address.address,
                "city": address.city,
                "state": address.state,
                "zip_code": address.zip_code,
            },
            "totals": {
                "subtotal": str(totals.subtotal.amount),
                "tax": str(totals.tax.amount),
                "shipping": str(totals.shipping.amount),
                "total": str(totals.total.amount),
                "currency": totals.total.currency,
            },
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            CartLine(
                product_id=i["product_id"],
                product_name=i["product_name"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                quantity=i["quantity"],
                image=i.get("image", ""),
            )
            for i in raw["items"]
        )
        t = raw["totals"]
        currency = t.get("currency", "USD")
        totals = CartTotals(
            subtotal=Money(Decimal(t["subtotal"]), currency),
            tax=Money(Decimal(t["tax"]), currency),
            shipping=Money(Decimal(t["shipping"]), currency),
            total=Money(Decimal(t["total"]), currency),
        )
        estimated = raw.get("estimated_delivery")
        return Order(
            id=raw["id"],
            order_number=raw["order_number"],
            items=items,
            shipping_address=ShippingAddress(**raw["shipping_address"]),
            totals=totals,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            estimated_delivery=datetime.fromisoformat(estimated) if estimated else None,
        )

    # --- File helpers ---------------------------------------------------------

    def _active(self) -> list[dict]:
        return [r for r in self._load_raw() if r.get("is_active", True) is not False]

    @staticmethod
    def _next_id(orders: list[dict]) -> int:
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
