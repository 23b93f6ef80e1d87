"""Cart aggregate — the shopper's in-progress selection.

A cart holds at most one line per product. Lines are replaced rather than
mutated so that an order can keep a frozen copy of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import MAX_LINE_QUANTITY, Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """A product-and-quantity entry with the product snapshot taken at add time."""

    product_id: str
    product_name: str
    unit_price: Money  # locked when the product was added
    quantity: int
    image: str = ""

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    """Aggregate root for a single shopping session's cart.

    Use ``Cart()`` for a fresh session; the repository passes ``lines`` when
    reconstituting a stored cart.
    """

    lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> CartLine:
        """Add *quantity* units of *product*, merging with an existing line.

        The merged quantity is clamped at MAX_LINE_QUANTITY.
        """
        Quantity(quantity)

        existing = self.get(product.id)
        if existing is not None:
            merged = min(existing.quantity + quantity, MAX_LINE_QUANTITY)
            line = replace(existing, quantity=merged)
            self._replace_line(line)
            return line

        line = CartLine(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,
            quantity=quantity,
            image=product.image,
        )
        self.lines.append(line)
        return line

    def set_quantity(self, product_id: str, new_quantity: int) -> None:
        """Replace a line's quantity; zero removes the line."""
        if new_quantity == 0:
            self.remove(product_id)
            return

        Quantity(new_quantity)
        line = self._find_line(product_id)
        self._replace_line(replace(line, quantity=new_quantity))

    def remove(self, product_id: str) -> None:
        line = self._find_line(product_id)
        self.lines.remove(line)

    def clear(self) -> None:
        self.lines = []

    # --- Queries --------------------------------------------------------------

    def get(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def item_count(self) -> int:
        """Total units across all lines (the cart badge number)."""
        return sum(line.quantity for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: str) -> CartLine:
        line = self.get(product_id)
        if line is None:
            raise ValidationError(f"Product ID '{product_id}' is not in the cart")
        return line

    def _replace_line(self, new_line: CartLine) -> None:
        for i, line in enumerate(self.lines):
            if line.product_id == new_line.product_id:
                self.lines[i] = new_line
                return
