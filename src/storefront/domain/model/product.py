"""Product aggregate.

Products live independently of carts and orders. Prices change and stock
comes and goes; carts and orders keep their own snapshot of name and price.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MAX_RATING = Decimal("5")


@dataclass
class Product:
    """A product in the catalogue.

    Kept as a mutable dataclass because price and stock updates are
    legitimate mutations on the aggregate.
    """

    id: str
    name: str
    price: Money
    category: str = ""
    description: str = ""
    image: str = ""
    in_stock: bool = True
    popular: bool = False
    rating: Decimal = MAX_RATING

    def __post_init__(self) -> None:
        if not self.rating.is_finite() or not Decimal("0") <= self.rating <= MAX_RATING:
            raise ValidationError(
                f"Product rating must be between 0 and {MAX_RATING}, got {self.rating}"
            )

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect carts or orders that already hold a snapshot.
        """
        self.price = new_price

    def set_stock(self, in_stock: bool) -> None:
        self.in_stock = in_stock
