"""Domain service: cart pricing.

Pure computation of subtotal, tax, shipping and grand total. Safe to call on
every read; nothing is cached or stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from storefront.domain.exceptions import InvalidCartError, ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import CartTotals, Money


@dataclass(frozen=True)
class PricingConfig:
    tax_rate: Decimal = Decimal("0.08")
    free_shipping_threshold: Money = field(default_factory=lambda: Money.of("50.00"))
    flat_shipping_cost: Money = field(default_factory=lambda: Money.of("5.99"))

    def __post_init__(self) -> None:
        if not self.tax_rate.is_finite() or not Decimal("0") <= self.tax_rate < Decimal("1"):
            raise ValidationError(
                f"Tax rate must be between 0 and 1, got {self.tax_rate}"
            )


def compute_totals(lines: Iterable[CartLine], config: PricingConfig) -> CartTotals:
    """Price a cart (or any iterable of cart lines).

    Tax is rounded half-up to whole cents; shipping is free once the
    subtotal reaches the threshold.
    """
    lines = list(lines)
    if not lines:
        return CartTotals.zero()

    subtotal = Money.zero()
    for line in lines:
        if line.quantity <= 0:
            raise InvalidCartError(
                f"Cart line for '{line.product_name}' has invalid quantity "
                f"{line.quantity}"
            )
        subtotal = subtotal + line.line_total

    tax = subtotal.apply_rate(config.tax_rate)
    if subtotal >= config.free_shipping_threshold:
        shipping = Money.zero()
    else:
        shipping = config.flat_shipping_cost

    return CartTotals(
        subtotal=subtotal,
        tax=tax,
        shipping=shipping,
        total=subtotal + tax + shipping,
    )
