"""Unit tests for the pricing engine."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import InvalidCartError, ValidationError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import CartTotals, Money
from storefront.domain.service.pricing import PricingConfig, compute_totals

CONFIG = PricingConfig(
    tax_rate=Decimal("0.08"),
    free_shipping_threshold=Money.of("50"),
    flat_shipping_cost=Money.of("5.99"),
)


def _cart(*items: tuple[str, str, int]) -> Cart:
    cart = Cart()
    for pid, price, qty in items:
        cart.add(Product(id=pid, name=f"Product {pid}", price=Money.of(price)), qty)
    return cart


class TestComputeTotals:

    def test_checkout_happy_path(self):
        totals = compute_totals(_cart(("p1", "24.99", 2)), CONFIG)
        assert totals.subtotal == Money.of("49.98")
        assert totals.tax == Money.of("4.00")
        assert totals.shipping == Money.of("5.99")
        assert totals.total == Money.of("59.97")

    def test_free_shipping_above_threshold(self):
        totals = compute_totals(_cart(("p1", "24.99", 4)), CONFIG)
        assert totals.subtotal == Money.of("99.96")
        assert totals.shipping == Money.zero()
        assert totals.total == Money.of("107.96")

    def test_flat_shipping_below_higher_threshold(self):
        config = PricingConfig(
            tax_rate=Decimal("0.08"),
            free_shipping_threshold=Money.of("100"),
            flat_shipping_cost=Money.of("5.99"),
        )
        totals = compute_totals(_cart(("p1", "24.99", 4)), config)
        assert totals.shipping == Money.of("5.99")

    def test_subtotal_exactly_at_threshold_ships_free(self):
        totals = compute_totals(_cart(("p1", "25.00", 2)), CONFIG)
        assert totals.subtotal == Money.of("50.00")
        assert totals.shipping == Money.zero()

    def test_one_cent_below_threshold_pays_shipping(self):
        totals = compute_totals(_cart(("p1", "49.99", 1)), CONFIG)
        assert totals.shipping == Money.of("5.99")

    def test_empty_cart_is_all_zero(self):
        totals = compute_totals(Cart(), CONFIG)
        assert totals == CartTotals.zero()
        assert not totals.is_checkout_ready

    def test_empty_list_is_all_zero(self):
        assert compute_totals([], CONFIG) == CartTotals.zero()

    @pytest.mark.parametrize(
        "items",
        [
            [("p1", "0.01", 1)],
            [("p1", "19.99", 3), ("p2", "7.45", 1)],
            [("p1", "33.33", 3)],
            [("p1", "12.345", 1)],
        ],
    )
    def test_total_is_exact_sum_of_parts(self, items):
        totals = compute_totals(_cart(*items), CONFIG)
        assert totals.total.amount == (
            totals.subtotal.amount + totals.tax.amount + totals.shipping.amount
        )

    def test_zero_quantity_line_rejected(self):
        bad = [CartLine("p1", "Broken", Money.of("5"), quantity=0)]
        with pytest.raises(InvalidCartError, match="invalid quantity 0"):
            compute_totals(bad, CONFIG)

    def test_negative_quantity_line_rejected(self):
        bad = Cart(lines=[CartLine("p1", "Broken", Money.of("5"), quantity=-2)])
        with pytest.raises(InvalidCartError):
            compute_totals(bad, CONFIG)

    def test_is_deterministic(self):
        cart = _cart(("p1", "19.99", 3))
        assert compute_totals(cart, CONFIG) == compute_totals(cart, CONFIG)


class TestPricingConfig:

    def test_defaults(self):
        config = PricingConfig()
        assert config.tax_rate == Decimal("0.08")
        assert config.free_shipping_threshold == Money.of("50.00")
        assert config.flat_shipping_cost == Money.of("5.99")

    def test_tax_rate_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="Tax rate"):
            PricingConfig(tax_rate=Decimal("1.5"))

    def test_non_finite_tax_rate_rejected(self):
        with pytest.raises(ValidationError, match="Tax rate"):
            PricingConfig(tax_rate=Decimal("NaN"))
