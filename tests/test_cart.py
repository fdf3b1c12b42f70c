"""Tests for cart normalization."""

from decimal import Decimal

import pytest
from kungfu import Error

from rigcart.cart import CartLineItem, normalize_cart, parse_line_item

from tests.fakes import line


class TestNormalizeCart:
    def test_valid_items_are_priced(self, full_build_cart):
        cart = normalize_cart(full_build_cart)
        assert len(cart.items) == 6
        assert cart.rejected == ()
        assert cart.subtotal == Decimal("750.00")
        assert cart.total_quantity == 6

    def test_quantity_multiplies_price(self):
        cart = normalize_cart([line("fan", "cooling", 12.5, quantity=3)])
        assert cart.subtotal == Decimal("37.50")

    def test_float_prices_keep_their_pennies(self):
        cart = normalize_cart([line("paste", "cooling", 9.99), line("cable", "misc", 0.1, quantity=3)])
        assert cart.subtotal == Decimal("10.29")

    @pytest.mark.parametrize(
        "price",
        [-1, float("nan"), float("inf"), "300", None, True],
        ids=["negative", "nan", "inf", "string", "missing", "bool"],
    )
    def test_bad_price_is_excluded(self, price):
        cart = normalize_cart([line("ok", "cpu", 100), line("bad", "ram", price)])
        assert [item.id for item in cart.items] == ["ok"]
        assert cart.subtotal == Decimal("100.00")
        assert cart.rejected[0].raw["id"] == "bad"
        assert "price" in cart.rejected[0].reason

    @pytest.mark.parametrize("quantity", [0, -2, 1.5, "2", None, False])
    def test_bad_quantity_is_excluded(self, quantity):
        cart = normalize_cart([line("bad", "ram", 80, quantity=quantity)])
        assert cart.items == ()
        assert cart.subtotal == Decimal("0.00")
        assert "quantity" in cart.rejected[0].reason

    def test_integral_float_quantity_is_accepted(self):
        cart = normalize_cart([line("ram", "ram", 80, quantity=2.0)])
        assert cart.items[0].quantity == 2

    def test_zero_price_is_allowed(self):
        cart = normalize_cart([line("sticker", "merch", 0)])
        assert cart.subtotal == Decimal("0.00")
        assert len(cart.items) == 1

    def test_missing_name_is_excluded(self):
        raw = {"id": "x", "category": "cpu", "price": 10, "quantity": 1}
        cart = normalize_cart([raw])
        assert cart.rejected[0].reason == "missing name"

    def test_non_mapping_is_excluded(self):
        cart = normalize_cart(["ryzen"])
        assert cart.items == ()
        assert len(cart.rejected) == 1

    def test_invalid_items_are_logged(self, caplog):
        normalize_cart([line("bad", "ram", -5)])
        assert "Excluding invalid cart item" in caplog.text

    def test_category_aliases_are_canonical(self):
        cart = normalize_cart([
            line("a", "Processor", 1),
            line("b", "MEMORY", 1),
            line("c", "power-supply", 1),
        ])
        assert [item.category for item in cart.items] == ["cpu", "ram", "psu"]

    def test_normalizing_twice_is_idempotent(self, full_build_cart):
        dirty = [*full_build_cart, line("bad", "gpu", -10), line("half", "ram", 5, quantity=0.5)]
        once = normalize_cart(dirty)
        twice = normalize_cart(once.items)
        assert twice.items == once.items
        assert twice.subtotal == once.subtotal
        assert twice.rejected == ()


class TestParseLineItem:
    def test_line_item_roundtrips_through_storage_shape(self):
        item = CartLineItem("gpu", "RTX", "gpu", Decimal("499.99"), 1, image="/gpu.png")
        parsed = parse_line_item(item.to_storage()).unwrap()
        assert parsed == item

    def test_directly_built_item_is_still_checked(self):
        item = CartLineItem("gpu", "RTX", "gpu", Decimal("-1"), 1)
        assert isinstance(parse_line_item(item), Error)
