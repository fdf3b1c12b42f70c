"""Tests for the shipping table."""

from decimal import Decimal

import pytest

from rigcart.shipping import DEFAULT_SHIPPING, SHIPPING_OPTIONS, UnknownShippingMethod, shipping_option


class TestShipping:
    def test_table(self):
        assert [(o.id, o.cost) for o in SHIPPING_OPTIONS] == [
            ("free", Decimal("0.00")),
            ("standard", Decimal("9.99")),
            ("express", Decimal("14.99")),
        ]

    def test_default_is_free(self):
        assert shipping_option(DEFAULT_SHIPPING).cost == Decimal("0.00")

    def test_lookup_returns_estimate(self):
        assert shipping_option("express").estimate == "1–2 working days"

    def test_unknown_method_is_fatal(self):
        with pytest.raises(UnknownShippingMethod, match="overnight"):
            shipping_option("overnight")

    def test_unknown_method_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            shipping_option("")
