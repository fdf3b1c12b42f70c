"""Tests for the pricing graph."""

from decimal import Decimal

import pytest

from rigcart.build_service import BuildServiceChoice, UnknownBuildService
from rigcart.coupon import AppliedCoupon
from rigcart.pricing import CheckoutInput, quote
from rigcart.shipping import UnknownShippingMethod

from tests.fakes import line

D = Decimal


class TestQuote:
    async def test_full_build_with_default_service(self, full_build_cart):
        q = await quote(CheckoutInput(cart=tuple(full_build_cart)))

        assert q.cart.subtotal == D("750.00")
        assert q.build_service.eligible
        assert q.build_service.selected.id == "performance-build"
        assert q.shipping.id == "free"
        assert q.totals.subtotal == D("880.00")
        assert q.totals.total == D("880.00")
        assert q.currency == "gbp"

    async def test_standard_assembly_with_coupon_and_shipping(self, full_build_cart):
        checkout = CheckoutInput(
            cart=tuple(full_build_cart),
            build_service=BuildServiceChoice("standard-assembly"),
            shipping_method="standard",
            coupon=AppliedCoupon("SAVE10", D("10"), D("83.50")),
        )
        q = await quote(checkout)

        assert q.totals.subtotal == D("835.00")
        assert q.totals.final_subtotal == D("751.50")
        assert q.totals.total == D("761.49")
        assert q.coupon.code == "SAVE10"

    async def test_gpu_only_cart_has_no_build_service(self, gpu_only_cart):
        q = await quote(CheckoutInput(cart=tuple(gpu_only_cart), shipping_method="express"))

        assert not q.build_service.eligible
        assert q.totals.build_service_fee == D("0")
        assert q.totals.total == D("514.99")

    async def test_stale_coupon_is_clamped_to_new_subtotal(self):
        checkout = CheckoutInput(
            cart=(line("fan", "cooling", 20),),
            coupon=AppliedCoupon("BIG", D("50"), D("400.00")),
        )
        q = await quote(checkout)
        assert q.totals.discount_amount == D("20.00")
        assert q.totals.total == D("0.00")

    async def test_invalid_items_do_not_contribute(self, full_build_cart):
        dirty = (*full_build_cart, line("broken", "gpu", float("nan")))
        q = await quote(CheckoutInput(cart=dirty))
        assert q.cart.subtotal == D("750.00")
        assert len(q.cart.rejected) == 1

    async def test_same_input_same_quote(self, full_build_cart):
        checkout = CheckoutInput(cart=tuple(full_build_cart), shipping_method="express")
        assert await quote(checkout) == await quote(checkout)

    async def test_unknown_shipping_method(self, full_build_cart):
        with pytest.raises(UnknownShippingMethod):
            await quote(CheckoutInput(cart=tuple(full_build_cart), shipping_method="teleport"))

    async def test_unknown_build_service(self, full_build_cart):
        checkout = CheckoutInput(cart=tuple(full_build_cart), build_service=BuildServiceChoice("gold"))
        with pytest.raises(UnknownBuildService):
            await quote(checkout)
