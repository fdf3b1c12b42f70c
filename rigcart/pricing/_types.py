"""
Pricing inputs and outputs.
"""

from __future__ import annotations

from dataclasses import dataclass

from rigcart.build_service import BuildServiceChoice, BuildServiceOffer
from rigcart.cart import NormalizedCart, RawLineItem
from rigcart.coupon import AppliedCoupon
from rigcart.pricing._totals import Totals
from rigcart.shipping import DEFAULT_SHIPPING, ShippingOption

DEFAULT_CURRENCY = "gbp"


@dataclass(frozen=True, slots=True)
class CheckoutInput:
    """Everything the customer has chosen so far, before validation."""
    cart: tuple[RawLineItem, ...]
    build_service: BuildServiceChoice = BuildServiceChoice()
    shipping_method: str = DEFAULT_SHIPPING
    coupon: AppliedCoupon | None = None
    currency: str = DEFAULT_CURRENCY


@dataclass(frozen=True, slots=True)
class CheckoutQuote:
    cart: NormalizedCart
    build_service: BuildServiceOffer
    shipping: ShippingOption
    coupon: AppliedCoupon | None
    totals: Totals
    currency: str


__all__ = ("DEFAULT_CURRENCY", "CheckoutInput", "CheckoutQuote")
