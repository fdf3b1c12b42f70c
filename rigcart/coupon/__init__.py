"""
Coupon — percentage codes validated by an external authority.

    from rigcart import coupon

    resolver = coupon.CouponResolver(validator)
    await resolver.apply("save10", subtotal)
    await resolver.apply("", subtotal)   # clears
"""

from rigcart.coupon._types import (
    MIN_PERCENT,
    MAX_PERCENT,
    AppliedCoupon,
    CouponRejection,
    CouponState,
    CouponValidator,
    normalize_code,
    clamp_percent,
    discount_for,
)
from rigcart.coupon._resolver import (
    CouponResolver,
    VALIDATION_UNAVAILABLE,
)

__all__ = (
    # Types
    "MIN_PERCENT",
    "MAX_PERCENT",
    "AppliedCoupon",
    "CouponRejection",
    "CouponState",
    "CouponValidator",
    # Helpers
    "normalize_code",
    "clamp_percent",
    "discount_for",
    # Resolver
    "CouponResolver",
    "VALIDATION_UNAVAILABLE",
)
