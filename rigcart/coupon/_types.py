"""
Coupon types and the validation boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from kungfu import Result

from rigcart._types import Money, ZERO, to_money

MIN_PERCENT = Decimal("0")
MAX_PERCENT = Decimal("100")


@dataclass(frozen=True, slots=True)
class AppliedCoupon:
    """
    A validated coupon attached to the order.

    ``discount_amount`` is fixed when the coupon is applied; the totals
    stage clamps it against the subtotal it is finally charged against.
    """
    code: str
    discount_percent: Decimal
    discount_amount: Money


@dataclass(frozen=True, slots=True)
class CouponRejection:
    message: str


@dataclass(frozen=True, slots=True)
class CouponState:
    applied: AppliedCoupon | None = None
    error: str | None = None
    pending: bool = False

    @property
    def discount_amount(self) -> Money:
        return self.applied.discount_amount if self.applied is not None else ZERO


class CouponValidator(Protocol):
    """External authority that knows which codes are live."""

    async def validate(self, code: str) -> Result[Decimal, CouponRejection]:
        """Return the discount percentage for a normalized code."""
        ...


def normalize_code(code: str) -> str:
    return code.strip().upper()


def clamp_percent(percent: Decimal) -> Decimal:
    return min(max(percent, MIN_PERCENT), MAX_PERCENT)


def discount_for(subtotal: Money, percent: Decimal) -> Money:
    return to_money(subtotal * percent / 100)


__all__ = (
    "MIN_PERCENT",
    "MAX_PERCENT",
    "AppliedCoupon",
    "CouponRejection",
    "CouponState",
    "CouponValidator",
    "normalize_code",
    "clamp_percent",
    "discount_for",
)
