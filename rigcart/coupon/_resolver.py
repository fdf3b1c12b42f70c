"""
Coupon resolver — last requested wins.

Each apply()/clear() bumps a generation counter. A validation response
is only committed if no newer request was made while it was in flight.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from combinators import lift as L
from kungfu import Error, Ok, Result

from rigcart._types import Money
from rigcart.coupon._types import (
    AppliedCoupon,
    CouponRejection,
    CouponState,
    CouponValidator,
    clamp_percent,
    discount_for,
    normalize_code,
)

logger = logging.getLogger(__name__)

VALIDATION_UNAVAILABLE = "Unable to validate coupon. Please try again."


class CouponResolver:
    """
    Holds the applied coupon for one checkout.

    Example:
        resolver = CouponResolver(HttpCouponValidator(client))
        state = await resolver.apply(" save10 ", quote.totals.subtotal)
        state.applied   # AppliedCoupon("SAVE10", 10, 83.50)
    """

    __slots__ = ("_validator", "_applied", "_error", "_generation", "_pending")

    def __init__(self, validator: CouponValidator) -> None:
        self._validator = validator
        self._applied: AppliedCoupon | None = None
        self._error: str | None = None
        self._generation = 0
        self._pending: int | None = None

    @property
    def applied(self) -> AppliedCoupon | None:
        return self._applied

    @property
    def error(self) -> str | None:
        return self._error

    def state(self) -> CouponState:
        return CouponState(
            applied=self._applied,
            error=self._error,
            pending=self._pending == self._generation,
        )

    def clear(self) -> CouponState:
        """Drop any applied coupon. Supersedes in-flight validations."""
        self._generation += 1
        self._applied = None
        self._error = None
        return self.state()

    async def apply(self, code: str, subtotal: Money) -> CouponState:
        """
        Validate ``code`` and derive its discount against ``subtotal``.

        ``subtotal`` is pre-discount and includes the build-service fee.
        An empty code clears the coupon without an error.
        """
        normalized = normalize_code(code)
        if not normalized:
            return self.clear()

        self._generation += 1
        generation = self._generation
        self._pending = generation
        self._error = None

        outcome = await self._validate(normalized)

        if generation != self._generation:
            logger.debug("Discarding superseded coupon response for %s", normalized)
            return self.state()

        self._pending = None
        match outcome:
            case Ok(percent):
                self._applied = self._coupon(normalized, percent, subtotal)
                self._error = None
            case Error(CouponRejection(message=message)):
                self._applied = None
                self._error = message

        return self.state()

    async def _validate(self, code: str) -> Result[Decimal, CouponRejection]:
        return await L.catching_async(
            lambda: self._validator.validate(code),
            on_error=_unavailable,
        ).then(L.from_result)

    @staticmethod
    def _coupon(code: str, percent: Decimal, subtotal: Money) -> AppliedCoupon:
        clamped = clamp_percent(percent)
        if clamped != percent:
            logger.warning("Coupon %s returned %s%%, clamped to %s%%", code, percent, clamped)
        return AppliedCoupon(
            code=code,
            discount_percent=clamped,
            discount_amount=discount_for(subtotal, clamped),
        )


def _unavailable(exc: Exception) -> CouponRejection:
    logger.error("Coupon validation failed", exc_info=exc)
    return CouponRejection(VALIDATION_UNAVAILABLE)


__all__ = ("CouponResolver", "VALIDATION_UNAVAILABLE")
