"""
Core types for rigcart.

Money helpers shared by every stage.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

# ═══════════════════════════════════════════════════════════════════════════════
# Money
# ═══════════════════════════════════════════════════════════════════════════════

type Money = Decimal
"""Currency amount in pounds, quantized to pennies."""

PENNY = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | str) -> Money:
    """Quantize to pennies, half-up."""
    return Decimal(value).quantize(PENNY, rounding=ROUND_HALF_UP)


def as_decimal(value: object) -> Decimal | None:
    """
    Read a finite number from an untyped payload.

    Floats go through repr() so 9.99 stays 9.99. Booleans and strings
    are not numbers here.
    """
    match value:
        case bool():
            return None
        case Decimal():
            return value if value.is_finite() else None
        case int():
            return Decimal(value)
        case float():
            return Decimal(repr(value)) if math.isfinite(value) else None
        case _:
            return None


def format_money(value: Money) -> str:
    return f"£{to_money(value):.2f}"


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Money",
    "PENNY",
    "ZERO",
    "to_money",
    "as_decimal",
    "format_money",
)
