"""
Shipping tiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from rigcart._types import Money


@dataclass(frozen=True, slots=True)
class ShippingOption:
    id: str
    name: str
    estimate: str
    cost: Money


class UnknownShippingMethod(LookupError):
    """Raised for an id outside the table. Callers only ever hold catalog ids."""

    def __init__(self, method_id: str) -> None:
        self.method_id = method_id
        super().__init__(f"Unknown shipping method {method_id!r}")


FREE = ShippingOption("free", "Free Shipping", "5–7 working days", Decimal("0.00"))
STANDARD = ShippingOption("standard", "Standard", "2–4 working days", Decimal("9.99"))
EXPRESS = ShippingOption("express", "Express", "1–2 working days", Decimal("14.99"))

SHIPPING_OPTIONS: tuple[ShippingOption, ...] = (FREE, STANDARD, EXPRESS)
DEFAULT_SHIPPING = FREE.id

_BY_ID = {option.id: option for option in SHIPPING_OPTIONS}


def shipping_option(method_id: str) -> ShippingOption:
    try:
        return _BY_ID[method_id]
    except KeyError:
        raise UnknownShippingMethod(method_id) from None


__all__ = (
    "ShippingOption",
    "UnknownShippingMethod",
    "FREE",
    "STANDARD",
    "EXPRESS",
    "SHIPPING_OPTIONS",
    "DEFAULT_SHIPPING",
    "shipping_option",
)
