"""
Shipping — fixed three-tier table, free by default.
"""

from rigcart.shipping._catalog import (
    ShippingOption,
    UnknownShippingMethod,
    FREE,
    STANDARD,
    EXPRESS,
    SHIPPING_OPTIONS,
    DEFAULT_SHIPPING,
    shipping_option,
)

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
