"""
Cart — raw line items in, priced items out.

    from rigcart import cart

    normalized = cart.normalize_cart(stored_items)
    normalized.subtotal        # Decimal, invalid items excluded
    normalized.rejected        # what was dropped, and why
"""

from rigcart.cart._types import (
    PROCESSOR,
    MOTHERBOARD,
    MEMORY,
    STORAGE,
    POWER_SUPPLY,
    CASE,
    BUILD_SERVICE,
    canonical_category,
    CartLineItem,
    RejectedLineItem,
    RawLineItem,
    NormalizedCart,
)
from rigcart.cart._normalize import (
    normalize_cart,
    parse_line_item,
)

__all__ = (
    # Categories
    "PROCESSOR",
    "MOTHERBOARD",
    "MEMORY",
    "STORAGE",
    "POWER_SUPPLY",
    "CASE",
    "BUILD_SERVICE",
    "canonical_category",
    # Types
    "CartLineItem",
    "RejectedLineItem",
    "RawLineItem",
    "NormalizedCart",
    # Operations
    "normalize_cart",
    "parse_line_item",
)
