"""
Pricing — cart, build service, coupon and shipping composed into a total.

    from rigcart import pricing as P

    q = await P.quote(P.CheckoutInput(cart=items, shipping_method="express"))
    q.totals.total
"""

from rigcart.pricing._totals import (
    Totals,
    compute_totals,
)
from rigcart.pricing._types import (
    DEFAULT_CURRENCY,
    CheckoutInput,
    CheckoutQuote,
)
from rigcart.pricing._graph import (
    CheckoutInputNode,
    NormalizedCartNode,
    BuildServiceNode,
    ShippingNode,
    TotalsNode,
    QuoteNode,
    quote,
)

__all__ = (
    # Totals
    "Totals",
    "compute_totals",
    # Types
    "DEFAULT_CURRENCY",
    "CheckoutInput",
    "CheckoutQuote",
    # Graph
    "CheckoutInputNode",
    "NormalizedCartNode",
    "BuildServiceNode",
    "ShippingNode",
    "TotalsNode",
    "QuoteNode",
    "quote",
)
