"""
rigcart — checkout pricing and order composition for a custom-PC store.

    from rigcart import cart                # Cart normalization
    from rigcart import build_service as B  # Full-build service tiers
    from rigcart import coupon              # Last-requested-wins coupons
    from rigcart import shipping            # Shipping tiers
    from rigcart import pricing as P        # Totals and the pricing graph
    from rigcart import order as O          # OrderDraft assembly and payloads
    from rigcart import payment as PM       # Strategies, session, effects
    from rigcart import address             # Validation and prefill
    from rigcart import storage             # Injected key-value state

Adapters (imported explicitly, they pull in httpx and FastAPI):

    from rigcart import gateway as GW       # httpx coupon/payment clients
    from rigcart import api                 # Reference coupon + quote service
"""

from rigcart import graph
from rigcart import storage
from rigcart import cart
from rigcart import build_service
from rigcart import coupon
from rigcart import shipping
from rigcart import pricing
from rigcart import address
from rigcart import order
from rigcart import payment
from rigcart._types import (
    Money,
    ZERO,
    to_money,
    format_money,
)

__version__ = "0.1.0"

__all__ = (
    "graph",
    "storage",
    "cart",
    "build_service",
    "coupon",
    "shipping",
    "pricing",
    "address",
    "order",
    "payment",
    "Money",
    "ZERO",
    "to_money",
    "format_money",
)
