"""
Pricing graph — stages 1, 2, 4 and 5 as nodes.

    CheckoutInput ─► CheckoutInputNode ─┬─► NormalizedCartNode ─► BuildServiceNode ─┐
                                        ├─► ShippingNode ───────────────────────────┼─► TotalsNode ─► QuoteNode
                                        └───────────────────────────────────────────┘
"""

from rigcart import graph as G
from rigcart._types import ZERO
from rigcart.build_service import BuildServiceOffer, offer_build_service
from rigcart.cart import NormalizedCart, normalize_cart
from rigcart.pricing._totals import Totals, compute_totals
from rigcart.pricing._types import CheckoutInput, CheckoutQuote
from rigcart.shipping import ShippingOption, shipping_option


@G.node
class CheckoutInputNode:
    """Entry point: the injected CheckoutInput."""

    def __init__(self, data: CheckoutInput) -> None:
        self.data = data

    @classmethod
    def __compose__(cls, checkout: CheckoutInput) -> "CheckoutInputNode":
        return cls(checkout)


@G.node
class NormalizedCartNode:
    def __init__(self, data: NormalizedCart) -> None:
        self.data = data

    @classmethod
    def __compose__(cls, checkout: CheckoutInputNode) -> "NormalizedCartNode":
        return cls(normalize_cart(checkout.data.cart))


@G.node
class BuildServiceNode:
    def __init__(self, data: BuildServiceOffer) -> None:
        self.data = data

    @classmethod
    def __compose__(
        cls,
        checkout: CheckoutInputNode,
        cart: NormalizedCartNode,
    ) -> "BuildServiceNode":
        return cls(offer_build_service(cart.data, checkout.data.build_service))


@G.node
class ShippingNode:
    def __init__(self, data: ShippingOption) -> None:
        self.data = data

    @classmethod
    def __compose__(cls, checkout: CheckoutInputNode) -> "ShippingNode":
        return cls(shipping_option(checkout.data.shipping_method))


@G.node
class TotalsNode:
    def __init__(self, data: Totals) -> None:
        self.data = data

    @classmethod
    def __compose__(
        cls,
        checkout: CheckoutInputNode,
        cart: NormalizedCartNode,
        build_service: BuildServiceNode,
        shipping: ShippingNode,
    ) -> "TotalsNode":
        coupon = checkout.data.coupon
        return cls(compute_totals(
            components_subtotal=cart.data.subtotal,
            build_service_fee=build_service.data.fee,
            discount_amount=coupon.discount_amount if coupon is not None else ZERO,
            shipping_cost=shipping.data.cost,
        ))


@G.node
class QuoteNode:
    """Terminal pricing node."""

    def __init__(self, data: CheckoutQuote) -> None:
        self.data = data

    @classmethod
    def __compose__(
        cls,
        checkout: CheckoutInputNode,
        cart: NormalizedCartNode,
        build_service: BuildServiceNode,
        shipping: ShippingNode,
        totals: TotalsNode,
    ) -> "QuoteNode":
        return cls(CheckoutQuote(
            cart=cart.data,
            build_service=build_service.data,
            shipping=shipping.data,
            coupon=checkout.data.coupon,
            totals=totals.data,
            currency=checkout.data.currency,
        ))


async def quote(checkout: CheckoutInput) -> CheckoutQuote:
    """
    Price a checkout.

    Deterministic: the same CheckoutInput always gives an equal quote.
    Unknown shipping or build-service ids raise LookupError.
    """
    node = await G.compose(QuoteNode, checkout)
    return node.data


__all__ = (
    "CheckoutInputNode",
    "NormalizedCartNode",
    "BuildServiceNode",
    "ShippingNode",
    "TotalsNode",
    "QuoteNode",
    "quote",
)
