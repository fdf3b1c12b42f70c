"""
Graph — checkout stages as dependency-injected nodes.

    from rigcart import graph as G

    @G.node
    class ShippingNode:
        def __init__(self, data: ShippingOption) -> None:
            self.data = data

        @classmethod
        def __compose__(cls, checkout: CheckoutInputNode) -> "ShippingNode":
            return cls(shipping_option(checkout.data.shipping_method))

    node = await G.compose(ShippingNode, checkout)
"""

from nodnod import scalar_node as node

from rigcart.graph._run import Evaluation, compose

__all__ = ("node", "Evaluation", "compose")
