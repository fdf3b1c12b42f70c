"""Tests for stage evaluation."""

from rigcart import graph as G
from rigcart.pricing import CheckoutInput
from rigcart.pricing._graph import ShippingNode, NormalizedCartNode


class TestEvaluation:
    async def test_compose_resolves_through_dependencies(self, gpu_only_cart):
        node = await G.compose(ShippingNode, CheckoutInput(cart=tuple(gpu_only_cart), shipping_method="express"))

        assert node.data.id == "express"

    async def test_seed_as_keys_by_declared_type(self, full_build_cart):
        checkout = CheckoutInput(cart=tuple(full_build_cart))

        node = await G.Evaluation(NormalizedCartNode).seed_as(CheckoutInput, checkout).labelled("cart-only")

        assert len(node.data.items) == len(full_build_cart)

    def test_builders_return_new_evaluations(self, gpu_only_cart):
        base = G.Evaluation(ShippingNode)
        seeded = base.with_inputs(CheckoutInput(cart=tuple(gpu_only_cart)))
        named = seeded.labelled("quote")

        assert base.seeds == ()
        assert len(seeded.seeds) == 1
        assert seeded.label == "checkout"
        assert named.label == "quote"
        assert named.seeds == seeded.seeds
