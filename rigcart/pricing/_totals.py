"""
Total calculation.

    subtotal       = components_subtotal + build_service_fee
    discount       = clamp(discount_amount, 0, subtotal)
    final_subtotal = max(0, subtotal - discount)
    total          = final_subtotal + shipping_cost
"""

from __future__ import annotations

from dataclasses import dataclass

from rigcart._types import Money, ZERO


@dataclass(frozen=True, slots=True)
class Totals:
    components_subtotal: Money
    build_service_fee: Money
    subtotal: Money
    discount_amount: Money
    final_subtotal: Money
    shipping_cost: Money
    total: Money


def compute_totals(
    components_subtotal: Money,
    build_service_fee: Money = ZERO,
    discount_amount: Money = ZERO,
    shipping_cost: Money = ZERO,
) -> Totals:
    for label, amount in (
        ("components_subtotal", components_subtotal),
        ("build_service_fee", build_service_fee),
        ("shipping_cost", shipping_cost),
    ):
        if amount < 0:
            raise ValueError(f"{label} must be >= 0, got {amount}")

    subtotal = components_subtotal + build_service_fee
    discount = min(max(discount_amount, ZERO), subtotal)
    final_subtotal = max(ZERO, subtotal - discount)

    return Totals(
        components_subtotal=components_subtotal,
        build_service_fee=build_service_fee,
        subtotal=subtotal,
        discount_amount=discount,
        final_subtotal=final_subtotal,
        shipping_cost=shipping_cost,
        total=final_subtotal + shipping_cost,
    )


__all__ = ("Totals", "compute_totals")
