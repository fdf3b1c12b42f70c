"""
Full-build detection and tier selection.
"""

from __future__ import annotations

from dataclasses import dataclass

from rigcart._types import Money, ZERO
from rigcart.cart import (
    CASE,
    MEMORY,
    MOTHERBOARD,
    POWER_SUPPLY,
    PROCESSOR,
    STORAGE,
    NormalizedCart,
)
from rigcart.build_service._catalog import (
    BUILD_SERVICE_OPTIONS,
    DEFAULT_BUILD_SERVICE,
    BuildServiceOption,
    build_service_option,
)

CORE_CATEGORIES = frozenset({PROCESSOR, MOTHERBOARD, MEMORY, STORAGE})
CHASSIS_CATEGORIES = frozenset({POWER_SUPPLY, CASE})
FULL_BUILD_MIN_QUANTITY = 5


@dataclass(frozen=True, slots=True)
class BuildServiceChoice:
    """
    What the customer picked in the build-service panel.

    ``tier_id=None`` opts out of every tier; ``assemble_myself`` hides
    the panel altogether. Either way the fee is 0.
    """
    tier_id: str | None = DEFAULT_BUILD_SERVICE
    assemble_myself: bool = False

    @classmethod
    def none(cls) -> BuildServiceChoice:
        return cls(tier_id=None)


@dataclass(frozen=True, slots=True)
class BuildServiceOffer:
    eligible: bool
    options: tuple[BuildServiceOption, ...]
    selected: BuildServiceOption | None

    @property
    def fee(self) -> Money:
        return self.selected.fee if self.selected is not None else ZERO


def is_full_build(cart: NormalizedCart) -> bool:
    """Every core and chassis category present, and at least five parts."""
    present = cart.categories
    return (
        CORE_CATEGORIES <= present
        and CHASSIS_CATEGORIES <= present
        and cart.total_quantity >= FULL_BUILD_MIN_QUANTITY
    )


def offer_build_service(cart: NormalizedCart, choice: BuildServiceChoice) -> BuildServiceOffer:
    # Validate eagerly: a bad id is a bug whether or not the cart qualifies.
    option = build_service_option(choice.tier_id) if choice.tier_id is not None else None

    if not is_full_build(cart):
        return BuildServiceOffer(eligible=False, options=(), selected=None)

    selected = None if choice.assemble_myself else option
    return BuildServiceOffer(eligible=True, options=BUILD_SERVICE_OPTIONS, selected=selected)


__all__ = (
    "CORE_CATEGORIES",
    "CHASSIS_CATEGORIES",
    "FULL_BUILD_MIN_QUANTITY",
    "BuildServiceChoice",
    "BuildServiceOffer",
    "is_full_build",
    "offer_build_service",
)
