"""
Cart types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rigcart._types import Money, ZERO

# ═══════════════════════════════════════════════════════════════════════════════
# Categories
# ═══════════════════════════════════════════════════════════════════════════════

PROCESSOR = "cpu"
MOTHERBOARD = "motherboard"
MEMORY = "ram"
STORAGE = "storage"
POWER_SUPPLY = "psu"
CASE = "case"
BUILD_SERVICE = "build-service"

_CATEGORY_ALIASES: Mapping[str, str] = {
    "processor": PROCESSOR,
    "memory": MEMORY,
    "power-supply": POWER_SUPPLY,
    "power_supply": POWER_SUPPLY,
}


def canonical_category(tag: str) -> str:
    tag = tag.strip().lower()
    return _CATEGORY_ALIASES.get(tag, tag)


# ═══════════════════════════════════════════════════════════════════════════════
# Line Items
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class CartLineItem:
    """A priced product in the cart. price >= 0, quantity >= 1."""
    id: str
    name: str
    category: str
    price: Money
    quantity: int
    image: str | None = None

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity

    def to_storage(self) -> dict[str, Any]:
        """Shape the storefront keeps under the cart key."""
        stored: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": float(self.price),
            "quantity": self.quantity,
        }
        if self.image is not None:
            stored["image"] = self.image
        return stored


@dataclass(frozen=True, slots=True)
class RejectedLineItem:
    raw: object
    reason: str


type RawLineItem = Mapping[str, Any] | CartLineItem


# ═══════════════════════════════════════════════════════════════════════════════
# NormalizedCart
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class NormalizedCart:
    """
    Valid items plus what was dropped on the way in.

    Only ``items`` contribute to the subtotal.
    """
    items: tuple[CartLineItem, ...]
    rejected: tuple[RejectedLineItem, ...] = ()

    @property
    def subtotal(self) -> Money:
        return sum((item.line_total for item in self.items), ZERO)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def categories(self) -> frozenset[str]:
        return frozenset(item.category for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items
