"""
Cart normalization.

Coerces raw storage payloads into CartLineItem. Anything that could put
a negative or non-finite amount into a total is excluded and logged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import asdict
from typing import Any

from kungfu import Error, Ok, Result

from rigcart._types import Money, as_decimal, to_money
from rigcart.cart._types import (
    CartLineItem,
    NormalizedCart,
    RawLineItem,
    RejectedLineItem,
    canonical_category,
)

logger = logging.getLogger(__name__)


def normalize_cart(raw_items: Iterable[RawLineItem]) -> NormalizedCart:
    """
    Split a raw cart into valid items and rejected ones.

    Pure and idempotent: normalizing ``result.items`` again gives the
    same items and subtotal.
    """
    items: list[CartLineItem] = []
    rejected: list[RejectedLineItem] = []

    for raw in raw_items:
        match parse_line_item(raw):
            case Ok(item):
                items.append(item)
            case Error(reason):
                logger.warning("Excluding invalid cart item from totals: %s (%r)", reason, raw)
                rejected.append(RejectedLineItem(raw=raw, reason=reason))

    return NormalizedCart(items=tuple(items), rejected=tuple(rejected))


def parse_line_item(raw: object) -> Result[CartLineItem, str]:
    match raw:
        case CartLineItem():
            fields: Mapping[str, Any] = asdict(raw)
        case Mapping():
            fields = raw
        case _:
            return Error(f"expected a mapping, got {type(raw).__name__}")

    item_id = _text(fields.get("id"))
    if item_id is None:
        return Error("missing id")
    name = _text(fields.get("name"))
    if name is None:
        return Error("missing name")
    category = _text(fields.get("category"))
    if category is None:
        return Error("missing category")

    price = _price(fields.get("price"))
    if price is None:
        return Error(f"price must be a finite number >= 0, got {fields.get('price')!r}")
    quantity = _quantity(fields.get("quantity"))
    if quantity is None:
        return Error(f"quantity must be an integer >= 1, got {fields.get('quantity')!r}")

    image = fields.get("image")
    return Ok(CartLineItem(
        id=item_id,
        name=name,
        category=canonical_category(category),
        price=price,
        quantity=quantity,
        image=image if isinstance(image, str) and image else None,
    ))


def _text(value: object) -> str | None:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return None
    text = str(value).strip()
    return text or None


def _price(value: object) -> Money | None:
    number = as_decimal(value)
    if number is None or number < 0:
        return None
    return to_money(number)


def _quantity(value: object) -> int | None:
    number = as_decimal(value)
    if number is None or number != number.to_integral_value():
        return None
    quantity = int(number)
    return quantity if quantity >= 1 else None


__all__ = ("normalize_cart", "parse_line_item")
