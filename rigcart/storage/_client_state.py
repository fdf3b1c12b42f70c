"""
Named client-side state on top of a KeyValueStore.

Key names match what the storefront already keeps in browser storage.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rigcart.storage._store import KeyValueStore


class StorageKey:
    CART = "vortex_cart"
    SHIPPING_ADDRESS = "vortex_shipping_address"
    LATEST_PAYMENT_INTENT = "latest_payment_intent"
    LATEST_ORDER_NUMBER = "latest_order_number"
    BANK_ORDER_ID = "bank_order_id"


@dataclass(frozen=True, slots=True)
class OrderRefs:
    """What the success page reads back."""
    order_number: str
    payment_intent: str | None = None
    bank_order_id: str | None = None


class ClientState:
    __slots__ = ("_store",)

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    # ───────────────────────────────────────────────────────────────────────────
    # Cart
    # ───────────────────────────────────────────────────────────────────────────

    async def cart(self) -> list[Any]:
        stored = await self._store.get(StorageKey.CART)
        return list(stored) if isinstance(stored, list) else []

    async def save_cart(self, items: list[Mapping[str, Any]]) -> None:
        await self._store.set(StorageKey.CART, [dict(item) for item in items])

    async def clear_cart(self) -> None:
        await self._store.clear(StorageKey.CART)

    # ───────────────────────────────────────────────────────────────────────────
    # Address
    # ───────────────────────────────────────────────────────────────────────────

    async def shipping_address(self) -> Mapping[str, Any] | None:
        stored = await self._store.get(StorageKey.SHIPPING_ADDRESS)
        return stored if isinstance(stored, Mapping) else None

    async def save_shipping_address(self, address: Mapping[str, Any]) -> None:
        await self._store.set(StorageKey.SHIPPING_ADDRESS, dict(address))

    # ───────────────────────────────────────────────────────────────────────────
    # Order references
    # ───────────────────────────────────────────────────────────────────────────

    async def record_card_payment(self, payment_intent: str, order_number: str) -> None:
        await self._store.set(StorageKey.LATEST_PAYMENT_INTENT, payment_intent)
        await self._store.set(StorageKey.LATEST_ORDER_NUMBER, order_number)

    async def record_bank_order(self, order_id: str, order_number: str) -> None:
        await self._store.set(StorageKey.BANK_ORDER_ID, order_id)
        await self._store.set(StorageKey.LATEST_ORDER_NUMBER, order_number)

    async def latest_order(self) -> OrderRefs | None:
        order_number = await self._store.get(StorageKey.LATEST_ORDER_NUMBER)
        if not isinstance(order_number, str):
            return None
        payment_intent = await self._store.get(StorageKey.LATEST_PAYMENT_INTENT)
        bank_order_id = await self._store.get(StorageKey.BANK_ORDER_ID)
        return OrderRefs(
            order_number=order_number,
            payment_intent=payment_intent if isinstance(payment_intent, str) else None,
            bank_order_id=bank_order_id if isinstance(bank_order_id, str) else None,
        )


__all__ = ("StorageKey", "OrderRefs", "ClientState")
