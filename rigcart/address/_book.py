"""
Last-used address, kept for prefill on the next checkout.
"""

from __future__ import annotations

import logging

from rigcart.address._types import ShippingAddress
from rigcart.storage import ClientState

logger = logging.getLogger(__name__)


class AddressBook:
    __slots__ = ("_state",)

    def __init__(self, state: ClientState) -> None:
        self._state = state

    async def load(self) -> ShippingAddress | None:
        stored = await self._state.shipping_address()
        if stored is None:
            return None
        try:
            return ShippingAddress.from_storage(stored)
        except (TypeError, AttributeError) as exc:
            logger.warning("Ignoring unreadable saved address: %s", exc)
            return None

    async def save(self, address: ShippingAddress) -> None:
        await self._state.save_shipping_address(address.to_storage())


__all__ = ("AddressBook",)
