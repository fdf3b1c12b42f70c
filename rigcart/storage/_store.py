"""
Key-value store — the checkout's only view of client-side persistence.

Values are JSON-shaped (dicts, lists, strings, numbers).
"""

from __future__ import annotations

import asyncio
import copy
from collections.abc import Mapping
from typing import Any, Protocol


# ═══════════════════════════════════════════════════════════════════════════════
# Store Protocol
# ═══════════════════════════════════════════════════════════════════════════════

class KeyValueStore(Protocol):
    """
    Injected persistence capability.

    Example — browser-backed store behind an RPC bridge:

        class BridgeStore:
            async def get(self, key: str) -> Any | None:
                return await bridge.call("localStorage.getItem", key)
            ...
    """

    async def get(self, key: str) -> Any | None:
        """Stored value, or None when the key is absent."""
        ...

    async def set(self, key: str, value: Any) -> None:
        ...

    async def clear(self, key: str) -> None:
        """Remove ``key``. Clearing an absent key is not an error."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Store
# ═══════════════════════════════════════════════════════════════════════════════

class MemoryKeyValueStore:
    """
    In-memory store.

    Note: values are deep-copied on the way in and out, so callers never
    share mutable state with the store.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = copy.deepcopy(dict(initial or {}))
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Any | None:
        async with self._lock:
            return copy.deepcopy(self._values.get(key))

    async def set(self, key: str, value: Any) -> None:
        async with self._lock:
            self._values[key] = copy.deepcopy(value)

    async def clear(self, key: str) -> None:
        async with self._lock:
            self._values.pop(key, None)

    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(self._values)


__all__ = ("KeyValueStore", "MemoryKeyValueStore")
