"""
Storage — injected key-value persistence for client-side checkout state.

    from rigcart import storage

    state = storage.ClientState(storage.MemoryKeyValueStore())
    await state.clear_cart()
"""

from rigcart.storage._store import (
    KeyValueStore,
    MemoryKeyValueStore,
)
from rigcart.storage._sqlalchemy import (
    ClientStateTable,
    SQLAlchemyKeyValueStore,
    create_state_store,
)
from rigcart.storage._client_state import (
    StorageKey,
    OrderRefs,
    ClientState,
)

__all__ = (
    # Protocol
    "KeyValueStore",
    # Implementations
    "MemoryKeyValueStore",
    "ClientStateTable",
    "SQLAlchemyKeyValueStore",
    "create_state_store",
    # Named state
    "StorageKey",
    "OrderRefs",
    "ClientState",
)
