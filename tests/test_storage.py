"""Tests for key-value stores and named client state."""

import pytest

from rigcart.storage import ClientState, MemoryKeyValueStore, OrderRefs, StorageKey, create_state_store

from tests.fakes import line


@pytest.fixture(params=["memory", "sql"])
async def any_store(request, tmp_path):
    if request.param == "memory":
        yield MemoryKeyValueStore()
        return
    store, engine = await create_state_store(f"sqlite+aiosqlite:///{tmp_path / 'state.db'}")
    yield store
    await engine.dispose()


class TestKeyValueStore:
    async def test_missing_key(self, any_store):
        assert await any_store.get("nothing") is None

    async def test_set_get_overwrite(self, any_store):
        await any_store.set("k", {"a": [1, 2.5, "x"]})
        assert await any_store.get("k") == {"a": [1, 2.5, "x"]}

        await any_store.set("k", "replaced")
        assert await any_store.get("k") == "replaced"

    async def test_clear(self, any_store):
        await any_store.set("k", 1)
        await any_store.clear("k")
        assert await any_store.get("k") is None

    async def test_clearing_absent_key_is_fine(self, any_store):
        await any_store.clear("never-set")

    async def test_memory_store_copies_values(self):
        store = MemoryKeyValueStore()
        value = {"items": [1]}
        await store.set("k", value)
        value["items"].append(2)
        assert await store.get("k") == {"items": [1]}
        assert store.snapshot() == {"k": {"items": [1]}}


class TestClientState:
    async def test_cart_roundtrip(self, any_store):
        state = ClientState(any_store)
        await state.save_cart([line("ryzen-7", "cpu", 300)])
        assert (await state.cart())[0]["id"] == "ryzen-7"

        await state.clear_cart()
        assert await state.cart() == []

    async def test_non_list_cart_reads_as_empty(self):
        state = ClientState(MemoryKeyValueStore({StorageKey.CART: "corrupt"}))
        assert await state.cart() == []

    async def test_card_order_refs(self, any_store):
        state = ClientState(any_store)
        await state.record_card_payment("pi_9", "VX-9")
        assert await state.latest_order() == OrderRefs("VX-9", payment_intent="pi_9")

    async def test_bank_order_refs(self, any_store):
        state = ClientState(any_store)
        await state.record_bank_order("bank_9", "VX-10")
        assert await state.latest_order() == OrderRefs("VX-10", bank_order_id="bank_9")
        assert await any_store.get(StorageKey.BANK_ORDER_ID) == "bank_9"

    async def test_no_order_yet(self):
        assert await ClientState(MemoryKeyValueStore()).latest_order() is None
