"""Tests for post-success effects."""

from dataclasses import replace

import pytest

from rigcart.config import Settings
from rigcart.order import AccountRequest, Order, OrderStatus
from rigcart.payment import (
    EffectStep,
    PostSuccessEffects,
    best_effort,
    run_effects,
)
from rigcart.storage import ClientState, StorageKey

from tests.fakes import FailingStore, FakeAccounts

BANK_ORDER = Order("bank_42", "VX-1002", "bank_42", "bank_transfer", OrderStatus.PENDING_VERIFICATION)
CARD_ORDER = Order("pi_123", "VX-1001", "pi_123", "stripe", OrderStatus.PAID)


@pytest.fixture
def announced():
    return []


@pytest.fixture
def announce(announced):
    async def record(order):
        announced.append(order)
    return record


class TestRunEffects:
    async def test_failure_does_not_skip_later_steps(self, caplog):
        ran = []

        async def boom():
            raise RuntimeError("boom")

        async def after():
            ran.append("after")

        report = await run_effects([
            EffectStep("boom", boom),
            EffectStep("after", after),
        ])
        assert ran == ["after"]
        assert report.completed == ("after",)
        assert [o.name for o in report.surfaced] == ["boom"]
        assert report.surfaced[0].error == "boom"
        assert "Post-success step boom failed" in caplog.text

    async def test_best_effort_failure_is_not_surfaced(self):
        async def boom():
            raise RuntimeError("nope")

        report = await run_effects([EffectStep("optional", boom, best_effort())])
        assert report.surfaced == ()
        assert not report.outcomes[0].ok


class TestPostSuccessEffects:
    async def test_bank_order_effects(self, effects, draft, store, navigator, announce, announced):
        report = await effects.run(draft, BANK_ORDER, announce)

        assert report.completed == ("clear_cart", "persist_order_refs", "announce_success")
        assert await store.get(StorageKey.CART) is None
        assert await store.get(StorageKey.BANK_ORDER_ID) == "bank_42"
        assert await store.get(StorageKey.LATEST_ORDER_NUMBER) == "VX-1002"
        assert announced == [BANK_ORDER]
        assert navigator.locations == ["/order-success?bank=bank_42&order=VX-1002"]

    async def test_card_order_effects(self, effects, draft, state, navigator, announce):
        await effects.run(draft, CARD_ORDER, announce)

        refs = await state.latest_order()
        assert refs.payment_intent == "pi_123"
        assert refs.order_number == "VX-1001"
        assert refs.bank_order_id is None
        assert navigator.locations == ["/order-success?pi=pi_123&order=VX-1001"]

    async def test_account_created_first(self, effects, draft, address, accounts, announce):
        draft = replace(draft, account=AccountRequest.for_address(address))
        report = await effects.run(draft, BANK_ORDER, announce)

        assert report.completed[0] == "create_account"
        assert accounts.registered == [("Sam Carter", "sam@example.co.uk", "hunter22")]

    async def test_account_failure_still_clears_cart(self, state, navigator, draft, address, store, announce):
        effects = PostSuccessEffects(state, FakeAccounts(error=RuntimeError("email taken")), navigator)
        draft = replace(draft, account=AccountRequest.for_address(address))

        report = await effects.run(draft, BANK_ORDER, announce)

        assert report.surfaced == ()
        assert report.completed == ("clear_cart", "persist_order_refs", "announce_success")
        assert await store.get(StorageKey.CART) is None

    async def test_account_skipped_without_password(self, effects, draft, address, accounts, announce):
        draft = replace(draft, account=AccountRequest.for_address(replace(address, password="")))
        await effects.run(draft, BANK_ORDER, announce)
        assert accounts.registered == []

    async def test_cart_clear_failure_is_surfaced(self, full_build_cart, accounts, navigator, draft, announce):
        store = FailingStore({StorageKey.CART: full_build_cart})
        effects = PostSuccessEffects(ClientState(store), accounts, navigator)

        report = await effects.run(draft, BANK_ORDER, announce)

        assert [o.name for o in report.surfaced] == ["clear_cart"]
        assert await store.get(StorageKey.BANK_ORDER_ID) == "bank_42"
        assert navigator.locations

    async def test_custom_success_path(self, state, accounts, navigator):
        effects = PostSuccessEffects(state, accounts, navigator, success_path="/thanks")
        assert effects.success_location(CARD_ORDER) == "/thanks?pi=pi_123&order=VX-1001"

    async def test_success_path_from_settings(self, state, accounts, navigator):
        effects = PostSuccessEffects(state, accounts, navigator, settings=Settings(success_path="/thanks"))
        assert effects.success_location(BANK_ORDER) == "/thanks?bank=bank_42&order=VX-1002"
