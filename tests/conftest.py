"""Pytest fixtures for rigcart tests."""

import asyncio

import pytest

from rigcart.address import ShippingAddress
from rigcart.order import CustomerDetails, assemble_order
from rigcart.payment import CheckoutSession, PostSuccessEffects, SubmissionGuard, default_strategies
from rigcart.pricing import CheckoutInput
from rigcart.storage import ClientState, MemoryKeyValueStore, StorageKey

from tests.fakes import (
    FakeAccounts,
    FakeConfirmer,
    FakeNavigator,
    FakePaymentBackend,
    line,
)


# --- Carts ---


@pytest.fixture
def full_build_cart():
    """Six parts, one per required category, £750 of components."""
    return [
        line("ryzen-7", "cpu", 300),
        line("b650-board", "motherboard", 150),
        line("ddr5-32", "ram", 80),
        line("nvme-2tb", "storage", 90),
        line("psu-850", "psu", 70),
        line("mid-tower", "case", 60),
    ]


@pytest.fixture
def gpu_only_cart():
    return [line("rtx-4080", "gpu", 500)]


@pytest.fixture
def address():
    return ShippingAddress(
        full_name="Sam Carter",
        email="sam@example.co.uk",
        phone="+44 7700 900123",
        line1="12 High Street",
        city="Leeds",
        postcode="LS1 4AP",
        password="hunter22",
    )


@pytest.fixture
def checkout(full_build_cart):
    return CheckoutInput(cart=tuple(full_build_cart))


@pytest.fixture
async def draft(checkout, address):
    return (await assemble_order(checkout, CustomerDetails(address))).unwrap()


# --- Wiring ---


@pytest.fixture
def store(full_build_cart):
    return MemoryKeyValueStore({StorageKey.CART: full_build_cart})


@pytest.fixture
def state(store):
    return ClientState(store)


@pytest.fixture
def backend():
    return FakePaymentBackend()


@pytest.fixture
def confirmer():
    return FakeConfirmer()


@pytest.fixture
def accounts():
    return FakeAccounts()


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def effects(state, accounts, navigator):
    return PostSuccessEffects(state, accounts, navigator)


@pytest.fixture
def guard():
    return SubmissionGuard()


@pytest.fixture
def session(backend, confirmer, effects, guard):
    return CheckoutSession(
        strategies=default_strategies(backend, confirmer),
        effects=effects,
        guard=guard,
        session_id="sess-1",
    )


@pytest.fixture
def gate():
    return asyncio.Event()
