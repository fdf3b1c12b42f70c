"""
Boundaries the payment stage talks to.

All are Protocols; the httpx adapters live in rigcart.gateway and tests
use in-memory fakes.
"""

from __future__ import annotations

from typing import Protocol

from kungfu import Result

from rigcart.order import OrderPayload, WalletOrderPayload
from rigcart.payment._types import (
    BackendRejection,
    BankTransferOrder,
    CardConfirmation,
    CardIntent,
    WalletOrder,
)


class PaymentBackend(Protocol):
    """
    Order-creating endpoints.

    ``idempotency_key`` is stable across retries of the same draft in the
    same session; backends that honour it never create a second order.
    """

    async def create_card_intent(
        self, payload: OrderPayload, *, idempotency_key: str,
    ) -> Result[CardIntent, BackendRejection]: ...

    async def create_wallet_order(
        self, payload: WalletOrderPayload, *, idempotency_key: str,
    ) -> Result[WalletOrder, BackendRejection]: ...

    async def create_bank_transfer(
        self, payload: OrderPayload, *, idempotency_key: str,
    ) -> Result[BankTransferOrder, BackendRejection]: ...


class CardConfirmer(Protocol):
    """The processor's payment element, confirming out-of-band."""

    async def confirm(self, client_secret: str) -> Result[CardConfirmation, BackendRejection]: ...


class AccountService(Protocol):
    async def register(self, display_name: str, email: str, password: str) -> None: ...


class Navigator(Protocol):
    async def go(self, location: str) -> None: ...


__all__ = ("PaymentBackend", "CardConfirmer", "AccountService", "Navigator")
