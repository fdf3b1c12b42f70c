"""
Payment strategies — card, wallet redirect, bank transfer.

Every strategy takes the same OrderDraft and answers submit() and
confirm(). Only the card strategy has a confirmation leg.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Protocol

from kungfu import Error, Ok, Result

from rigcart.order import Order, OrderDraft, OrderPayload, OrderStatus, WalletOrderPayload
from rigcart.payment._backend import CardConfirmer, PaymentBackend
from rigcart.payment._effects import Announce, PostSuccessEffects
from rigcart.payment._types import (
    AwaitingCardConfirmation,
    CheckoutFailure,
    Completed,
    FailureKind,
    PaymentMethod,
    PaymentStep,
    Redirected,
)

NO_CLIENT_SECRET = "No client secret returned from server"
NO_APPROVAL_URL = "PayPal approval URL not found"
NOTHING_TO_CONFIRM = "This payment method has no confirmation step"

# ═══════════════════════════════════════════════════════════════════════════════
# Protocol
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class SubmissionContext:
    """Per-submission collaborators handed to a strategy by the session."""
    idempotency_key: str
    effects: PostSuccessEffects
    announce: Announce


class PaymentStrategy(Protocol):
    method: ClassVar[PaymentMethod]

    async def submit(
        self, draft: OrderDraft, ctx: SubmissionContext,
    ) -> Result[PaymentStep, CheckoutFailure]: ...

    async def confirm(
        self, draft: OrderDraft, pending: AwaitingCardConfirmation, ctx: SubmissionContext,
    ) -> Result[PaymentStep, CheckoutFailure]: ...


def _no_confirmation() -> Result[PaymentStep, CheckoutFailure]:
    return Error(CheckoutFailure(FailureKind.INVALID_STATE, NOTHING_TO_CONFIRM))


# ═══════════════════════════════════════════════════════════════════════════════
# Card
# ═══════════════════════════════════════════════════════════════════════════════

class CardStrategy:
    """
    submit  → payment intent created, session waits for the payment element
    confirm → processor confirms; post-success effects run
    """

    method: ClassVar[PaymentMethod] = PaymentMethod.CARD

    def __init__(self, backend: PaymentBackend, confirmer: CardConfirmer) -> None:
        self._backend = backend
        self._confirmer = confirmer

    async def submit(
        self, draft: OrderDraft, ctx: SubmissionContext,
    ) -> Result[PaymentStep, CheckoutFailure]:
        match await self._backend.create_card_intent(
            OrderPayload.from_draft(draft), idempotency_key=ctx.idempotency_key,
        ):
            case Ok(intent) if intent.client_secret:
                return Ok(AwaitingCardConfirmation(intent.client_secret, intent.order_number))
            case Ok(_):
                return Error(CheckoutFailure.rejected(NO_CLIENT_SECRET))
            case Error(rejection):
                return Error(CheckoutFailure.rejected(rejection.message))

    async def confirm(
        self, draft: OrderDraft, pending: AwaitingCardConfirmation, ctx: SubmissionContext,
    ) -> Result[PaymentStep, CheckoutFailure]:
        match await self._confirmer.confirm(pending.client_secret):
            case Ok(confirmation):
                order = Order(
                    order_id=confirmation.payment_intent_id,
                    order_number=pending.order_number,
                    payment_reference=confirmation.payment_intent_id,
                    method=self.method.value,
                    status=OrderStatus.PAID,
                )
                report = await ctx.effects.run(draft, order, ctx.announce)
                return Ok(Completed(order, report))
            case Error(rejection):
                return Error(CheckoutFailure.rejected(rejection.message))


# ═══════════════════════════════════════════════════════════════════════════════
# Wallet
# ═══════════════════════════════════════════════════════════════════════════════

class WalletStrategy:
    """
    submit → wallet order created, account created (best effort), then a
    hard redirect to the approval page. The outcome is observed elsewhere.
    """

    method: ClassVar[PaymentMethod] = PaymentMethod.WALLET

    def __init__(self, backend: PaymentBackend) -> None:
        self._backend = backend

    async def submit(
        self, draft: OrderDraft, ctx: SubmissionContext,
    ) -> Result[PaymentStep, CheckoutFailure]:
        match await self._backend.create_wallet_order(
            WalletOrderPayload.from_draft(draft), idempotency_key=ctx.idempotency_key,
        ):
            case Error(rejection):
                return Error(CheckoutFailure.rejected(rejection.message))
            case Ok(wallet_order):
                url = wallet_order.approval_url

        if url is None:
            return Error(CheckoutFailure.rejected(NO_APPROVAL_URL))

        await ctx.effects.create_account(draft.account)
        await ctx.effects.navigator.go(url)
        return Ok(Redirected(url))

    async def confirm(
        self, draft: OrderDraft, pending: AwaitingCardConfirmation, ctx: SubmissionContext,
    ) -> Result[PaymentStep, CheckoutFailure]:
        return _no_confirmation()


# ═══════════════════════════════════════════════════════════════════════════════
# Bank Transfer
# ═══════════════════════════════════════════════════════════════════════════════

class BankTransferStrategy:
    """
    submit → order recorded as pending verification; effects run at once.
    """

    method: ClassVar[PaymentMethod] = PaymentMethod.BANK_TRANSFER

    def __init__(self, backend: PaymentBackend) -> None:
        self._backend = backend

    async def submit(
        self, draft: OrderDraft, ctx: SubmissionContext,
    ) -> Result[PaymentStep, CheckoutFailure]:
        match await self._backend.create_bank_transfer(
            OrderPayload.from_draft(draft), idempotency_key=ctx.idempotency_key,
        ):
            case Error(rejection):
                return Error(CheckoutFailure.rejected(rejection.message))
            case Ok(bank_order):
                order = Order(
                    order_id=bank_order.order_id,
                    order_number=bank_order.order_number,
                    payment_reference=bank_order.order_id,
                    method=self.method.value,
                    status=OrderStatus.PENDING_VERIFICATION,
                )

        report = await ctx.effects.run(draft, order, ctx.announce)
        return Ok(Completed(order, report))

    async def confirm(
        self, draft: OrderDraft, pending: AwaitingCardConfirmation, ctx: SubmissionContext,
    ) -> Result[PaymentStep, CheckoutFailure]:
        return _no_confirmation()


# ═══════════════════════════════════════════════════════════════════════════════
# Strategy Table
# ═══════════════════════════════════════════════════════════════════════════════

type StrategyTable = Mapping[PaymentMethod, PaymentStrategy]


@dataclass(frozen=True, slots=True)
class StrategiesBuilder:
    """
    Immutable builder; each .on() returns a new builder.

        table = (
            strategies()
            .on(CardStrategy(backend, confirmer))
            .on(WalletStrategy(backend))
            .on(BankTransferStrategy(backend))
            .build()
        )
    """
    _entries: tuple[tuple[PaymentMethod, PaymentStrategy], ...] = ()

    def on(self, strategy: PaymentStrategy) -> StrategiesBuilder:
        """Register ``strategy`` for its method, replacing any earlier one."""
        kept = tuple((m, s) for m, s in self._entries if m is not strategy.method)
        return StrategiesBuilder((*kept, (strategy.method, strategy)))

    def build(self) -> StrategyTable:
        table = dict(self._entries)
        missing = [m.name for m in PaymentMethod if m not in table]
        if missing:
            raise ValueError(f"No strategy registered for: {', '.join(missing)}")
        return MappingProxyType(table)


def strategies() -> StrategiesBuilder:
    return StrategiesBuilder()


def default_strategies(backend: PaymentBackend, confirmer: CardConfirmer) -> StrategyTable:
    """All three strategies over one backend."""
    return (
        strategies()
        .on(CardStrategy(backend, confirmer))
        .on(WalletStrategy(backend))
        .on(BankTransferStrategy(backend))
        .build()
    )


__all__ = (
    "NO_CLIENT_SECRET",
    "NO_APPROVAL_URL",
    "NOTHING_TO_CONFIRM",
    "SubmissionContext",
    "PaymentStrategy",
    "CardStrategy",
    "WalletStrategy",
    "BankTransferStrategy",
    "StrategyTable",
    "StrategiesBuilder",
    "strategies",
    "default_strategies",
)
