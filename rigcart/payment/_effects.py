"""
Post-success effects.

Run in a fixed order once a payment is confirmed. Each step is attempted
regardless of earlier failures; nothing is rolled back. A step's policy
decides only how its failure is reported.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from urllib.parse import urlencode

from combinators import lift as L
from kungfu import Error, Ok

from rigcart.config import Settings, get_settings
from rigcart.order import AccountRequest, Order, OrderDraft
from rigcart.payment._backend import AccountService, Navigator
from rigcart.payment._types import EffectOutcome, EffectReport, PaymentMethod
from rigcart.storage import ClientState

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Policies
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class BestEffortPolicy:
    """Failure is logged as a warning and never reaches the customer."""
    pass

def best_effort() -> BestEffortPolicy:
    return BestEffortPolicy()


@dataclass(frozen=True, slots=True)
class MustSucceedPolicy:
    """Failure is logged as an error and listed in EffectReport.surfaced."""
    pass

def must_succeed() -> MustSucceedPolicy:
    return MustSucceedPolicy()


type EffectPolicy = BestEffortPolicy | MustSucceedPolicy

# ═══════════════════════════════════════════════════════════════════════════════
# Steps
# ═══════════════════════════════════════════════════════════════════════════════

type Effect = Callable[[], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class EffectStep:
    name: str
    action: Effect
    policy: EffectPolicy = MustSucceedPolicy()


async def run_effect(step: EffectStep) -> EffectOutcome:
    best = isinstance(step.policy, BestEffortPolicy)
    outcome = await L.catching_async(step.action, on_error=lambda exc: exc)

    match outcome:
        case Ok(_):
            return EffectOutcome(step.name, ok=True, best_effort=best)
        case Error(exc):
            if best:
                logger.warning("Best-effort step %s failed: %s", step.name, exc)
            else:
                logger.error("Post-success step %s failed", step.name, exc_info=exc)
            return EffectOutcome(step.name, ok=False, best_effort=best, error=str(exc))


async def run_effects(steps: Sequence[EffectStep]) -> EffectReport:
    """Run every step in order. A failure never skips the steps after it."""
    outcomes = [await run_effect(step) for step in steps]
    return EffectReport(tuple(outcomes))


# ═══════════════════════════════════════════════════════════════════════════════
# PostSuccessEffects
# ═══════════════════════════════════════════════════════════════════════════════

type Announce = Callable[[Order], Awaitable[None]]


class PostSuccessEffects:
    """
    The four things that happen after a confirmed payment, in order:

    1. create_account      best effort, only if opted in with a password
    2. clear_cart
    3. persist_order_refs  for the success page
    4. announce_success    terminal state, then navigate to the success page
    """

    __slots__ = ("_state", "_accounts", "_navigator", "_success_path")

    def __init__(
        self,
        state: ClientState,
        accounts: AccountService,
        navigator: Navigator,
        *,
        success_path: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._state = state
        self._accounts = accounts
        self._navigator = navigator
        self._success_path = success_path or (settings or get_settings()).success_path

    @property
    def navigator(self) -> Navigator:
        return self._navigator

    def account_step(self, account: AccountRequest) -> EffectStep | None:
        if not (account.create and account.password):
            return None
        return EffectStep(
            "create_account",
            lambda: self._accounts.register(account.display_name, account.email, account.password),
            best_effort(),
        )

    async def create_account(self, account: AccountRequest) -> EffectOutcome | None:
        """Account creation on its own, for flows that leave before success."""
        step = self.account_step(account)
        return await run_effect(step) if step is not None else None

    def success_location(self, order: Order) -> str:
        if order.method == PaymentMethod.BANK_TRANSFER.value:
            query = {"bank": order.payment_reference, "order": order.order_number}
        else:
            query = {"pi": order.payment_reference, "order": order.order_number}
        return f"{self._success_path}?{urlencode(query)}"

    async def run(self, draft: OrderDraft, order: Order, announce: Announce) -> EffectReport:
        steps: list[EffectStep] = []
        if (account := self.account_step(draft.account)) is not None:
            steps.append(account)
        steps.append(EffectStep("clear_cart", self._state.clear_cart))
        steps.append(EffectStep("persist_order_refs", lambda: self._persist(order)))
        steps.append(EffectStep("announce_success", lambda: self._announce(order, announce)))

        report = await run_effects(steps)
        logger.info(
            "Order %s completed via %s (effects ok: %s)",
            order.order_number, order.method, ", ".join(report.completed) or "none",
        )
        return report

    async def _persist(self, order: Order) -> None:
        if order.method == PaymentMethod.BANK_TRANSFER.value:
            await self._state.record_bank_order(order.payment_reference, order.order_number)
        else:
            await self._state.record_card_payment(order.payment_reference, order.order_number)

    async def _announce(self, order: Order, announce: Announce) -> None:
        await announce(order)
        await self._navigator.go(self.success_location(order))


__all__ = (
    "BestEffortPolicy",
    "best_effort",
    "MustSucceedPolicy",
    "must_succeed",
    "EffectPolicy",
    "Effect",
    "EffectStep",
    "run_effect",
    "run_effects",
    "Announce",
    "PostSuccessEffects",
)
