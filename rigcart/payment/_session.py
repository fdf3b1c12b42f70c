"""
Checkout session — one customer's path from "Place order" to a result.

    READY ──submit──► PROCESSING ──► AWAITING_CARD_CONFIRMATION ──confirm──► SUCCEEDED
                          │      ──► REDIRECTING  (wallet)
                          │      ──► SUCCEEDED    (bank transfer)
                          └─ failure ─► READY (error set, nothing committed)
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Awaitable, Callable

from combinators import lift as L
from kungfu import Error, Ok, Result

from rigcart.address import AddressBook
from rigcart.order import CustomerDetails, Order, OrderDraft, assemble_order, fingerprint
from rigcart.payment._effects import PostSuccessEffects
from rigcart.payment._guard import ALREADY_PROCESSING, SubmissionConflict, SubmissionGuard
from rigcart.payment._strategies import StrategyTable, SubmissionContext
from rigcart.payment._types import (
    AwaitingCardConfirmation,
    CheckoutFailure,
    Completed,
    FailureKind,
    PaymentMethod,
    PaymentStep,
    Redirected,
    SessionState,
)
from rigcart.pricing import CheckoutInput

logger = logging.getLogger(__name__)

NO_PENDING_CARD = "No card payment is awaiting confirmation"


class CheckoutSession:
    """
    Drives the payment strategies and owns the session state.

    Example:
        session = CheckoutSession(
            strategies=default_strategies(backend, confirmer),
            effects=PostSuccessEffects(state, accounts, navigator),
        )
        match await session.checkout(checkout, details, PaymentMethod.BANK_TRANSFER):
            case Ok(Completed(order=order)): ...
            case Error(failure): show(failure.message)
    """

    def __init__(
        self,
        *,
        strategies: StrategyTable,
        effects: PostSuccessEffects,
        guard: SubmissionGuard | None = None,
        address_book: AddressBook | None = None,
        session_id: str | None = None,
    ) -> None:
        missing = [m.name for m in PaymentMethod if m not in strategies]
        if missing:
            raise ValueError(f"No strategy registered for: {', '.join(missing)}")
        self._strategies = strategies
        self._effects = effects
        self._guard = guard if guard is not None else SubmissionGuard()
        self._address_book = address_book
        self._session_id = session_id or uuid.uuid4().hex

        self._state = SessionState.READY
        self._error: str | None = None
        self._order: Order | None = None
        self._pending: tuple[OrderDraft, AwaitingCardConfirmation, str] | None = None

    # ───────────────────────────────────────────────────────────────────────────
    # State
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def order(self) -> Order | None:
        return self._order

    @property
    def pending_card(self) -> AwaitingCardConfirmation | None:
        return self._pending[1] if self._pending is not None else None

    @property
    def can_submit(self) -> bool:
        return self._state is SessionState.READY

    def idempotency_key(self, draft: OrderDraft, method: PaymentMethod) -> str:
        return f"{self._session_id}:{fingerprint(draft)[:16]}:{method.value}"

    # ───────────────────────────────────────────────────────────────────────────
    # Operations
    # ───────────────────────────────────────────────────────────────────────────

    async def checkout(
        self,
        checkout: CheckoutInput,
        details: CustomerDetails,
        method: PaymentMethod,
    ) -> Result[PaymentStep, CheckoutFailure]:
        """Validate and assemble the order, remember the address, then submit."""
        if (blocked := self._blocked()) is not None:
            return Error(blocked)

        match await assemble_order(checkout, details):
            case Error(err):
                self._error = err.message
                return Error(CheckoutFailure(FailureKind.VALIDATION, err.message, err.field_errors))
            case Ok(draft):
                pass

        if self._address_book is not None:
            try:
                await self._address_book.save(draft.shipping_address)
            except Exception:
                logger.warning("Could not save shipping address for prefill", exc_info=True)

        return await self.submit(draft, method)

    async def submit(
        self,
        draft: OrderDraft,
        method: PaymentMethod,
    ) -> Result[PaymentStep, CheckoutFailure]:
        if (blocked := self._blocked()) is not None:
            return Error(blocked)

        strategy = self._strategies[method]
        key = self.idempotency_key(draft, method)
        ctx = self._context(key)

        self._state = SessionState.PROCESSING
        self._error = None
        logger.debug("Submitting %s order (key %s)", method.value, key)

        result = await self._guard.run(key, lambda: self._attempt(lambda: strategy.submit(draft, ctx)))

        match result:
            case Ok(AwaitingCardConfirmation() as step):
                self._pending = (draft, step, key)
                self._state = SessionState.AWAITING_CARD_CONFIRMATION
            case Ok(Redirected()):
                self._state = SessionState.REDIRECTING
            case Ok(Completed(order=order)):
                self._order = order
                self._state = SessionState.SUCCEEDED
            case Error(SubmissionConflict(message=message)):
                return Error(self._fail(CheckoutFailure(FailureKind.IN_FLIGHT, message)))
            case Error(failure):
                return Error(self._fail(failure))

        return result

    async def confirm_card(self) -> Result[PaymentStep, CheckoutFailure]:
        """Finish a card payment once the payment element has been filled in."""
        if self._state is not SessionState.AWAITING_CARD_CONFIRMATION or self._pending is None:
            return Error(CheckoutFailure(FailureKind.INVALID_STATE, NO_PENDING_CARD))

        draft, pending, key = self._pending
        strategy = self._strategies[PaymentMethod.CARD]
        ctx = self._context(key)
        self._state = SessionState.PROCESSING

        result = await self._attempt(lambda: strategy.confirm(draft, pending, ctx))
        self._pending = None

        match result:
            case Ok(Completed(order=order)):
                self._order = order
                self._state = SessionState.SUCCEEDED
            case Ok(_):
                self._state = SessionState.READY
            case Error(failure):
                return Error(self._fail(failure))

        return result

    def cancel_card(self) -> None:
        """Back to method selection without confirming."""
        if self._state is SessionState.AWAITING_CARD_CONFIRMATION:
            self._pending = None
            self._state = SessionState.READY

    # ───────────────────────────────────────────────────────────────────────────
    # Internals
    # ───────────────────────────────────────────────────────────────────────────

    def _blocked(self) -> CheckoutFailure | None:
        match self._state:
            case SessionState.READY:
                return None
            case SessionState.PROCESSING:
                return CheckoutFailure(FailureKind.IN_FLIGHT, ALREADY_PROCESSING)
            case state:
                return CheckoutFailure(
                    FailureKind.INVALID_STATE,
                    f"Cannot submit while {state.value.replace('_', ' ')}",
                )

    def _context(self, key: str) -> SubmissionContext:
        return SubmissionContext(idempotency_key=key, effects=self._effects, announce=self._announce)

    async def _attempt(
        self,
        call: Callable[[], Awaitable[Result[PaymentStep, CheckoutFailure]]],
    ) -> Result[PaymentStep, CheckoutFailure]:
        """Thrown errors become the generic failure; the session stays consistent."""
        return await L.catching_async(call, on_error=_unexpected).then(L.from_result)

    async def _announce(self, order: Order) -> None:
        self._order = order
        self._state = SessionState.SUCCEEDED

    def _fail(self, failure: CheckoutFailure) -> CheckoutFailure:
        logger.info("Checkout %s failed (%s): %s", self._session_id, failure.kind.value, failure.message)
        self._state = SessionState.READY
        self._error = failure.message
        return failure


def _unexpected(exc: Exception) -> CheckoutFailure:
    logger.exception("Unexpected error during checkout submission", exc_info=exc)
    return CheckoutFailure.unexpected()


__all__ = ("NO_PENDING_CARD", "CheckoutSession")
