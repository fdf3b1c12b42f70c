"""
Payment — strategy dispatch over card, wallet redirect and bank transfer.

    from rigcart import payment as PM

    session = PM.CheckoutSession(
        strategies=PM.default_strategies(backend, confirmer),
        effects=PM.PostSuccessEffects(state, accounts, navigator),
    )
    await session.checkout(checkout, details, PM.PaymentMethod.CARD)
    await session.confirm_card()
"""

from rigcart.payment._types import (
    GENERIC_FAILURE,
    PaymentMethod,
    SessionState,
    FailureKind,
    CheckoutFailure,
    BackendRejection,
    CardIntent,
    CardConfirmation,
    WalletLink,
    WalletOrder,
    BankTransferOrder,
    AwaitingCardConfirmation,
    Redirected,
    EffectOutcome,
    EffectReport,
    Completed,
    PaymentStep,
)
from rigcart.payment._backend import (
    PaymentBackend,
    CardConfirmer,
    AccountService,
    Navigator,
)
from rigcart.payment._effects import (
    BestEffortPolicy,
    best_effort,
    MustSucceedPolicy,
    must_succeed,
    EffectPolicy,
    Effect,
    EffectStep,
    run_effect,
    run_effects,
    Announce,
    PostSuccessEffects,
)
from rigcart.payment._guard import (
    ALREADY_PROCESSING,
    SubmissionState,
    SubmissionConflict,
    SubmissionGuard,
)
from rigcart.payment._strategies import (
    NO_CLIENT_SECRET,
    NO_APPROVAL_URL,
    NOTHING_TO_CONFIRM,
    SubmissionContext,
    PaymentStrategy,
    CardStrategy,
    WalletStrategy,
    BankTransferStrategy,
    StrategyTable,
    StrategiesBuilder,
    strategies,
    default_strategies,
)
from rigcart.payment._session import (
    NO_PENDING_CARD,
    CheckoutSession,
)

__all__ = (
    # Types
    "GENERIC_FAILURE",
    "PaymentMethod",
    "SessionState",
    "FailureKind",
    "CheckoutFailure",
    "BackendRejection",
    "CardIntent",
    "CardConfirmation",
    "WalletLink",
    "WalletOrder",
    "BankTransferOrder",
    "AwaitingCardConfirmation",
    "Redirected",
    "EffectOutcome",
    "EffectReport",
    "Completed",
    "PaymentStep",
    # Boundaries
    "PaymentBackend",
    "CardConfirmer",
    "AccountService",
    "Navigator",
    # Effects
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
    # Guard
    "ALREADY_PROCESSING",
    "SubmissionState",
    "SubmissionConflict",
    "SubmissionGuard",
    # Strategies
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
    # Session
    "NO_PENDING_CARD",
    "CheckoutSession",
)
