"""
Payment types — methods, session states, step outcomes and failures.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from rigcart.order import Order

GENERIC_FAILURE = "Payment processing failed. Please try again."

# ═══════════════════════════════════════════════════════════════════════════════
# Enums
# ═══════════════════════════════════════════════════════════════════════════════

class PaymentMethod(Enum):
    CARD = "stripe"
    WALLET = "paypal"
    BANK_TRANSFER = "bank_transfer"


class SessionState(Enum):
    READY = "ready"
    PROCESSING = "processing"
    AWAITING_CARD_CONFIRMATION = "awaiting_card_confirmation"
    REDIRECTING = "redirecting"
    SUCCEEDED = "succeeded"


class FailureKind(Enum):
    VALIDATION = "validation"
    REJECTED = "rejected"
    UNEXPECTED = "unexpected"
    IN_FLIGHT = "in_flight"
    INVALID_STATE = "invalid_state"


# ═══════════════════════════════════════════════════════════════════════════════
# Failures
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class CheckoutFailure:
    """The one message the customer sees, plus field detail for forms."""
    kind: FailureKind
    message: str
    field_errors: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def rejected(cls, message: str) -> CheckoutFailure:
        return cls(FailureKind.REJECTED, message)

    @classmethod
    def unexpected(cls) -> CheckoutFailure:
        return cls(FailureKind.UNEXPECTED, GENERIC_FAILURE)


@dataclass(frozen=True, slots=True)
class BackendRejection:
    """Non-2xx answer from a payment or order endpoint."""
    message: str
    status: int | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Backend Responses
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class CardIntent:
    client_secret: str
    order_number: str


@dataclass(frozen=True, slots=True)
class CardConfirmation:
    payment_intent_id: str


@dataclass(frozen=True, slots=True)
class WalletLink:
    rel: str
    href: str


@dataclass(frozen=True, slots=True)
class WalletOrder:
    order_id: str
    links: tuple[WalletLink, ...]

    @property
    def approval_url(self) -> str | None:
        return next((link.href for link in self.links if link.rel == "approve"), None)


@dataclass(frozen=True, slots=True)
class BankTransferOrder:
    order_id: str
    order_number: str


# ═══════════════════════════════════════════════════════════════════════════════
# Steps
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class AwaitingCardConfirmation:
    client_secret: str
    order_number: str


@dataclass(frozen=True, slots=True)
class Redirected:
    url: str


@dataclass(frozen=True, slots=True)
class EffectOutcome:
    name: str
    ok: bool
    best_effort: bool
    error: str | None = None


@dataclass(frozen=True, slots=True)
class EffectReport:
    outcomes: tuple[EffectOutcome, ...]

    @property
    def completed(self) -> tuple[str, ...]:
        return tuple(o.name for o in self.outcomes if o.ok)

    @property
    def surfaced(self) -> tuple[EffectOutcome, ...]:
        """Failed must-succeed effects."""
        return tuple(o for o in self.outcomes if not o.ok and not o.best_effort)


@dataclass(frozen=True, slots=True)
class Completed:
    order: Order
    effects: EffectReport


type PaymentStep = AwaitingCardConfirmation | Redirected | Completed


__all__ = (
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
)
