"""Shared infrastructure for examples: console-backed checkout boundaries."""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from decimal import Decimal

from kungfu import Result, Ok, Error

from rigcart.coupon import CouponRejection
from rigcart.order import OrderPayload, WalletOrderPayload
from rigcart.payment import (
    BackendRejection,
    BankTransferOrder,
    CardConfirmation,
    CardIntent,
    WalletLink,
    WalletOrder,
)


# Cart as the storefront stores it
def part(item_id: str, name: str, category: str, price: float, quantity: int = 1) -> dict[str, object]:
    return {"id": item_id, "name": name, "category": category, "price": price, "quantity": quantity}


FULL_BUILD = [
    part("r7-7800x3d", "Ryzen 7 7800X3D", "cpu", 339.99),
    part("x670e-tuf", "TUF Gaming X670E", "motherboard", 229.99),
    part("ddr5-32-6000", "32GB DDR5-6000", "ram", 104.99),
    part("sn850x-2tb", "WD SN850X 2TB", "storage", 139.99),
    part("rm850x", "Corsair RM850x", "psu", 119.99),
    part("h7-flow", "NZXT H7 Flow", "case", 109.99),
    part("rtx-4070s", "RTX 4070 Super", "gpu", 549.99),
]


# Coupons
@dataclass(slots=True)
class StaticCoupons:
    percents: dict[str, Decimal] = field(default_factory=lambda: {
        "SAVE10": Decimal("10"),
        "BUILD15": Decimal("15"),
    })

    async def validate(self, code: str) -> Result[Decimal, CouponRejection]:
        await asyncio.sleep(0.01)
        percent = self.percents.get(code)
        return Ok(percent) if percent is not None else Error(CouponRejection("Coupon code not found or expired"))


# Payment backend
@dataclass(slots=True)
class ConsoleBackend:
    decline_bank: bool = False
    seen_keys: set[str] = field(default_factory=set)
    _numbers: itertools.count[int] = field(default_factory=lambda: itertools.count(1001))

    def _log(self, what: str, key: str) -> None:
        replay = " (replay)" if key in self.seen_keys else ""
        self.seen_keys.add(key)
        print(f"  [API] {what}, key={key}{replay}")

    async def create_card_intent(
        self, payload: OrderPayload, *, idempotency_key: str,
    ) -> Result[CardIntent, BackendRejection]:
        self._log(f"card intent for £{payload.amount}", idempotency_key)
        n = next(self._numbers)
        return Ok(CardIntent(client_secret=f"pi_{n}_secret_demo", order_number=f"VX-{n}"))

    async def create_wallet_order(
        self, payload: WalletOrderPayload, *, idempotency_key: str,
    ) -> Result[WalletOrder, BackendRejection]:
        self._log(f"wallet order, {len(payload.items)} items", idempotency_key)
        n = next(self._numbers)
        return Ok(WalletOrder(
            order_id=f"PAYPAL-{n}",
            links=(WalletLink("approve", f"https://www.sandbox.paypal.test/checkoutnow?token=PAYPAL-{n}"),),
        ))

    async def create_bank_transfer(
        self, payload: OrderPayload, *, idempotency_key: str,
    ) -> Result[BankTransferOrder, BackendRejection]:
        self._log(f"bank transfer for £{payload.amount}", idempotency_key)
        if self.decline_bank:
            return Error(BackendRejection("Bank transfer is temporarily unavailable", 503))
        n = next(self._numbers)
        return Ok(BankTransferOrder(order_id=f"bank_{n}", order_number=f"VX-{n}"))


class ConsoleConfirmer:
    async def confirm(self, client_secret: str) -> Result[CardConfirmation, BackendRejection]:
        print(f"  [Card] confirming {client_secret}")
        return Ok(CardConfirmation(client_secret.split("_secret")[0]))


class ConsoleAccounts:
    async def register(self, display_name: str, email: str, password: str) -> None:
        print(f"  [Accounts] registered {display_name} <{email}>")


class ConsoleNavigator:
    async def go(self, location: str) -> None:
        print(f"  [Navigate] → {location}")


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
