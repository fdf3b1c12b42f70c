"""
Order types.

OrderDraft is what a payment backend receives; Order is what it hands
back once it has accepted the submission.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rigcart._types import Money, ZERO
from rigcart.address import ShippingAddress
from rigcart.build_service import BuildServiceOption
from rigcart.cart import BUILD_SERVICE, CartLineItem
from rigcart.coupon import AppliedCoupon
from rigcart.pricing import Totals
from rigcart.shipping import ShippingOption

# ═══════════════════════════════════════════════════════════════════════════════
# Line Items
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class OrderLineItem:
    id: str
    name: str
    category: str
    price: Money
    quantity: int
    image: str | None = None

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity

    @classmethod
    def from_cart_item(cls, item: CartLineItem) -> OrderLineItem:
        return cls(item.id, item.name, item.category, item.price, item.quantity, item.image)

    @classmethod
    def for_build_service(cls, option: BuildServiceOption) -> OrderLineItem:
        """Synthetic line carrying the build-service fee."""
        return cls(
            id=f"build-service-{option.id}",
            name=option.name,
            category=BUILD_SERVICE,
            price=option.fee,
            quantity=1,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Customer
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class CustomerContact:
    name: str
    email: str
    phone: str


@dataclass(frozen=True, slots=True)
class AccountRequest:
    """Opt-in account creation carried alongside the order."""
    create: bool
    full_name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""
    address: ShippingAddress | None = None

    @classmethod
    def declined(cls) -> AccountRequest:
        return cls(create=False)

    @classmethod
    def for_address(cls, address: ShippingAddress) -> AccountRequest:
        return cls(
            create=True,
            full_name=address.full_name,
            email=address.email,
            phone=address.phone,
            password=address.password,
            address=address,
        )

    @property
    def display_name(self) -> str:
        return self.full_name or self.email


# ═══════════════════════════════════════════════════════════════════════════════
# OrderDraft
# ═══════════════════════════════════════════════════════════════════════════════

class InconsistentDraft(ValueError):
    """Draft amounts do not add up. Always a bug upstream."""


@dataclass(frozen=True, slots=True)
class OrderDraft:
    """
    A fully priced checkout submission, independent of payment method.

    Invariant (checked on construction):
        total = Σ(price × quantity) − discount + shipping
    with every part non-negative and discount <= Σ(price × quantity).
    The build-service fee is one of the line items.
    """
    total: Money
    currency: str
    items: tuple[OrderLineItem, ...]
    shipping_address: ShippingAddress
    customer: CustomerContact
    shipping: ShippingOption
    coupon: AppliedCoupon | None
    build_service: BuildServiceOption | None
    account: AccountRequest
    totals: Totals

    def __post_init__(self) -> None:
        if any(item.price < 0 or item.quantity < 1 for item in self.items):
            raise InconsistentDraft("line items must have price >= 0 and quantity >= 1")
        items_total = self.items_total
        discount = self.totals.discount_amount
        if not ZERO <= discount <= items_total:
            raise InconsistentDraft(f"discount {discount} outside [0, {items_total}]")
        if self.shipping.cost < 0:
            raise InconsistentDraft("shipping cost must be >= 0")
        expected = items_total - discount + self.shipping.cost
        if self.total != expected:
            raise InconsistentDraft(f"total {self.total} != {expected}")

    @property
    def items_total(self) -> Money:
        return sum((item.line_total for item in self.items), ZERO)

    @property
    def discount_amount(self) -> Money:
        return self.totals.discount_amount


# ═══════════════════════════════════════════════════════════════════════════════
# Order
# ═══════════════════════════════════════════════════════════════════════════════

class OrderStatus(Enum):
    PAID = "paid"
    PENDING_VERIFICATION = "pending_verification"


@dataclass(frozen=True, slots=True)
class Order:
    """
    An order the backend has accepted.

    ``payment_reference`` is the payment-intent id for card payments and
    the bank-transfer order id for bank transfers.
    """
    order_id: str
    order_number: str
    payment_reference: str
    method: str
    status: OrderStatus


__all__ = (
    "OrderLineItem",
    "CustomerContact",
    "AccountRequest",
    "InconsistentDraft",
    "OrderDraft",
    "OrderStatus",
    "Order",
)
