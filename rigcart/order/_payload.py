"""
Wire payloads — what payment backends receive.

camelCase on the wire, money as JSON numbers.
"""

from __future__ import annotations

import hashlib
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from rigcart._types import format_money
from rigcart.address import ShippingAddress
from rigcart.order._types import AccountRequest, OrderDraft, OrderLineItem

JsonMoney = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
JsonPercent = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)


# ═══════════════════════════════════════════════════════════════════════════════
# Shared Parts
# ═══════════════════════════════════════════════════════════════════════════════

class LineItemPayload(_Payload):
    id: str
    name: str
    category: str
    price: JsonMoney
    quantity: int
    image: str | None = None

    @classmethod
    def from_item(cls, item: OrderLineItem) -> LineItemPayload:
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            price=item.price,
            quantity=item.quantity,
            image=item.image,
        )


class AddressPayload(_Payload):
    line1: str
    line2: str
    city: str
    county: str
    postcode: str
    country: str

    @classmethod
    def from_address(cls, address: ShippingAddress) -> AddressPayload:
        return cls(
            line1=address.line1,
            line2=address.line2,
            city=address.city,
            county=address.county,
            postcode=address.postcode,
            country=address.country,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Order Payload (card, bank transfer)
# ═══════════════════════════════════════════════════════════════════════════════

class CouponPayload(_Payload):
    code: str
    discount_percent: JsonPercent
    discount_amount: JsonMoney


class BuildServicePayload(_Payload):
    id: str
    name: str
    price: JsonMoney


class AccountRequestPayload(_Payload):
    """Contact details only. The password stays with AccountService.register."""
    create: bool
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: AddressPayload | None = None

    @classmethod
    def from_request(cls, account: AccountRequest) -> AccountRequestPayload:
        if not account.create:
            return cls(create=False)
        return cls(
            create=True,
            full_name=account.full_name,
            email=account.email,
            phone=account.phone,
            address=AddressPayload.from_address(account.address) if account.address else None,
        )


class OrderPayload(_Payload):
    amount: JsonMoney
    currency: str
    cart_items: list[LineItemPayload]
    shipping_address: AddressPayload
    customer_email: str
    customer_name: str
    customer_phone: str
    shipping_method: str
    shipping_cost: JsonMoney
    coupon: CouponPayload | None
    build_service: BuildServicePayload | None
    account_request: AccountRequestPayload

    @classmethod
    def from_draft(cls, draft: OrderDraft) -> OrderPayload:
        coupon = None
        if draft.coupon is not None:
            coupon = CouponPayload(
                code=draft.coupon.code,
                discount_percent=draft.coupon.discount_percent,
                discount_amount=draft.discount_amount,
            )
        build_service = None
        if draft.build_service is not None:
            build_service = BuildServicePayload(
                id=draft.build_service.id,
                name=draft.build_service.name,
                price=draft.build_service.fee,
            )
        return cls(
            amount=draft.total,
            currency=draft.currency,
            cart_items=[LineItemPayload.from_item(item) for item in draft.items],
            shipping_address=AddressPayload.from_address(draft.shipping_address),
            customer_email=draft.customer.email,
            customer_name=draft.customer.name,
            customer_phone=draft.customer.phone,
            shipping_method=draft.shipping.id,
            shipping_cost=draft.shipping.cost,
            coupon=coupon,
            build_service=build_service,
            account_request=AccountRequestPayload.from_request(draft.account),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Wallet Payload
# ═══════════════════════════════════════════════════════════════════════════════

class WalletMetadataPayload(_Payload):
    shipping_address: AddressPayload
    customer_name: str
    customer_phone: str
    build_service: str


class WalletOrderPayload(_Payload):
    """The wallet provider's order schema; totals are re-derived from items."""
    items: list[LineItemPayload]
    customer_email: str
    currency: str
    metadata: WalletMetadataPayload

    @classmethod
    def from_draft(cls, draft: OrderDraft) -> WalletOrderPayload:
        service = draft.build_service
        return cls(
            items=[LineItemPayload.from_item(item) for item in draft.items],
            customer_email=draft.customer.email,
            currency=draft.currency,
            metadata=WalletMetadataPayload(
                shipping_address=AddressPayload.from_address(draft.shipping_address),
                customer_name=draft.customer.name,
                customer_phone=draft.customer.phone,
                build_service=f"{service.name} ({format_money(service.fee)})" if service else "",
            ),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Fingerprint
# ═══════════════════════════════════════════════════════════════════════════════

def fingerprint(draft: OrderDraft) -> str:
    """
    SHA-256 of the canonical order payload. Equal drafts, equal fingerprints.

    The payload carries no password, so neither does the fingerprint.
    """
    canonical = OrderPayload.from_draft(draft).model_dump_json(by_alias=True)
    return hashlib.sha256(canonical.encode()).hexdigest()


__all__ = (
    "JsonMoney",
    "JsonPercent",
    "LineItemPayload",
    "AddressPayload",
    "CouponPayload",
    "BuildServicePayload",
    "AccountRequestPayload",
    "OrderPayload",
    "WalletMetadataPayload",
    "WalletOrderPayload",
    "fingerprint",
)
