"""
Order — one canonical OrderDraft for every payment method.

    from rigcart import order as O

    match await O.assemble_order(checkout, O.CustomerDetails(address)):
        case Ok(draft):
            payload = O.OrderPayload.from_draft(draft).to_wire()
        case Error(err):
            err.field_errors
"""

from rigcart.order._types import (
    OrderLineItem,
    CustomerContact,
    AccountRequest,
    InconsistentDraft,
    OrderDraft,
    OrderStatus,
    Order,
)
from rigcart.order._payload import (
    JsonMoney,
    JsonPercent,
    LineItemPayload,
    AddressPayload,
    CouponPayload,
    BuildServicePayload,
    AccountRequestPayload,
    OrderPayload,
    WalletMetadataPayload,
    WalletOrderPayload,
    fingerprint,
)
from rigcart.order._assemble import (
    EMPTY_CART,
    INVALID_CART,
    FIX_FIELDS,
    CustomerDetails,
    OrderAssemblyError,
    CustomerDetailsNode,
    OrderDraftNode,
    assemble_order,
)

__all__ = (
    # Types
    "OrderLineItem",
    "CustomerContact",
    "AccountRequest",
    "InconsistentDraft",
    "OrderDraft",
    "OrderStatus",
    "Order",
    # Payloads
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
    # Assembly
    "EMPTY_CART",
    "INVALID_CART",
    "FIX_FIELDS",
    "CustomerDetails",
    "OrderAssemblyError",
    "CustomerDetailsNode",
    "OrderDraftNode",
    "assemble_order",
)
