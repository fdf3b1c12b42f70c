"""
Gateway — httpx adapters for the storefront's coupon and payment API.

    from rigcart import gateway as GW

    async with GW.create_client(settings) as client:
        validator = GW.HttpCouponValidator(client)
        backend = GW.HttpPaymentBackend(client, auth_token=settings.auth_token)
"""

from rigcart.gateway._http import (
    IDEMPOTENCY_HEADER,
    ApiResponse,
    create_client,
    error_body,
    error_message,
)
from rigcart.gateway._coupons import (
    VALIDATE_PATH,
    INVALID_CODE,
    CouponResponse,
    HttpCouponValidator,
)
from rigcart.gateway._payments import (
    CARD_INTENT_PATH,
    WALLET_ORDER_PATH,
    BANK_TRANSFER_PATH,
    CARD_FALLBACK,
    WALLET_FALLBACK,
    BANK_FALLBACK,
    CardIntentResponse,
    WalletLinkResponse,
    WalletOrderResponse,
    BankTransferResponse,
    HttpPaymentBackend,
)

__all__ = (
    # Plumbing
    "IDEMPOTENCY_HEADER",
    "ApiResponse",
    "create_client",
    "error_body",
    "error_message",
    # Coupons
    "VALIDATE_PATH",
    "INVALID_CODE",
    "CouponResponse",
    "HttpCouponValidator",
    # Payments
    "CARD_INTENT_PATH",
    "WALLET_ORDER_PATH",
    "BANK_TRANSFER_PATH",
    "CARD_FALLBACK",
    "WALLET_FALLBACK",
    "BANK_FALLBACK",
    "CardIntentResponse",
    "WalletLinkResponse",
    "WalletOrderResponse",
    "BankTransferResponse",
    "HttpPaymentBackend",
)
