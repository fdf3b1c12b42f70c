"""
Payment and order endpoints over HTTP.
"""

from __future__ import annotations

import httpx
from kungfu import Error, Ok, Result

from rigcart.gateway._http import IDEMPOTENCY_HEADER, ApiResponse, error_body, error_message
from rigcart.order import OrderPayload, WalletOrderPayload
from rigcart.payment import (
    BackendRejection,
    BankTransferOrder,
    CardIntent,
    WalletLink,
    WalletOrder,
)

CARD_INTENT_PATH = "/api/stripe/create-payment-intent"
WALLET_ORDER_PATH = "/api/paypal/create-order"
BANK_TRANSFER_PATH = "/api/orders/bank-transfer"

CARD_FALLBACK = "Failed to initialize payment"
WALLET_FALLBACK = "Failed to create PayPal order"
BANK_FALLBACK = "Failed to create bank transfer order"

# ═══════════════════════════════════════════════════════════════════════════════
# Responses
# ═══════════════════════════════════════════════════════════════════════════════

class CardIntentResponse(ApiResponse):
    client_secret: str | None = None
    order_number: str = ""


class WalletLinkResponse(ApiResponse):
    rel: str
    href: str


class WalletOrderResponse(ApiResponse):
    id: str
    links: list[WalletLinkResponse] = []


class BankTransferResponse(ApiResponse):
    order_id: str
    order_number: str


# ═══════════════════════════════════════════════════════════════════════════════
# Backend
# ═══════════════════════════════════════════════════════════════════════════════

class HttpPaymentBackend:
    """
    PaymentBackend over the storefront API.

    Example:
        async with create_client(settings) as client:
            backend = HttpPaymentBackend(client, auth_token=token)
            await backend.create_bank_transfer(payload, idempotency_key=key)
    """

    def __init__(self, client: httpx.AsyncClient, *, auth_token: str | None = None) -> None:
        self._client = client
        self._auth_token = auth_token

    async def create_card_intent(
        self, payload: OrderPayload, *, idempotency_key: str,
    ) -> Result[CardIntent, BackendRejection]:
        response = await self._post(CARD_INTENT_PATH, payload.to_wire(), idempotency_key)
        if response.is_error:
            return Error(BackendRejection(_card_error(response), response.status_code))
        body = CardIntentResponse.model_validate(response.json())
        return Ok(CardIntent(client_secret=body.client_secret or "", order_number=body.order_number))

    async def create_wallet_order(
        self, payload: WalletOrderPayload, *, idempotency_key: str,
    ) -> Result[WalletOrder, BackendRejection]:
        response = await self._post(WALLET_ORDER_PATH, payload.to_wire(), idempotency_key)
        if response.is_error:
            message = error_message(response, fallback=WALLET_FALLBACK)
            return Error(BackendRejection(message, response.status_code))
        body = WalletOrderResponse.model_validate(response.json())
        return Ok(WalletOrder(
            order_id=body.id,
            links=tuple(WalletLink(rel=link.rel, href=link.href) for link in body.links),
        ))

    async def create_bank_transfer(
        self, payload: OrderPayload, *, idempotency_key: str,
    ) -> Result[BankTransferOrder, BackendRejection]:
        response = await self._post(BANK_TRANSFER_PATH, payload.to_wire(), idempotency_key)
        if response.is_error:
            message = error_message(response, fallback=BANK_FALLBACK)
            return Error(BackendRejection(message, response.status_code))
        body = BankTransferResponse.model_validate(response.json())
        return Ok(BankTransferOrder(order_id=body.order_id, order_number=body.order_number))

    async def _post(self, path: str, body: dict[str, object], idempotency_key: str) -> httpx.Response:
        headers = {IDEMPOTENCY_HEADER: idempotency_key}
        if self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"
        return await self._client.post(path, json=body, headers=headers)


def _card_error(response: httpx.Response) -> str:
    """Card endpoint prefers ``message``; a 500 with ``error`` wins over both."""
    body = error_body(response)
    if body is None:
        return CARD_FALLBACK
    error = body.get("error")
    if response.status_code == 500 and isinstance(error, str) and error:
        return f"Server error: {error}"
    message = body.get("message")
    return message if isinstance(message, str) and message else CARD_FALLBACK


__all__ = (
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
