"""
Coupon validation over HTTP.
"""

from __future__ import annotations

from decimal import Decimal

import httpx
from kungfu import Error, Ok, Result

from rigcart.coupon import CouponRejection
from rigcart.gateway._http import ApiResponse, error_body

VALIDATE_PATH = "/api/coupons/validate"
INVALID_CODE = "Invalid coupon code"


class CouponResponse(ApiResponse):
    code: str | None = None
    discount_percent: Decimal


class HttpCouponValidator:
    """
    CouponValidator against ``POST /api/coupons/validate``.

    Transport errors and malformed bodies raise; the resolver turns them
    into its generic message.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def validate(self, code: str) -> Result[Decimal, CouponRejection]:
        response = await self._client.post(VALIDATE_PATH, json={"code": code})
        if response.is_error:
            body = error_body(response) or {}
            message = body.get("message")
            return Error(CouponRejection(message if isinstance(message, str) and message else INVALID_CODE))
        return Ok(CouponResponse.model_validate(response.json()).discount_percent)


__all__ = ("VALIDATE_PATH", "INVALID_CODE", "CouponResponse", "HttpCouponValidator")
