"""
Shared httpx plumbing for the storefront API.
"""

from __future__ import annotations

import json

import httpx
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rigcart.config import Settings, get_settings

IDEMPOTENCY_HEADER = "Idempotency-Key"


class ApiResponse(BaseModel):
    """Base for parsed response bodies: camelCase in, unknown keys ignored."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


def create_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    settings = settings or get_settings()
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
        transport=transport,
    )


def error_body(response: httpx.Response) -> dict[str, object] | None:
    try:
        body = response.json()
    except json.JSONDecodeError:
        return None
    return body if isinstance(body, dict) else None


def error_message(
    response: httpx.Response,
    *,
    fallback: str,
    keys: tuple[str, ...] = ("error", "message"),
) -> str:
    """
    First non-empty string under ``keys`` in a JSON error body.

    Non-JSON bodies give "<fallback>: <status>" so the status is not lost.
    """
    body = error_body(response)
    if body is None:
        return f"{fallback}: {response.status_code}"
    for key in keys:
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return fallback


__all__ = (
    "IDEMPOTENCY_HEADER",
    "ApiResponse",
    "create_client",
    "error_body",
    "error_message",
)
