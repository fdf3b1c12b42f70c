"""
API — FastAPI reference service for coupon validation and quotes.

    from rigcart import api

    session_factory, engine = await api.create_database(url)
    app = api.create_app(session_factory)
"""

from rigcart.api._db import (
    CODE_REQUIRED,
    NOT_FOUND,
    EXPIRED,
    USAGE_LIMIT,
    CouponTable,
    create_database,
    CouponProblem,
    find_active_coupon,
    check_coupon,
    DatabaseCouponValidator,
)
from rigcart.api._app import (
    ValidateCouponRequest,
    ValidateCouponResponse,
    QuoteRequest,
    QuoteResponse,
    create_app,
)

__all__ = (
    # Storage
    "CODE_REQUIRED",
    "NOT_FOUND",
    "EXPIRED",
    "USAGE_LIMIT",
    "CouponTable",
    "create_database",
    "CouponProblem",
    "find_active_coupon",
    "check_coupon",
    "DatabaseCouponValidator",
    # App
    "ValidateCouponRequest",
    "ValidateCouponResponse",
    "QuoteRequest",
    "QuoteResponse",
    "create_app",
)
