"""
Reference storefront service: coupon authority and server-side quotes.
"""

import logging
from collections.abc import AsyncIterator, Callable
from datetime import datetime
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from kungfu import Error, Ok
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rigcart.api._db import CODE_REQUIRED, DatabaseCouponValidator, check_coupon, find_active_coupon
from rigcart.build_service import DEFAULT_BUILD_SERVICE, BuildServiceChoice, UnknownBuildService
from rigcart.config import Settings, get_settings
from rigcart.coupon import CouponResolver, normalize_code
from rigcart.order import JsonMoney
from rigcart.pricing import CheckoutInput, quote
from rigcart.shipping import DEFAULT_SHIPPING, UnknownShippingMethod

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Schemas
# ═══════════════════════════════════════════════════════════════════════════════

class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidateCouponRequest(_Schema):
    code: Any = None


class ValidateCouponResponse(_Schema):
    valid: bool = True
    code: str
    discount_percent: float


class QuoteRequest(_Schema):
    items: list[dict[str, Any]]
    shipping_method: str = DEFAULT_SHIPPING
    build_service: str | None = DEFAULT_BUILD_SERVICE
    assemble_myself: bool = False
    coupon_code: str | None = None


class QuoteResponse(_Schema):
    components_subtotal: JsonMoney
    build_service_offered: bool
    build_service: str | None
    build_service_fee: JsonMoney
    subtotal: JsonMoney
    coupon: str | None
    coupon_error: str | None
    discount_amount: JsonMoney
    final_subtotal: JsonMoney
    shipping_method: str
    shipping_cost: JsonMoney
    total: JsonMoney
    currency: str
    rejected_items: int


# ═══════════════════════════════════════════════════════════════════════════════
# App
# ═══════════════════════════════════════════════════════════════════════════════

def create_app(
    session_factory: async_sessionmaker[AsyncSession],
    *,
    settings: Settings | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastAPI:
    """
    Example:
        session_factory, engine = await create_database()
        app = create_app(session_factory)
    """
    settings = settings or get_settings()
    validator = DatabaseCouponValidator(session_factory, clock)
    app = FastAPI(title="rigcart", version="0.1.0")

    async def session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as s:
            yield s

    @app.exception_handler(UnknownShippingMethod)
    @app.exception_handler(UnknownBuildService)
    async def unknown_option_handler(request: Request, exc: LookupError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"message": str(exc)})

    @app.post("/api/coupons/validate")
    async def validate_coupon(
        body: ValidateCouponRequest,
        db: Annotated[AsyncSession, Depends(session)],
    ) -> JSONResponse:
        if not isinstance(body.code, str) or not normalize_code(body.code):
            return JSONResponse(status_code=400, content={"message": CODE_REQUIRED})

        code = normalize_code(body.code)
        match check_coupon(await find_active_coupon(db, code), clock()):
            case Ok(percent):
                logger.info("Coupon %s validated (%s%%)", code, percent)
                payload = ValidateCouponResponse(code=code, discount_percent=float(percent))
                return JSONResponse(content=payload.model_dump(by_alias=True))
            case Error(problem):
                logger.warning("Coupon %s rejected: %s", code, problem.message)
                return JSONResponse(status_code=problem.status, content={"message": problem.message})

    @app.post("/api/checkout/quote", response_model=QuoteResponse, response_model_by_alias=True)
    async def checkout_quote(body: QuoteRequest) -> QuoteResponse:
        checkout = CheckoutInput(
            cart=tuple(body.items),
            build_service=BuildServiceChoice(body.build_service, body.assemble_myself),
            shipping_method=body.shipping_method,
            currency=settings.currency,
        )
        priced = await quote(checkout)

        coupon_error = None
        if body.coupon_code:
            resolver = CouponResolver(validator)
            state = await resolver.apply(body.coupon_code, priced.totals.subtotal)
            coupon_error = state.error
            if state.applied is not None:
                priced = await quote(CheckoutInput(
                    cart=checkout.cart,
                    build_service=checkout.build_service,
                    shipping_method=checkout.shipping_method,
                    coupon=state.applied,
                    currency=checkout.currency,
                ))

        totals = priced.totals
        selected = priced.build_service.selected
        return QuoteResponse(
            components_subtotal=totals.components_subtotal,
            build_service_offered=priced.build_service.eligible,
            build_service=selected.id if selected is not None else None,
            build_service_fee=totals.build_service_fee,
            subtotal=totals.subtotal,
            coupon=priced.coupon.code if priced.coupon is not None else None,
            coupon_error=coupon_error,
            discount_amount=totals.discount_amount,
            final_subtotal=totals.final_subtotal,
            shipping_method=priced.shipping.id,
            shipping_cost=totals.shipping_cost,
            total=totals.total,
            currency=priced.currency,
            rejected_items=len(priced.cart.rejected),
        )

    return app


__all__ = (
    "ValidateCouponRequest",
    "ValidateCouponResponse",
    "QuoteRequest",
    "QuoteResponse",
    "create_app",
)
