"""
Coupon service — the FastAPI app as coupon authority, reached over httpx.

The gateway's HttpCouponValidator talks to the app in-process through
httpx.ASGITransport, so no server needs to be running.

Run: uv run python examples/coupon_service_example.py
"""

from datetime import datetime, timedelta

import httpx

from rigcart import format_money
from rigcart.api import CouponTable, create_app, create_database
from rigcart.config import Settings
from rigcart.coupon import CouponResolver
from rigcart.gateway import HttpCouponValidator, create_client
from rigcart.pricing import CheckoutInput, quote
from examples._infra import FULL_BUILD, banner, run


async def main() -> None:
    banner("Coupon service")

    session_factory, engine = await create_database("sqlite+aiosqlite:///:memory:")
    async with session_factory() as session, session.begin():
        session.add_all([
            CouponTable(code="SAVE10", discount_percent=10),
            CouponTable(code="SUMMER", discount_percent=20, expires_at=datetime.now() - timedelta(days=30)),
            CouponTable(code="FIRST50", discount_percent=50, max_uses=100, times_used=100),
        ])

    settings = Settings(api_base_url="http://rigcart.local")
    app = create_app(session_factory, settings=settings)

    async with create_client(settings, transport=httpx.ASGITransport(app=app)) as client:
        priced = await quote(CheckoutInput(cart=tuple(FULL_BUILD)))
        subtotal = priced.totals.subtotal
        print(f"\nSubtotal incl. build service: {format_money(subtotal)}")

        resolver = CouponResolver(HttpCouponValidator(client))
        for code in ("save10", "summer", "first50", "nope", ""):
            state = await resolver.apply(code, subtotal)
            if state.applied is not None:
                print(f"  {code!r:10} ✓ {state.applied.discount_percent}% → -{format_money(state.discount_amount)}")
            else:
                print(f"  {code!r:10} ✗ {state.error or 'cleared'}")

        print("\nServer-side quote:")
        response = await client.post("/api/checkout/quote", json={
            "items": FULL_BUILD,
            "shippingMethod": "express",
            "couponCode": "SAVE10",
        })
        for key, value in response.json().items():
            print(f"  {key}: {value}")

    await engine.dispose()


if __name__ == "__main__":
    run(main)
