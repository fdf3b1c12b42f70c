"""
Coupon storage and the rules a code must pass.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from kungfu import Error, Ok, Result
from sqlalchemy import Boolean, DateTime, Float, Integer, String, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from rigcart.config import get_settings
from rigcart.coupon import CouponRejection, normalize_code

CODE_REQUIRED = "Coupon code is required"
NOT_FOUND = "Coupon code not found or expired"
EXPIRED = "Coupon code has expired"
USAGE_LIMIT = "Coupon code has reached its usage limit"

# ═══════════════════════════════════════════════════════════════════════════════
# Table
# ═══════════════════════════════════════════════════════════════════════════════

class Base(DeclarativeBase):
    pass


class CouponTable(Base):
    __tablename__ = "coupons"

    code: Mapped[str] = mapped_column(String(50), primary_key=True)
    discount_percent: Mapped[float] = mapped_column(Float, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    max_uses: Mapped[int | None] = mapped_column(Integer, nullable=True)
    times_used: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


async def create_database(
    url: str | None = None,
) -> tuple[async_sessionmaker[AsyncSession], AsyncEngine]:
    """
    Create the coupon table and return (session_factory, engine).

    Without a url, ``Settings.coupon_database_url`` is used.
    """
    engine = create_async_engine(url or get_settings().coupon_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    return async_sessionmaker(engine, expire_on_commit=False), engine


# ═══════════════════════════════════════════════════════════════════════════════
# Rules
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class CouponProblem:
    status: int
    message: str


async def find_active_coupon(session: AsyncSession, code: str) -> CouponTable | None:
    result = await session.execute(
        select(CouponTable)
        .where(CouponTable.code == normalize_code(code))
        .where(CouponTable.active.is_(True))
        .limit(1)
    )
    return result.scalar_one_or_none()


def check_coupon(coupon: CouponTable | None, now: datetime) -> Result[Decimal, CouponProblem]:
    if coupon is None:
        return Error(CouponProblem(404, NOT_FOUND))
    if coupon.expires_at is not None and coupon.expires_at < now:
        return Error(CouponProblem(400, EXPIRED))
    if coupon.max_uses and coupon.times_used >= coupon.max_uses:
        return Error(CouponProblem(400, USAGE_LIMIT))
    return Ok(Decimal(str(coupon.discount_percent)))


class DatabaseCouponValidator:
    """CouponValidator reading the coupons table directly (server side)."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock

    async def validate(self, code: str) -> Result[Decimal, CouponRejection]:
        async with self._session_factory() as session:
            coupon = await find_active_coupon(session, code)
        return check_coupon(coupon, self._clock()).map_err(lambda p: CouponRejection(p.message))


__all__ = (
    "CODE_REQUIRED",
    "NOT_FOUND",
    "EXPIRED",
    "USAGE_LIMIT",
    "Base",
    "CouponTable",
    "create_database",
    "CouponProblem",
    "find_active_coupon",
    "check_coupon",
    "DatabaseCouponValidator",
)
