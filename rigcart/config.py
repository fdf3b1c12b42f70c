"""
Settings — environment-driven, prefixed RIGCART_.

    RIGCART_API_BASE_URL=https://shop.example.co.uk
    RIGCART_REQUEST_TIMEOUT=15
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RIGCART_", env_file=".env", extra="ignore")

    api_base_url: str = "http://localhost:3000"
    request_timeout: float = 30.0
    auth_token: str | None = None

    currency: str = "gbp"
    success_path: str = "/order-success"
    submission_ttl_seconds: int | None = 3600

    state_database_url: str = "sqlite+aiosqlite:///rigcart-state.db"
    coupon_database_url: str = "sqlite+aiosqlite:///rigcart-coupons.db"

    @property
    def submission_ttl(self) -> timedelta | None:
        """None keeps completed submissions until the process exits."""
        if self.submission_ttl_seconds is None:
            return None
        return timedelta(seconds=self.submission_ttl_seconds)


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ("Settings", "get_settings")
