"""Tests for environment-driven settings."""

from datetime import timedelta

import pytest
from kungfu import Ok

from rigcart.api import create_database
from rigcart.config import Settings, get_settings
from rigcart.order import Order, OrderStatus
from rigcart.payment import PostSuccessEffects, SubmissionGuard
from rigcart.storage import create_state_store


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.api_base_url == "http://localhost:3000"
        assert settings.currency == "gbp"
        assert settings.auth_token is None
        assert settings.submission_ttl == timedelta(hours=1)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RIGCART_API_BASE_URL", "https://shop.example.co.uk")
        monkeypatch.setenv("RIGCART_REQUEST_TIMEOUT", "5")
        monkeypatch.setenv("RIGCART_SUBMISSION_TTL_SECONDS", "60")

        settings = get_settings()

        assert settings.api_base_url == "https://shop.example.co.uk"
        assert settings.request_timeout == 5.0
        assert settings.submission_ttl == timedelta(minutes=1)

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("RIGCART_AUTH_TOKEN=secret\nUNRELATED=1\n")
        assert Settings().auth_token == "secret"

    def test_cached(self):
        assert get_settings() is get_settings()


class TestSettingsReachConsumers:
    def test_success_path(self, monkeypatch, state, accounts, navigator):
        monkeypatch.setenv("RIGCART_SUCCESS_PATH", "/thanks")
        effects = PostSuccessEffects(state, accounts, navigator)
        order = Order("pi_1", "VX-1", "pi_1", "stripe", OrderStatus.PAID)
        assert effects.success_location(order) == "/thanks?pi=pi_1&order=VX-1"

    async def test_submission_ttl(self, monkeypatch):
        monkeypatch.setenv("RIGCART_SUBMISSION_TTL_SECONDS", "-1")
        guard = SubmissionGuard()
        calls = []

        async def operation():
            calls.append(1)
            return Ok("order-1")

        await guard.run("k", operation)
        await guard.run("k", operation)
        assert len(calls) == 2

    async def test_state_database_url(self, monkeypatch, tmp_path):
        path = tmp_path / "client-state.db"
        monkeypatch.setenv("RIGCART_STATE_DATABASE_URL", f"sqlite+aiosqlite:///{path}")

        store, engine = await create_state_store()
        await store.set("vortex_cart", [])
        await engine.dispose()

        assert path.exists()

    async def test_coupon_database_url(self, monkeypatch, tmp_path):
        path = tmp_path / "coupons.db"
        monkeypatch.setenv("RIGCART_COUPON_DATABASE_URL", f"sqlite+aiosqlite:///{path}")

        _, engine = await create_database()
        await engine.dispose()

        assert path.exists()
