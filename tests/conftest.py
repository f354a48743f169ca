from __future__ import annotations

from datetime import datetime, timezone

import pytest

from surepay_backend.clock import Clock
from surepay_backend.settings import Settings, set_settings

FIXED_NOW = datetime(2026, 10, 18, 9, 30, 0, 123456, tzinfo=timezone.utc)


class FakeMonotonic:
    """Monotonic source advanced manually by tests."""

    def __init__(self, value: float = 100.0) -> None:
        self.value = value

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


@pytest.fixture()
def monotonic() -> FakeMonotonic:
    return FakeMonotonic()


@pytest.fixture()
def fixed_clock(monotonic: FakeMonotonic) -> Clock:
    return Clock.start(now=lambda: FIXED_NOW, monotonic=monotonic)


@pytest.fixture()
def settings() -> Settings:
    return Settings(port=3000, version="1.0.0", environment="development")


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    for name in ("PORT", "APP_VERSION", "NODE_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    set_settings(None)
    yield
    set_settings(None)
