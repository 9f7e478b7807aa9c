"""Pytest configuration for fieldtypes tests."""

import pytest
import structlog

from fieldtypes.config import get_settings
from fieldtypes.validators.stamp import StampValidator


@pytest.fixture(autouse=True)
def fresh_settings_and_logging():
    """Isolate each test from cached settings and structlog configuration."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


class FakeClock:
    """Controllable replacement for StampValidator.now()."""

    def __init__(self, now: int = 1_000):
        self.current = now

    def __call__(self) -> int:
        return self.current

    def advance(self, millis: int) -> None:
        self.current += millis


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    """Freeze the epoch-millisecond clock used by stamps and the event logger."""
    fake = FakeClock()
    monkeypatch.setattr(StampValidator, "now", staticmethod(fake))
    return fake
