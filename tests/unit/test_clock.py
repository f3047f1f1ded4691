"""
Tests for the system clock adapter.
"""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from src.adapters import clock as clock_module
from src.adapters.clock import SystemClock

HONOLULU = timezone(timedelta(hours=-10))

# 2026-10-19 05:18 UTC is still 2026-10-18 in Honolulu
INSTANT = datetime(2026, 10, 19, 5, 18, tzinfo=UTC)


class HonoluluDatetime(datetime):
    """datetime whose naive now() reports Honolulu wall time."""

    @classmethod
    def now(cls, tz=None):
        if tz is None:
            return INSTANT.astimezone(HONOLULU).replace(tzinfo=None)
        return INSTANT.astimezone(tz)


@pytest.fixture
def honolulu_host(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(clock_module, "datetime", HonoluluDatetime)


def test_today_is_the_utc_day(honolulu_host: None) -> None:
    assert SystemClock().today() == date(2026, 10, 19)


def test_now_utc_is_aware(honolulu_host: None) -> None:
    now = SystemClock().now_utc()

    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
    assert now == INSTANT
