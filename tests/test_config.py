from __future__ import annotations

from decimal import Decimal

from salon_checkout.core.config import Settings


def test_defaults_match_checkout_rules():
    s = Settings(_env_file=None)

    assert s.TAX_RATE == Decimal("0.08")
    assert s.POINTS_EARN_RATE == Decimal("0.10")
    assert s.EVENING_POINTS_MULTIPLIER == 2
    assert s.EVENING_START_HOUR == 6
    assert s.FALLBACK_SERVICE_PRICE == Decimal("35")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TAX_RATE", "0.05")
    monkeypatch.setenv("BOOKING_ID_PREFIX", "SC")

    s = Settings(_env_file=None)

    assert s.TAX_RATE == Decimal("0.05")
    assert s.BOOKING_ID_PREFIX == "SC"
