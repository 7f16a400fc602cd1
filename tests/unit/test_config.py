"""Unit tests for settings-driven calendar policy"""

import pytest
from decimal import Decimal
from pydantic import ValidationError
from oasis_forecast.config import Settings
from oasis_forecast.domain.calendar import DEFAULT_POLICY, ForecastPolicy
from oasis_forecast.domain.models import RiskLevel


def test_default_settings_match_default_policy():
    assert Settings().forecast_policy() == DEFAULT_POLICY
    assert Settings().alert_min_risk == RiskLevel.HIGH


def test_policy_from_environment(monkeypatch):
    monkeypatch.setenv("RENT_DAY", "1")
    monkeypatch.setenv("RENT_BUFFER", "75.50")
    monkeypatch.setenv("PAYCHECK_DAYS", "[1, 15]")
    monkeypatch.setenv("BENEFIT_REFILL_AMOUNT", "300")
    monkeypatch.setenv("ALERT_MIN_RISK", "medium")

    settings = Settings()
    policy = settings.forecast_policy()

    assert policy.rent_day == 1
    assert policy.rent_buffer == Decimal("75.50")
    assert policy.paycheck_days == (1, 15)
    assert policy.benefit_refill_amount == Decimal("300")
    assert policy.warmup_days == DEFAULT_POLICY.warmup_days
    assert settings.alert_min_risk == RiskLevel.MEDIUM


@pytest.mark.parametrize(
    "name,value",
    [
        ("BASELINE_WINDOW_DAYS", "0"),
        ("BASELINE_WINDOW_DAYS", "-30"),
        ("RENT_DAY", "0"),
        ("RENT_DAY", "32"),
        ("BENEFIT_REFILL_DAY", "40"),
        ("PAYCHECK_DAYS", "[15, 32]"),
        ("WARMUP_DAYS", "-1"),
        ("RENT_BUFFER", "-5"),
        ("DEFAULT_PAYCHECK", "-590"),
        ("WEBHOOK_MAX_RETRIES", "0"),
    ],
)
def test_invalid_policy_settings_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize(
    "overrides",
    [
        {"baseline_window_days": 0},
        {"rent_day": 0},
        {"paycheck_days": (15, 31, 45)},
        {"warmup_days": -1},
    ],
)
def test_forecast_policy_guards_direct_construction(overrides):
    with pytest.raises(ValueError):
        ForecastPolicy(**overrides)
