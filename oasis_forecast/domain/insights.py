"""Dashboard insights derived from a forecast: crisis notice, reserves and recommendations"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

from oasis_forecast.domain.models import (
    CrisisNotice,
    EntryKind,
    EventDay,
    EventKind,
    Forecast,
    LedgerEntry,
    RiskLevel,
)

CRISIS_ALERT_DAYS = 14
MEDIUM_RISK_DAYS = 21
HIGH_SEVERITY_DAYS = 7
LOW_BALANCE_THRESHOLD = Decimal("100")
HIGH_DAILY_SPEND = Decimal("20")
GROCERY_SAVINGS_RATE = Decimal("0.15")
BASE_SAVINGS = Decimal("50")
RISK_ORDER = (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)


def crisis_risk(days_until_crisis: Optional[int]) -> RiskLevel:
    """
    Grade how soon the forecast runs dry.

    Risk tiers:
    - high:   crisis in under 14 days
    - medium: crisis in 14 - 20 days
    - low:    later, or no crisis in the horizon
    """
    if days_until_crisis is None:
        return RiskLevel.LOW
    if days_until_crisis < CRISIS_ALERT_DAYS:
        return RiskLevel.HIGH
    if days_until_crisis < MEDIUM_RISK_DAYS:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def crisis_severity(days_until_crisis: Optional[int]) -> RiskLevel:
    """High inside a week, medium inside two weeks, otherwise low"""
    if days_until_crisis is None:
        return RiskLevel.LOW
    if days_until_crisis < HIGH_SEVERITY_DAYS:
        return RiskLevel.HIGH
    if days_until_crisis < CRISIS_ALERT_DAYS:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def risk_at_least(level: RiskLevel, minimum: RiskLevel) -> bool:
    return RISK_ORDER.index(level) >= RISK_ORDER.index(minimum)


def locate_crisis(forecast: Forecast, calendar: Sequence[EventDay]) -> Optional[CrisisNotice]:
    """Describe the first crisis day, attributing it to rent when rent landed that day"""
    index = forecast.days_until_crisis
    if index is None:
        return None

    point = forecast.points[index]
    if calendar[index].kind == EventKind.RENT:
        shortfall = abs(point.balance).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        description = f"Rent - Short ${shortfall}"
    else:
        description = "Low Balance"

    return CrisisNotice(
        day_index=index,
        date=point.date,
        description=description,
        risk=crisis_risk(index),
        severity=crisis_severity(index),
    )


def emergency_fund(entries: Sequence[LedgerEntry]) -> Decimal:
    """Net of emergency/savings entries, never below zero"""
    total = Decimal("0")
    for entry in entries:
        category = entry.category.lower()
        if "emergency" not in category and "savings" not in category:
            continue
        total += entry.amount if entry.kind == EntryKind.INCOME else -entry.amount
    return max(total, Decimal("0"))


def potential_savings(entries: Sequence[LedgerEntry]) -> Decimal:
    """15% of grocery spend plus a flat base from other optimizations, whole dollars"""
    groceries = sum(
        (
            e.amount
            for e in entries
            if e.kind == EntryKind.EXPENSE and "groceries" in e.category.lower()
        ),
        Decimal("0"),
    )
    estimate = groceries * GROCERY_SAVINGS_RATE + BASE_SAVINGS
    return estimate.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def recommendations(forecast: Forecast, calendar: Sequence[EventDay]) -> List[str]:
    recs: List[str] = []

    days = forecast.days_until_crisis
    if days is not None and days < CRISIS_ALERT_DAYS:
        recs.append(f"Crisis alert: You'll run out of money in {days} days")
        recs.append("Visit a food bank today to preserve your EBT balance")
        recs.append("Check eligibility for emergency assistance programs")

    if forecast.points:
        average = sum((p.balance for p in forecast.points), Decimal("0")) / len(forecast.points)
        if average < LOW_BALANCE_THRESHOLD:
            recs.append("Consider gig work (DoorDash, Instacart) for extra income")
            recs.append("Apply for additional benefits - you may be missing WIC or TANF")

    if any(e.kind == EventKind.DRIFT and -e.scheduled_delta > HIGH_DAILY_SPEND for e in calendar):
        recs.append("Switch to discount grocers (Aldi, Lidl) to save $80+/month")

    return recs
