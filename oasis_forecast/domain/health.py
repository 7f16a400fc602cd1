"""Financial health scoring - bounded 0-100 composite of balance, benefits and savings rate"""

from decimal import Decimal
from typing import Optional

from oasis_forecast.domain.models import HealthScore


def balance_points(current_balance: Decimal) -> int:
    """Up to 40 points for the ledger balance"""
    if current_balance > 500:
        return 40
    if current_balance > 200:
        return 30
    if current_balance > 0:
        return 20
    return 0


def benefit_points(benefit_balance: Optional[Decimal]) -> int:
    """Up to 30 points for the SNAP/EBT balance; no account scores 0"""
    if benefit_balance is None:
        return 0
    if benefit_balance > 200:
        return 30
    if benefit_balance > 100:
        return 20
    if benefit_balance > 0:
        return 10
    return 0


def ratio_points(total_income: Decimal, total_expenses: Decimal) -> int:
    """Up to 30 points for the share of income left after expenses"""
    # No income means the ratio is undefined; omit the component
    if total_income <= 0:
        return 0

    ratio = (total_income - total_expenses) / total_income
    if ratio > Decimal("0.3"):
        return 30
    if ratio > Decimal("0.1"):
        return 20
    if ratio > 0:
        return 10
    return 0


def determine_band(score: int) -> str:
    """
    Map a score to a coarse band.

    Score bands:
    - 80+:     strong
    - 60 - 79: stable
    - 30 - 59: fragile
    - < 30:    critical
    """
    if score >= 80:
        return "strong"
    elif score >= 60:
        return "stable"
    elif score >= 30:
        return "fragile"
    else:
        return "critical"


def describe_status(band: str, days_until_crisis: Optional[int]) -> str:
    if days_until_crisis is not None:
        if days_until_crisis == 0:
            return "Crisis today"
        unit = "day" if days_until_crisis == 1 else "days"
        return f"Crisis in {days_until_crisis} {unit}"
    return band.capitalize()


def score(
    total_income: Decimal,
    total_expenses: Decimal,
    benefit_balance: Optional[Decimal] = None,
    days_until_crisis: Optional[int] = None,
) -> HealthScore:
    """
    Sum the three independently capped components.

    Weights:
    - 40: current balance (income - expenses)
    - 30: benefit balance, only when an account exists
    - 30: (income - expenses) / income, only when income > 0

    The maxima add to 100, so the result always lies in [0, 100].
    """
    total = (
        balance_points(total_income - total_expenses)
        + benefit_points(benefit_balance)
        + ratio_points(total_income, total_expenses)
    )
    band = determine_band(total)

    return HealthScore(
        score=total,
        days_until_crisis=days_until_crisis,
        status=describe_status(band, days_until_crisis),
        band=band,
    )
