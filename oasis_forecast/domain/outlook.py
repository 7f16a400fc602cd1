"""Outlook composition - run the full engine over one ledger snapshot"""

from datetime import date
from typing import Optional, Sequence

from oasis_forecast.domain.calendar import DEFAULT_POLICY, ForecastPolicy, build_calendar
from oasis_forecast.domain.health import score
from oasis_forecast.domain.insights import (
    emergency_fund,
    locate_crisis,
    potential_savings,
    recommendations,
)
from oasis_forecast.domain.ledger import aggregate
from oasis_forecast.domain.models import BenefitAccount, LedgerEntry, Outlook
from oasis_forecast.domain.projection import project


def build_outlook(
    entries: Sequence[LedgerEntry],
    benefit_account: Optional[BenefitAccount],
    horizon_days: int,
    today: date,
    policy: ForecastPolicy = DEFAULT_POLICY,
) -> Outlook:
    """
    Main entry point: aggregate, schedule, project, score.

    Pure and stateless; the caller supplies the snapshot and the "today" anchor.
    """
    totals = aggregate(entries)
    calendar = build_calendar(entries, benefit_account, horizon_days, today, policy)
    forecast = project(totals.balance, calendar)

    health = score(
        totals.total_income,
        totals.total_expenses,
        benefit_account.current_balance if benefit_account is not None else None,
        forecast.days_until_crisis,
    )

    return Outlook(
        totals=totals,
        forecast=forecast,
        health=health,
        crisis=locate_crisis(forecast, calendar),
        emergency_fund=emergency_fund(entries),
        potential_savings=potential_savings(entries),
        recommendations=recommendations(forecast, calendar),
    )
