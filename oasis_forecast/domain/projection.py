"""Forecast projection - walk the event calendar and classify each day"""

from decimal import Decimal
from typing import List, Optional, Sequence

from oasis_forecast.domain.models import Classification, EventDay, Forecast, ForecastPoint
from oasis_forecast.utils.money import round_cents


def classify(balance: Decimal, event: EventDay) -> Classification:
    """Crisis beats income; income needs a positive delta with a note"""
    if balance < 0:
        return Classification.CRISIS
    if event.scheduled_delta > 0 and event.note:
        return Classification.INCOME
    return Classification.NORMAL


def project(starting_balance: Decimal, calendar: Sequence[EventDay]) -> Forecast:
    """
    Apply each day's delta to a running balance.

    The first crisis index is captured in the same pass. Classification uses
    the rounded balance so it always agrees with the emitted point.
    """
    balance = starting_balance
    points: List[ForecastPoint] = []
    days_until_crisis: Optional[int] = None

    for index, event in enumerate(calendar):
        balance += event.scheduled_delta
        rounded = round_cents(balance)
        classification = classify(rounded, event)

        if days_until_crisis is None and classification == Classification.CRISIS:
            days_until_crisis = index

        points.append(
            ForecastPoint(
                date=event.date,
                balance=rounded,
                classification=classification,
                note=event.note,
            )
        )

    return Forecast(
        points=points,
        days_until_crisis=days_until_crisis,
        starting_balance=starting_balance,
    )
