"""Unit tests for forecast projection"""

from datetime import date
from decimal import Decimal
from oasis_forecast.domain.calendar import build_calendar
from oasis_forecast.domain.models import Classification, EventDay, EventKind
from oasis_forecast.domain.projection import classify, project


def _day(index: int, delta: str, note: str | None = None, kind: EventKind = EventKind.DRIFT) -> EventDay:
    return EventDay(index, date(2025, 11, 8 + index), Decimal(delta), note, kind)


def test_project_empty_calendar():
    forecast = project(Decimal("100"), [])

    assert forecast.points == []
    assert forecast.days_until_crisis is None
    assert forecast.starting_balance == Decimal("100")


def test_running_balance_accumulates():
    calendar = [_day(0, "-10"), _day(1, "-10.015"), _day(2, "25", "Paycheck +$25", EventKind.PAYCHECK)]

    forecast = project(Decimal("50"), calendar)

    assert [p.balance for p in forecast.points] == [
        Decimal("40.00"),
        Decimal("29.99"),
        Decimal("54.99"),
    ]


def test_classification_precedence():
    """Negative balance is a crisis even on an income day"""
    income_day = _day(0, "100", "Paycheck +$100", EventKind.PAYCHECK)

    assert classify(Decimal("-1"), income_day) == Classification.CRISIS
    assert classify(Decimal("10"), income_day) == Classification.INCOME
    assert classify(Decimal("0"), _day(0, "-5")) == Classification.NORMAL


def test_positive_delta_without_note_is_normal():
    assert classify(Decimal("10"), _day(0, "5")) == Classification.NORMAL


def test_exact_zero_is_not_crisis():
    forecast = project(Decimal("10"), [_day(0, "-10")])

    assert forecast.points[0].balance == Decimal("0.00")
    assert forecast.points[0].classification == Classification.NORMAL
    assert forecast.days_until_crisis is None


def test_first_crisis_is_recorded_once():
    calendar = [_day(0, "-20"), _day(1, "50", "Paycheck +$50", EventKind.PAYCHECK), _day(2, "-80")]

    forecast = project(Decimal("10"), calendar)

    assert [p.classification for p in forecast.points] == [
        Classification.CRISIS,
        Classification.INCOME,
        Classification.CRISIS,
    ]
    assert forecast.days_until_crisis == 0


def test_rent_crunch_projection(rent_crunch_entries, ebt_account, anchor):
    """Drift pushes the balance negative on Nov 10, rent deepens it, paychecks recover"""
    calendar = build_calendar(rent_crunch_entries, ebt_account, 30, anchor)

    forecast = project(Decimal("137.00"), calendar)
    points = forecast.points

    assert len(points) == 30
    assert points[0].balance == Decimal("89.90")
    assert points[1].balance == Decimal("42.80")
    assert points[2].balance == Decimal("-4.30")
    assert points[2].classification == Classification.CRISIS
    assert points[4].balance == Decimal("-901.40")
    assert points[4].note == "Rent Due -$850"
    assert points[7].balance == Decimal("204.40")
    assert points[7].classification == Classification.INCOME
    assert points[12].balance == Decimal("293.00")
    assert points[12].note == "SNAP Refill +$277"
    assert points[22].balance == Decimal("1069.10")
    assert points[29].balance == Decimal("739.40")
    assert points[29].classification == Classification.NORMAL
    assert forecast.days_until_crisis == 2


def test_point_label():
    point = project(Decimal("0"), [_day(0, "0")]).points[0]

    assert point.label == "Nov 8"
