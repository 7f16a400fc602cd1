"""Unit tests for ledger aggregation and recurring-entry detection"""

from decimal import Decimal
from oasis_forecast.domain.ledger import aggregate, is_paycheck_like, is_rent_like


def test_aggregate_empty_ledger():
    """Empty input yields all-zero totals and no categories"""
    totals = aggregate([])

    assert totals.total_income == 0
    assert totals.total_expenses == 0
    assert totals.by_category == {}
    assert totals.balance == 0


def test_aggregate_partitions_amounts(rent_crunch_entries):
    """Income + expenses equals the sum of every amount"""
    totals = aggregate(rent_crunch_entries)

    assert totals.total_income == Decimal("2400.00")
    assert totals.total_expenses == Decimal("2263.00")
    assert totals.total_income + totals.total_expenses == sum(e.amount for e in rent_crunch_entries)
    assert totals.balance == Decimal("137.00")


def test_aggregate_groups_expenses_by_category(make_entry):
    """Only expenses are grouped, and labels are case-sensitive"""
    entries = [
        make_entry("Groceries", "40", "expense"),
        make_entry("Groceries", "35.50", "expense"),
        make_entry("groceries", "10", "expense"),
        make_entry("Salary", "900", "income"),
    ]

    totals = aggregate(entries)

    assert totals.by_category == {
        "Groceries": Decimal("75.50"),
        "groceries": Decimal("10"),
    }


def test_rent_detection_prefers_explicit_tag(make_entry):
    """A tag overrides the category substring match"""
    assert is_rent_like(make_entry("Monthly Rent", "850", "expense"))
    assert is_rent_like(make_entry("Housing", "850", "expense", tag="rent"))
    assert not is_rent_like(make_entry("Rent", "850", "expense", tag="utilities"))
    assert not is_rent_like(make_entry("Groceries", "50", "expense"))


def test_paycheck_detection(make_entry):
    """Paycheck and salary categories match; income-recurring tag matches anything"""
    assert is_paycheck_like(make_entry("Paycheck", "1200", "income"))
    assert is_paycheck_like(make_entry("Base salary", "1200", "income"))
    assert is_paycheck_like(make_entry("DoorDash", "300", "income", tag="income-recurring"))
    assert not is_paycheck_like(make_entry("SNAP", "277", "income"))


def test_empty_tag_falls_back_to_category(make_entry):
    """Blank tags from form posts behave like no tag at all"""
    assert is_rent_like(make_entry("Rent", "850", "expense", tag=""))
    assert is_paycheck_like(make_entry("Paycheck", "1200", "income", tag=""))
    assert not is_rent_like(make_entry("Groceries", "50", "expense", tag=""))
