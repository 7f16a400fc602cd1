"""Ledger aggregation - reduce raw entries into totals and per-category sums"""

from decimal import Decimal
from typing import Dict, Iterable

from oasis_forecast.domain.models import EntryKind, LedgerEntry, LedgerTotals

ZERO = Decimal("0")


def aggregate(entries: Iterable[LedgerEntry]) -> LedgerTotals:
    """
    Sum income and expenses, and group expense amounts by category.

    Category keys are case-sensitive labels. Empty input yields all zeros.
    """
    total_income = ZERO
    total_expenses = ZERO
    by_category: Dict[str, Decimal] = {}

    for entry in entries:
        if entry.kind == EntryKind.INCOME:
            total_income += entry.amount
        else:
            total_expenses += entry.amount
            by_category[entry.category] = by_category.get(entry.category, ZERO) + entry.amount

    return LedgerTotals(
        total_income=total_income,
        total_expenses=total_expenses,
        by_category=by_category,
    )


def is_rent_like(entry: LedgerEntry) -> bool:
    """Explicit "rent" tag, else a substring match on the category"""
    if entry.tag:
        return entry.tag == "rent"
    return "rent" in entry.category.lower()


def is_paycheck_like(entry: LedgerEntry) -> bool:
    """Explicit "income-recurring" tag, else "paycheck"/"salary" in the category"""
    if entry.tag:
        return entry.tag == "income-recurring"
    category = entry.category.lower()
    return "paycheck" in category or "salary" in category
