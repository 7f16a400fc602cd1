"""Event calendar generation - calendar-anchored income/expense events per horizon day"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from oasis_forecast.domain.ledger import aggregate, is_paycheck_like, is_rent_like
from oasis_forecast.domain.models import (
    BenefitAccount,
    EntryKind,
    EventDay,
    EventKind,
    LedgerEntry,
)
from oasis_forecast.utils.date_utils import generate_horizon
from oasis_forecast.utils.money import format_amount

ZERO = Decimal("0")


@dataclass(frozen=True)
class ForecastPolicy:
    """Calendar constants; defaults reproduce the dashboard's behaviour"""

    rent_day: int = 12
    rent_buffer: Decimal = Decimal("50")
    paycheck_days: Tuple[int, ...] = (15, 30)
    warmup_days: int = 5
    default_paycheck: Decimal = Decimal("590")
    benefit_refill_day: int = 20
    benefit_refill_amount: Decimal = Decimal("277")
    baseline_window_days: int = 30

    def __post_init__(self):
        days = (self.rent_day, self.benefit_refill_day, *self.paycheck_days)
        if any(not 1 <= day <= 31 for day in days):
            raise ValueError(f"Day of month out of range: {days}")
        if self.baseline_window_days <= 0:
            raise ValueError("baseline_window_days must be positive")
        if self.warmup_days < 0:
            raise ValueError("warmup_days must not be negative")


DEFAULT_POLICY = ForecastPolicy()


@dataclass(frozen=True)
class CalendarRule:
    """A day-of-month trigger; fires only once day_index > after_day_index"""

    kind: EventKind
    days_of_month: Tuple[int, ...]
    after_day_index: int = -1

    def matches_day(self, day: date, day_index: int) -> bool:
        return day.day in self.days_of_month and day_index > self.after_day_index


@dataclass(frozen=True)
class RecurringAmounts:
    """Amounts detected from the ledger snapshot"""

    rent: Decimal
    paycheck: Decimal
    daily_baseline: Decimal


def default_rules(policy: ForecastPolicy = DEFAULT_POLICY) -> List[CalendarRule]:
    """Rules in priority order: rent, paycheck, benefit refill"""
    return [
        CalendarRule(EventKind.RENT, (policy.rent_day,)),
        CalendarRule(EventKind.PAYCHECK, tuple(policy.paycheck_days), policy.warmup_days),
        CalendarRule(EventKind.BENEFIT_REFILL, (policy.benefit_refill_day,), policy.warmup_days),
    ]


def detect_recurring_amounts(
    entries: Sequence[LedgerEntry],
    policy: ForecastPolicy = DEFAULT_POLICY,
) -> RecurringAmounts:
    """
    Find rent, paycheck and the daily spending baseline.

    - rent: amount of the first rent-like expense (0 if none)
    - paycheck: half the paycheck-like income total; falls back to
      policy.default_paycheck only when the ledger records other income
    - daily baseline: non-rent expenses spread over the baseline window
    """
    rent = ZERO
    for entry in entries:
        if entry.kind == EntryKind.EXPENSE and is_rent_like(entry):
            rent = entry.amount
            break

    paycheck_total = sum(
        (e.amount for e in entries if e.kind == EntryKind.INCOME and is_paycheck_like(e)),
        ZERO,
    )
    paycheck = paycheck_total / 2
    if paycheck == 0 and any(e.kind == EntryKind.INCOME and e.amount > 0 for e in entries):
        paycheck = policy.default_paycheck

    baseline_spend = sum(
        (e.amount for e in entries if e.kind == EntryKind.EXPENSE and not is_rent_like(e)),
        ZERO,
    )
    daily_baseline = baseline_spend / policy.baseline_window_days

    return RecurringAmounts(rent=rent, paycheck=paycheck, daily_baseline=daily_baseline)


def _resolve_event(
    rule: CalendarRule,
    amounts: RecurringAmounts,
    balance: Decimal,
    benefit_account: Optional[BenefitAccount],
    policy: ForecastPolicy,
) -> Optional[Tuple[Decimal, str]]:
    """Delta and note for a rule whose day matched, or None when it does not apply"""
    if rule.kind == EventKind.RENT:
        if amounts.rent <= 0 or balance - amounts.rent >= policy.rent_buffer:
            return None
        return -amounts.rent, f"Rent Due -${format_amount(amounts.rent)}"

    if rule.kind == EventKind.PAYCHECK:
        if amounts.paycheck <= 0:
            return None
        return amounts.paycheck, f"Paycheck +${format_amount(amounts.paycheck)}"

    if rule.kind == EventKind.BENEFIT_REFILL:
        if benefit_account is None or policy.benefit_refill_amount <= 0:
            return None
        amount = policy.benefit_refill_amount
        return amount, f"SNAP Refill +${format_amount(amount)}"

    return None


def build_calendar(
    entries: Sequence[LedgerEntry],
    benefit_account: Optional[BenefitAccount],
    horizon_days: int,
    today: date,
    policy: ForecastPolicy = DEFAULT_POLICY,
    rules: Optional[Sequence[CalendarRule]] = None,
) -> List[EventDay]:
    """
    Lay out one EventDay per horizon day starting at today.

    Rules are evaluated in order and the first applicable one wins; a day with
    no applicable rule drifts by the daily baseline. A shadow running balance
    (seeded from the ledger balance) is kept so the rent rule can check the
    buffer.
    """
    if horizon_days <= 0:
        return []

    rules = default_rules(policy) if rules is None else rules
    amounts = detect_recurring_amounts(entries, policy)
    balance = aggregate(entries).balance

    calendar: List[EventDay] = []
    for day_index, day in enumerate(generate_horizon(today, horizon_days)):
        event = None
        for rule in rules:
            if not rule.matches_day(day, day_index):
                continue
            resolved = _resolve_event(rule, amounts, balance, benefit_account, policy)
            if resolved is not None:
                event = EventDay(day_index, day, resolved[0], resolved[1], rule.kind)
                break

        if event is None:
            event = EventDay(day_index, day, ZERO - amounts.daily_baseline)

        balance += event.scheduled_delta
        calendar.append(event)

    return calendar
