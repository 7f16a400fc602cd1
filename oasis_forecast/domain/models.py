"""Domain models - pure Python dataclasses representing forecast entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional


class EntryKind(str, Enum):
    """Direction of a ledger movement"""

    INCOME = "income"
    EXPENSE = "expense"


class EventKind(str, Enum):
    """Calendar event that produced a day's delta"""

    RENT = "rent"
    PAYCHECK = "paycheck"
    BENEFIT_REFILL = "benefit_refill"
    DRIFT = "drift"


class Classification(str, Enum):
    """Per-day tag consumed by the chart renderer"""

    NORMAL = "normal"
    CRISIS = "crisis"
    INCOME = "income"


class RiskLevel(str, Enum):
    """Urgency tier for an upcoming crisis"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class LedgerEntry:
    """Budget entry row from the persistence API"""

    category: str
    amount: Decimal  # always >= 0, sign lives in kind
    kind: EntryKind
    date: date
    tag: Optional[str] = None  # "rent" | "income-recurring" | None
    description: Optional[str] = None


@dataclass(frozen=True)
class BenefitAccount:
    """SNAP/EBT account, read-only"""

    current_balance: Decimal
    refill_date: Optional[date] = None


@dataclass(frozen=True)
class LedgerTotals:
    """Aggregated ledger snapshot"""

    total_income: Decimal
    total_expenses: Decimal
    by_category: Dict[str, Decimal] = field(default_factory=dict)

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expenses


@dataclass(frozen=True)
class EventDay:
    """One scheduled day on the forecast calendar"""

    day_index: int
    date: date
    scheduled_delta: Decimal
    note: Optional[str] = None
    kind: EventKind = EventKind.DRIFT


@dataclass(frozen=True)
class ForecastPoint:
    """One projected day"""

    date: date
    balance: Decimal
    classification: Classification
    note: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.date:%b} {self.date.day}"


@dataclass(frozen=True)
class Forecast:
    """Projected balance series plus the first crisis index"""

    points: List[ForecastPoint]
    days_until_crisis: Optional[int]
    starting_balance: Decimal


@dataclass(frozen=True)
class HealthScore:
    """Bounded 0-100 stability indicator"""

    score: int
    days_until_crisis: Optional[int]
    status: str
    band: str


@dataclass(frozen=True)
class CrisisNotice:
    """
    First crisis day with a short explanation.

    risk grades how soon the household runs dry (high < 14 days, medium < 21);
    severity grades how urgently it must act (high < 7 days, medium < 14).
    """

    day_index: int
    date: date
    description: str
    risk: RiskLevel = RiskLevel.LOW
    severity: RiskLevel = RiskLevel.LOW


@dataclass(frozen=True)
class Outlook:
    """Output of one engine run over a ledger snapshot"""

    totals: LedgerTotals
    forecast: Forecast
    health: HealthScore
    crisis: Optional[CrisisNotice]
    emergency_fund: Decimal
    potential_savings: Decimal
    recommendations: List[str]
