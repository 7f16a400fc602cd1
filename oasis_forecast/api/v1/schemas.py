"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from oasis_forecast.config import settings
from oasis_forecast.domain.models import (
    BenefitAccount,
    EntryKind,
    ForecastPoint,
    LedgerEntry,
    Outlook,
)


class OutlookRequest(BaseModel):
    """Request body for POST /v1/outlook"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    horizon_days: Optional[int] = Field(
        None, ge=0, le=settings.max_horizon_days, description="Days to project (default from settings)"
    )
    as_of: Optional[date] = Field(None, description="Anchor date for day 0 (default today)")


class LedgerEntrySchema(BaseModel):
    """Budget entry supplied by the caller"""

    category: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, description="Non-negative magnitude")
    type: Literal["income", "expense"]
    date: date
    tag: Optional[str] = None
    description: Optional[str] = None

    def to_domain(self) -> LedgerEntry:
        return LedgerEntry(
            category=self.category,
            amount=self.amount,
            kind=EntryKind(self.type),
            date=self.date,
            tag=self.tag,
            description=self.description,
        )


class BenefitAccountSchema(BaseModel):
    """SNAP/EBT account supplied by the caller"""

    current_balance: Decimal = Field(..., ge=0)
    refill_date: Optional[date] = None

    def to_domain(self) -> BenefitAccount:
        return BenefitAccount(current_balance=self.current_balance, refill_date=self.refill_date)


class ForecastRequest(BaseModel):
    """Request body for POST /v1/forecast"""

    entries: List[LedgerEntrySchema] = Field(default_factory=list)
    benefit_account: Optional[BenefitAccountSchema] = None
    horizon_days: Optional[int] = Field(None, ge=0, le=settings.max_horizon_days)
    as_of: Optional[date] = None


class ForecastPointSchema(BaseModel):
    """Single projected day, shaped for the chart renderer"""

    date: date
    label: str
    balance: float
    classification: str
    note: Optional[str] = None

    @classmethod
    def from_domain(cls, point: ForecastPoint) -> "ForecastPointSchema":
        return cls(
            date=point.date,
            label=point.label,
            balance=float(point.balance),
            classification=point.classification.value,
            note=point.note,
        )


class TotalsSchema(BaseModel):
    total_income: float
    total_expenses: float
    balance: float
    by_category: Dict[str, float]


class HealthSchema(BaseModel):
    score: int
    days_until_crisis: Optional[int] = None
    status: str
    band: str


class CrisisSchema(BaseModel):
    day_index: int
    date: date
    description: str
    risk: str
    severity: str


class OutlookResponse(BaseModel):
    """Response for POST /v1/outlook and POST /v1/forecast"""

    snapshot_id: Optional[str] = None
    user_id: Optional[str] = None
    as_of: date
    horizon_days: int
    totals: TotalsSchema
    health: HealthSchema
    crisis: Optional[CrisisSchema] = None
    points: List[ForecastPointSchema]
    emergency_fund: float
    potential_savings: float
    recommendations: List[str]

    @classmethod
    def from_domain(
        cls,
        outlook: Outlook,
        as_of: date,
        horizon_days: int,
        snapshot_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> "OutlookResponse":
        totals = outlook.totals
        crisis = outlook.crisis
        return cls(
            snapshot_id=snapshot_id,
            user_id=user_id,
            as_of=as_of,
            horizon_days=horizon_days,
            totals=TotalsSchema(
                total_income=float(totals.total_income),
                total_expenses=float(totals.total_expenses),
                balance=float(totals.balance),
                by_category={k: float(v) for k, v in totals.by_category.items()},
            ),
            health=HealthSchema(
                score=outlook.health.score,
                days_until_crisis=outlook.health.days_until_crisis,
                status=outlook.health.status,
                band=outlook.health.band,
            ),
            crisis=(
                CrisisSchema(
                    day_index=crisis.day_index,
                    date=crisis.date,
                    description=crisis.description,
                    risk=crisis.risk.value,
                    severity=crisis.severity.value,
                )
                if crisis is not None
                else None
            ),
            points=[ForecastPointSchema.from_domain(p) for p in outlook.forecast.points],
            emergency_fund=float(outlook.emergency_fund),
            potential_savings=float(outlook.potential_savings),
            recommendations=list(outlook.recommendations),
        )


class StoredPointSchema(BaseModel):
    """Projected day as stored with a snapshot"""

    date: date
    balance: float
    classification: str
    note: Optional[str] = None


class SnapshotResponse(BaseModel):
    """Response for GET /v1/outlook/{snapshot_id}"""

    snapshot_id: str
    user_id: str
    as_of: date
    horizon_days: int
    score: int
    band: str
    status: str
    days_until_crisis: Optional[int] = None
    starting_balance: float
    points: List[StoredPointSchema]
    created_at: str


class HistoryItem(BaseModel):
    """Single snapshot in history"""

    snapshot_id: str
    as_of: date
    score: int
    band: str
    status: str
    days_until_crisis: Optional[int] = None
    created_at: str


class HistoryResponse(BaseModel):
    """Response for GET /v1/outlook/history"""

    user_id: str
    snapshots: List[HistoryItem]
