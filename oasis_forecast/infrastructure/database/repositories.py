"""Data access layer for outlook snapshots"""

import uuid
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from oasis_forecast.infrastructure.database.models import OutlookSnapshot
from oasis_forecast.domain.models import Outlook
from oasis_forecast.utils.money import to_cents


class OutlookRepository:
    """Repository for outlook snapshots"""

    def __init__(self, db: Session):
        self.db = db

    def create_snapshot(
        self,
        user_id: str,
        as_of: date,
        horizon_days: int,
        outlook: Outlook,
    ) -> OutlookSnapshot:
        """Persist an outlook; points are stored in cents to keep JSON exact"""
        snapshot = OutlookSnapshot(
            user_id=user_id,
            as_of=as_of,
            horizon_days=horizon_days,
            score=outlook.health.score,
            band=outlook.health.band,
            status=outlook.health.status,
            days_until_crisis=outlook.forecast.days_until_crisis,
            starting_balance_cents=to_cents(outlook.forecast.starting_balance),
            totals={
                "total_income_cents": to_cents(outlook.totals.total_income),
                "total_expenses_cents": to_cents(outlook.totals.total_expenses),
                "by_category_cents": {
                    category: to_cents(amount)
                    for category, amount in outlook.totals.by_category.items()
                },
            },
            points=[
                {
                    "date": point.date.isoformat(),
                    "balance_cents": to_cents(point.balance),
                    "classification": point.classification.value,
                    "note": point.note,
                }
                for point in outlook.forecast.points
            ],
        )
        self.db.add(snapshot)
        self.db.flush()  # Get ID without committing
        return snapshot

    def get_snapshot_by_id(self, snapshot_id: uuid.UUID) -> Optional[OutlookSnapshot]:
        return (
            self.db.query(OutlookSnapshot)
            .filter(OutlookSnapshot.id == snapshot_id)
            .first()
        )

    def get_snapshots_by_user(self, user_id: str, limit: int = 10) -> List[OutlookSnapshot]:
        """Fetch recent snapshots for a user, newest first"""
        return (
            self.db.query(OutlookSnapshot)
            .filter(OutlookSnapshot.user_id == user_id)
            .order_by(OutlookSnapshot.created_at.desc())
            .limit(limit)
            .all()
        )
