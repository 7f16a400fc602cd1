"""GET /v1/outlook/history - Fetch user's outlook history"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from oasis_forecast.api.v1.schemas import HistoryResponse, HistoryItem
from oasis_forecast.infrastructure.database.session import get_db
from oasis_forecast.infrastructure.database.repositories import OutlookRepository

router = APIRouter()


@router.get("/outlook/history", response_model=HistoryResponse)
def get_outlook_history(
    user_id: str = Query(..., description="User identifier"),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent outlook snapshots for a user.

    Returns:
        List of snapshots with score, band and crisis lead time
    """
    snapshots = OutlookRepository(db).get_snapshots_by_user(user_id, limit=20)

    history_items = [
        HistoryItem(
            snapshot_id=str(s.id),
            as_of=s.as_of,
            score=s.score,
            band=s.band,
            status=s.status,
            days_until_crisis=s.days_until_crisis,
            created_at=s.created_at.isoformat(),
        )
        for s in snapshots
    ]

    return HistoryResponse(user_id=user_id, snapshots=history_items)
