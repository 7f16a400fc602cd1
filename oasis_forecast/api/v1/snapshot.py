"""GET /v1/outlook/{snapshot_id} - Fetch a stored outlook snapshot"""

import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from oasis_forecast.api.v1.schemas import SnapshotResponse, StoredPointSchema
from oasis_forecast.infrastructure.database.session import get_db
from oasis_forecast.infrastructure.database.repositories import OutlookRepository

router = APIRouter()


@router.get("/outlook/{snapshot_id}", response_model=SnapshotResponse)
def get_snapshot(snapshot_id: str, db: Session = Depends(get_db)):
    try:
        snapshot_uuid = uuid.UUID(snapshot_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid snapshot ID format")

    snapshot = OutlookRepository(db).get_snapshot_by_id(snapshot_uuid)
    if not snapshot:
        raise HTTPException(status_code=404, detail="Snapshot not found")

    points = [
        StoredPointSchema(
            date=p["date"],
            balance=p["balance_cents"] / 100,
            classification=p["classification"],
            note=p.get("note"),
        )
        for p in snapshot.points
    ]

    return SnapshotResponse(
        snapshot_id=str(snapshot.id),
        user_id=snapshot.user_id,
        as_of=snapshot.as_of,
        horizon_days=snapshot.horizon_days,
        score=snapshot.score,
        band=snapshot.band,
        status=snapshot.status,
        days_until_crisis=snapshot.days_until_crisis,
        starting_balance=snapshot.starting_balance_cents / 100,
        points=points,
        created_at=snapshot.created_at.isoformat(),
    )
