"""POST /v1/outlook - forecast and health score for a stored ledger"""

import asyncio
import logging
import time
from datetime import date

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from oasis_forecast.api.dependencies import get_alert_client, get_persistence_client, get_request_id
from oasis_forecast.api.v1.schemas import OutlookRequest, OutlookResponse
from oasis_forecast.config import settings
from oasis_forecast.domain.exceptions import InvalidLedgerDataError, PersistenceAPIError
from oasis_forecast.domain.insights import risk_at_least
from oasis_forecast.domain.outlook import build_outlook
from oasis_forecast.infrastructure.clients.alerts import AlertClient, crisis_event
from oasis_forecast.infrastructure.clients.persistence import PersistenceClient
from oasis_forecast.infrastructure.database.repositories import OutlookRepository
from oasis_forecast.infrastructure.database.session import get_db
from oasis_forecast.infrastructure.observability.logging import log_outlook
from oasis_forecast.infrastructure.observability.metrics import (
    persistence_fetch_failures_counter,
    record_outlook,
)
from oasis_forecast.utils.date_utils import lookback_start

router = APIRouter()


@router.post("/outlook", response_model=OutlookResponse)
async def create_outlook(
    request_body: OutlookRequest,
    background_tasks: BackgroundTasks,
    request: Request,
    db: Session = Depends(get_db),
    persistence_client: PersistenceClient = Depends(get_persistence_client),
    alert_client: AlertClient = Depends(get_alert_client),
):
    """
    Project a user's cash flow and score their financial health.

    Flow:
    1. Fetch recent budget entries and the EBT account from the persistence API
    2. Run the forecast engine over that snapshot
    3. Persist the outlook snapshot
    4. Schedule a crisis alert if a crisis is near
    5. Return the outlook
    """
    start_time = time.time()
    request_id = get_request_id(request)
    user_id = request_body.user_id
    as_of = request_body.as_of or date.today()
    horizon_days = (
        request_body.horizon_days
        if request_body.horizon_days is not None
        else settings.default_horizon_days
    )

    try:
        # 1. Fetch the snapshot
        since = lookback_start(as_of, settings.ledger_lookback_days)
        entries, benefit_account = await asyncio.gather(
            persistence_client.get_ledger_entries(user_id, since),
            persistence_client.get_benefit_account(user_id),
        )

        # 2. Run the engine
        outlook = build_outlook(entries, benefit_account, horizon_days, as_of, settings.forecast_policy())

        # 3. Persist
        snapshot = OutlookRepository(db).create_snapshot(
            user_id=user_id,
            as_of=as_of,
            horizon_days=horizon_days,
            outlook=outlook,
        )
        snapshot_id = str(snapshot.id)

        # 4. Alert on an imminent crisis
        crisis = outlook.crisis
        if crisis is not None and risk_at_least(crisis.risk, settings.alert_min_risk):
            background_tasks.add_task(
                alert_client.send_crisis_alert,
                crisis_event(snapshot_id, user_id, crisis),
            )

        db.commit()

        duration_ms = (time.time() - start_time) * 1000
        record_outlook(outlook.health.band, outlook.forecast.days_until_crisis)
        log_outlook(
            request_id,
            user_id,
            outlook.health.score,
            outlook.health.band,
            outlook.forecast.days_until_crisis,
            len(entries),
            duration_ms,
        )

        return OutlookResponse.from_domain(
            outlook,
            as_of=as_of,
            horizon_days=horizon_days,
            snapshot_id=snapshot_id,
            user_id=user_id,
        )

    except PersistenceAPIError as e:
        persistence_fetch_failures_counter.inc()
        db.rollback()
        logging.error(f"Persistence API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Persistence service unavailable")

    except InvalidLedgerDataError as e:
        db.rollback()
        logging.warning(f"Malformed ledger data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=502, detail="Persistence service returned malformed data")

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
