"""POST /v1/forecast - stateless engine run over a caller-supplied snapshot"""

from datetime import date

from fastapi import APIRouter

from oasis_forecast.api.v1.schemas import ForecastRequest, OutlookResponse
from oasis_forecast.config import settings
from oasis_forecast.domain.outlook import build_outlook

router = APIRouter()


@router.post("/forecast", response_model=OutlookResponse)
def compute_forecast(request_body: ForecastRequest):
    """
    Run the forecast engine without touching the persistence API or database.

    Returns:
        Projected balance series, health score and insights
    """
    as_of = request_body.as_of or date.today()
    horizon_days = (
        request_body.horizon_days
        if request_body.horizon_days is not None
        else settings.default_horizon_days
    )
    entries = [entry.to_domain() for entry in request_body.entries]
    benefit_account = (
        request_body.benefit_account.to_domain() if request_body.benefit_account is not None else None
    )

    outlook = build_outlook(entries, benefit_account, horizon_days, as_of, settings.forecast_policy())
    return OutlookResponse.from_domain(outlook, as_of=as_of, horizon_days=horizon_days)
