"""Crisis alert webhook: payload shaping and delivery with backoff"""

import asyncio
import logging
from typing import Any, Dict

import httpx

from oasis_forecast.config import settings
from oasis_forecast.domain.models import CrisisNotice
from oasis_forecast.infrastructure.observability.metrics import alert_failure_counter, alert_latency_histogram

logger = logging.getLogger(__name__)


def crisis_event(snapshot_id: str, user_id: str, notice: CrisisNotice) -> Dict[str, Any]:
    """JSON body for one CASHFLOW_CRISIS notification"""
    return {
        "event": "CASHFLOW_CRISIS",
        "snapshot_id": snapshot_id,
        "user_id": user_id,
        "days_until_crisis": notice.day_index,
        "crisis_date": notice.date.isoformat(),
        "description": notice.description,
        "risk": notice.risk.value,
        "severity": notice.severity.value,
    }


def _is_transient(error: httpx.HTTPError) -> bool:
    # Client errors mean the payload was refused; resending cannot help
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code >= 500
    return isinstance(error, httpx.RequestError)


class AlertClient:
    """Delivers crisis events to the notification service"""

    def __init__(
        self,
        webhook_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.webhook_url = webhook_url or settings.alert_webhook_url
        self.transport = transport
        self.timeout = settings.http_timeout_seconds
        self.max_retries = settings.webhook_max_retries
        self.backoff_base = settings.webhook_backoff_base

    def backoff(self, attempt: int) -> float:
        """Delay after the given failed attempt (1-based): base, 2*base, 4*base, ..."""
        return self.backoff_base * (2 ** (attempt - 1))

    async def send_crisis_alert(self, payload: Dict[str, Any]) -> None:
        """
        POST a crisis event, retrying server errors and network failures.

        Raises:
            httpx.HTTPError: On a 4xx response, or once max_retries attempts failed
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            for attempt in range(1, self.max_retries + 1):
                try:
                    with alert_latency_histogram.time():
                        response = await client.post(self.webhook_url, json=payload)
                    response.raise_for_status()
                    return
                except httpx.HTTPError as e:
                    alert_failure_counter.inc()
                    if not _is_transient(e) or attempt == self.max_retries:
                        logger.error(
                            f"Crisis alert delivery failed: {e}",
                            extra={"user_id": payload.get("user_id"), "attempt": attempt},
                        )
                        raise
                    await asyncio.sleep(self.backoff(attempt))
