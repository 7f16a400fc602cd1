"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from oasis_forecast.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_outlook(
    request_id: str,
    user_id: str,
    score: int,
    band: str,
    days_until_crisis: Optional[int],
    entry_count: int,
    duration_ms: float,
) -> None:
    """Log structured outlook outcome for analysis"""
    logging.info(
        "Outlook computed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "outlook_complete",
            "health_score": score,
            "health_band": band,
            "days_until_crisis": days_until_crisis,
            "entry_count": entry_count,
            "duration_ms": duration_ms,
        },
    )
