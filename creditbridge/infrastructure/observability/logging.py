"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from creditbridge.config import settings


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

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_analytics_generated(
    request_id: str,
    user_id: str,
    score: int,
    risk_profile: str,
    offer_count: int,
    duration_ms: float,
) -> None:
    """Log structured analytics outcome for analysis"""
    logging.info(
        "Analytics generated",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "analytics_complete",
            "score": score,
            "risk_profile": risk_profile,
            "offer_count": offer_count,
            "duration_ms": duration_ms,
        },
    )


def log_score_calculated(request_id: str, score: int, weights: Dict[str, float]) -> None:
    logging.info(
        "Score calculated",
        extra={
            "request_id": request_id,
            "step": "score_calculated",
            "score": score,
            "traditional_weight": weights["traditional"],
            "alternative_weight": weights["alternative"],
        },
    )
