"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

from loan_decision.config import Settings, settings
from loan_decision.domain.models import Decision, LoanRequest


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args, service_name: str = "loan-decision", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(config: Optional[Settings] = None, level: Optional[str] = None) -> logging.Handler:
    """
    Route the root logger through a single JSON handler on stdout.

    Level and service name come from settings; an explicit level wins.
    Returns the installed handler.
    """
    config = config or settings
    root = logging.getLogger()
    root.setLevel(level or config.log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            service_name=config.service_name,
        )
    )
    root.handlers = [handler]
    return handler


def log_decision(request: LoanRequest, decision: Decision, duration_ms: float) -> None:
    """Log structured decision outcome for analysis. The identity code is never logged."""
    logging.getLogger("loan_decision.decision").info(
        "Decision completed",
        extra={
            "step": "decision_complete",
            "outcome": "approved" if decision.is_approved else decision.failure.value,
            "country": request.country.value,
            "requested_amount": request.requested_amount,
            "requested_period_months": request.requested_period_months,
            "approved_amount": decision.approved_amount,
            "approved_period_months": decision.approved_period_months,
            "duration_ms": duration_ms,
        },
    )
