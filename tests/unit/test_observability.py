"""Unit tests for structured logging and metrics"""

import json
import logging
import pytest
from prometheus_client import REGISTRY
from loan_decision.config import Settings, settings
from loan_decision.domain.models import Country, Decision, FailureKind, LoanRequest
from loan_decision.infrastructure.observability.logging import CustomJsonFormatter, log_decision, setup_logging
from loan_decision.infrastructure.observability.metrics import amount_bucket, record_decision


def _sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_json_formatter_adds_service_metadata():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s", service_name="test-service")
    record = logging.LogRecord("loan_decision", logging.INFO, __file__, 1, "hello", None, None)

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["service"] == "test-service"
    assert "timestamp" in payload


def test_log_decision_omits_identity_code(caplog):
    """Test decision logs carry outcome fields but never the personal code"""
    request = LoanRequest("39001015007", 4000, 24, Country.LATVIA)

    with caplog.at_level(logging.INFO, logger="loan_decision.decision"):
        log_decision(request, Decision.approved(7200, 24), 1.5)

    record = caplog.records[-1]
    assert record.outcome == "approved"
    assert record.country == "Latvia"
    assert record.approved_amount == 7200
    assert "39001015007" not in caplog.text
    assert not any("39001015007" in str(v) for v in record.__dict__.values())


def test_amount_bucket():
    assert amount_bucket(2000) == "2000"
    assert amount_bucket(3600) == "2001-5000"
    assert amount_bucket(7200) == "5001-9999"
    assert amount_bucket(10000) == "10000"


def test_record_decision_counts_outcomes():
    approved_before = _sample("loan_decision_total", {"outcome": "approved"})
    failed_before = _sample("loan_decision_total", {"outcome": "no_valid_loan"})
    bucket_before = _sample("loan_decision_amount_bucket_total", {"bucket": "10000"})

    record_decision(Decision.approved(10000, 12))
    record_decision(Decision.failed(FailureKind.NO_VALID_LOAN, "No valid loan found!"))

    assert _sample("loan_decision_total", {"outcome": "approved"}) == approved_before + 1
    assert _sample("loan_decision_total", {"outcome": "no_valid_loan"}) == failed_before + 1
    assert _sample("loan_decision_amount_bucket_total", {"bucket": "10000"}) == bucket_before + 1


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_setup_logging_uses_settings(restore_root_logger):
    """Test level and service name are read from configuration"""
    config = Settings(_env_file=None, log_level="WARNING", service_name="loan-decision-eu")

    handler = setup_logging(config)

    assert restore_root_logger.level == logging.WARNING
    assert restore_root_logger.handlers == [handler]
    assert isinstance(handler.formatter, CustomJsonFormatter)
    assert handler.formatter.service_name == "loan-decision-eu"


def test_setup_logging_explicit_level_wins(restore_root_logger):
    config = Settings(_env_file=None, log_level="WARNING")

    setup_logging(config, level="DEBUG")

    assert restore_root_logger.level == logging.DEBUG


def test_setup_logging_defaults_to_module_settings(restore_root_logger):
    handler = setup_logging()

    assert restore_root_logger.level == logging.getLevelName(settings.log_level)
    assert handler.formatter.service_name == settings.service_name
