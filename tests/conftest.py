"""Pytest fixtures for testing"""

import pytest
from datetime import date
from loan_decision.config import Settings
from loan_decision.domain.identity_code import personal_code_check_digit
from loan_decision.engine import DecisionEngine


# Fixed evaluation date so ages are deterministic
TODAY = date(2024, 6, 1)

# Applicants born 1990-01-01, one per credit segment (last four digits)
DEBT_CODE = "39001011008"  # 1008
SEGMENT_1_CODE = "39001012506"  # 2506
SEGMENT_2_CODE = "39001015007"  # 5007
SEGMENT_3_CODE = "39001018009"  # 8009


def make_code(first_ten: str) -> str:
    """Append a correct check digit to the first ten digits"""
    return first_ten + str(personal_code_check_digit(first_ten))


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def settings() -> Settings:
    """Default constants, ignoring any local .env file"""
    return Settings(_env_file=None)


@pytest.fixture
def engine(settings: Settings) -> DecisionEngine:
    """Engine with default constants and a fixed clock"""
    return DecisionEngine(settings=settings, clock=lambda: TODAY)


@pytest.fixture
def code_builder():
    return make_code


@pytest.fixture
def segment_codes() -> dict[str, str]:
    return {
        "debt": DEBT_CODE,
        "segment_1": SEGMENT_1_CODE,
        "segment_2": SEGMENT_2_CODE,
        "segment_3": SEGMENT_3_CODE,
    }
