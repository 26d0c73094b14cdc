"""Domain models - pure Python dataclasses representing business entities"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Country(str, Enum):
    """Country the loan is requested in.

    Unrecognised values fall back to Estonia, the home market.
    """

    ESTONIA = "Estonia"
    LATVIA = "Latvia"
    LITHUANIA = "Lithuania"

    @classmethod
    def _missing_(cls, value):
        logger.warning("Unknown loan country, falling back to Estonia", extra={"country": str(value)})
        return cls.ESTONIA


class CreditSegment(str, Enum):
    """Credit-risk bucket derived from the last four digits of the identity code"""

    DEBT = "debt"  # 0000-2499
    SEGMENT_1 = "segment_1"  # 2500-4999
    SEGMENT_2 = "segment_2"  # 5000-7499
    SEGMENT_3 = "segment_3"  # 7500-9999


class FailureKind(str, Enum):
    """Why no loan was offered"""

    MALFORMED_IDENTITY_CODE = "malformed_identity_code"
    AGE_RESTRICTED = "age_restricted"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_PERIOD = "invalid_period"
    NO_VALID_LOAN = "no_valid_loan"


class AgeRule(str, Enum):
    """Age rule an applicant failed"""

    UNDER_AGE = "under_age"
    OVER_LIFE_EXPECTANCY = "over_life_expectancy"


@dataclass(frozen=True)
class LoanRequest:
    """Single loan application, created per call"""

    identity_code: str
    requested_amount: int
    requested_period_months: int
    country: Country = Country.ESTONIA

    def __post_init__(self) -> None:
        # Accept plain strings; unknown values resolve through Country._missing_
        object.__setattr__(self, "country", Country(self.country))


@dataclass(frozen=True)
class AgeCheck:
    """Outcome of the age eligibility rules"""

    eligible: bool
    failed_rule: Optional[AgeRule] = None


@dataclass(frozen=True)
class Decision:
    """Output of the decision engine.

    Either the approved amount and period are set, or the failure and its
    message are. Never both.
    """

    approved_amount: Optional[int] = None
    approved_period_months: Optional[int] = None
    failure: Optional[FailureKind] = None
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        has_offer = self.approved_amount is not None and self.approved_period_months is not None
        has_partial_offer = (self.approved_amount is None) != (self.approved_period_months is None)
        if has_partial_offer or has_offer == (self.failure is not None):
            raise ValueError("Decision must carry either an approved offer or a failure")

    @classmethod
    def approved(cls, amount: int, period_months: int) -> "Decision":
        return cls(approved_amount=amount, approved_period_months=period_months)

    @classmethod
    def failed(cls, failure: FailureKind, message: str) -> "Decision":
        return cls(failure=failure, error_message=message)

    @property
    def is_approved(self) -> bool:
        return self.failure is None

    @property
    def is_no_valid_loan(self) -> bool:
        """Inputs were well-formed but no amount/period combination works"""
        return self.failure is FailureKind.NO_VALID_LOAN
