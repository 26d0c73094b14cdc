"""Loan decision engine - orchestrates validation, segmentation and the loan search"""

import time
from datetime import date
from typing import Callable, Optional, Union

from loan_decision.config import Settings, settings as default_settings
from loan_decision.domain.exceptions import DomainException, NoValidLoanError
from loan_decision.domain.identity_code import parse_birth_date, parse_segment_key, validate_personal_code
from loan_decision.domain.models import Country, Decision, LoanRequest
from loan_decision.domain.optimizer import find_max_loan
from loan_decision.domain.segments import resolve_credit_modifier
from loan_decision.domain.validation import validate_request
from loan_decision.infrastructure.observability.logging import log_decision
from loan_decision.infrastructure.observability.metrics import record_decision


class DecisionEngine:
    """
    Calculates the maximum approvable loan amount and period for an applicant.

    The engine holds only read-only settings and a clock, so one instance can
    serve concurrent calls. Every failure is returned as a failed Decision.
    """

    def __init__(
        self,
        settings: Settings = default_settings,
        clock: Callable[[], date] = date.today,
        validate_checksum: Optional[bool] = None,
    ) -> None:
        self.settings = settings
        self.clock = clock
        self.validate_checksum = settings.validate_personal_code if validate_checksum is None else validate_checksum

    def evaluate(
        self,
        identity_code: str,
        requested_amount: int,
        requested_period_months: int,
        country: Union[Country, str] = Country.ESTONIA,
    ) -> Decision:
        request = LoanRequest(
            identity_code=identity_code,
            requested_amount=requested_amount,
            requested_period_months=requested_period_months,
            country=country,
        )
        return self.evaluate_request(request)

    def evaluate_request(self, request: LoanRequest) -> Decision:
        """
        Make a loan decision.

        Flow:
        1. Check the personal code checksum (when enabled)
        2. Parse birth date and validate age, amount and period
        3. Resolve the credit modifier (debt segment → no valid loan)
        4. Search for the largest loan from the requested period upward
        """
        start_time = time.perf_counter()

        try:
            decision = self._decide(request)
        except DomainException as e:
            decision = Decision.failed(e.kind, str(e))

        duration_ms = (time.perf_counter() - start_time) * 1000
        record_decision(decision)
        log_decision(request, decision, duration_ms)
        return decision

    def _decide(self, request: LoanRequest) -> Decision:
        if self.validate_checksum:
            validate_personal_code(request.identity_code)

        birth_date = parse_birth_date(request.identity_code)
        validate_request(request, birth_date, self.settings, self.clock())

        credit_modifier = resolve_credit_modifier(parse_segment_key(request.identity_code), self.settings)
        if credit_modifier == 0:
            raise NoValidLoanError("No valid loan found!")

        amount, period = find_max_loan(credit_modifier, request.requested_period_months, self.settings)
        return Decision.approved(amount, period)


def evaluate(
    identity_code: str,
    requested_amount: int,
    requested_period_months: int,
    country: Union[Country, str] = Country.ESTONIA,
) -> Decision:
    """Evaluate with default settings and today's date"""
    return DecisionEngine().evaluate(identity_code, requested_amount, requested_period_months, country)
