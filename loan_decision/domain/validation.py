"""Request validation against business rules"""

from datetime import date

from loan_decision.config import Settings
from loan_decision.domain.eligibility import check_age_eligibility
from loan_decision.domain.exceptions import AgeRestrictedError, InvalidLoanAmountError, InvalidLoanPeriodError
from loan_decision.domain.models import LoanRequest


def validate_request(request: LoanRequest, birth_date: date, settings: Settings, today: date) -> None:
    """
    Verify the request, raising on the first violated rule.

    Order: age eligibility, amount bounds, period bounds. Bounds are inclusive.
    """
    age_check = check_age_eligibility(
        birth_date,
        request.requested_period_months,
        request.country,
        settings,
        today,
    )
    if not age_check.eligible:
        raise AgeRestrictedError("Loan cannot be issued due to age restrictions!")

    if not settings.minimum_loan_amount <= request.requested_amount <= settings.maximum_loan_amount:
        raise InvalidLoanAmountError("Invalid loan amount!")

    if not settings.minimum_loan_period <= request.requested_period_months <= settings.maximum_loan_period:
        raise InvalidLoanPeriodError("Invalid loan period!")
