"""Search for the largest approvable loan"""

from loan_decision.config import Settings
from loan_decision.domain.exceptions import NoValidLoanError


def highest_valid_loan_amount(credit_modifier: int, period_months: int) -> int:
    """Capacity: the largest amount the segment supports for a period"""
    return credit_modifier * period_months


def find_max_loan(credit_modifier: int, requested_period: int, settings: Settings) -> tuple[int, int]:
    """
    Find the smallest period >= requested whose capacity reaches the minimum
    loan amount, then cap the amount at the maximum.

    The period is only ever increased, and never past maximum_loan_period.

    Returns: (approved_amount, approved_period_months)

    Example:
        modifier 100, requested 12 months, minimum 2000
        capacity(12) = 1200 < 2000 → capacity(20) = 2000 → (2000, 20)
    """
    if credit_modifier <= 0:
        raise NoValidLoanError("No valid loan found!")

    for period in range(requested_period, settings.maximum_loan_period + 1):
        capacity = highest_valid_loan_amount(credit_modifier, period)
        if capacity >= settings.minimum_loan_amount:
            return min(settings.maximum_loan_amount, capacity), period

    raise NoValidLoanError("No valid loan found!")
