"""Domain-specific exceptions"""

from loan_decision.domain.models import FailureKind


class DomainException(Exception):
    """Base exception for domain layer"""

    kind: FailureKind


class MalformedIdentityCodeError(DomainException):
    """Identity code is not a parseable, valid personal code"""

    kind = FailureKind.MALFORMED_IDENTITY_CODE


class AgeRestrictedError(DomainException):
    """Applicant is under age or too old at loan maturity"""

    kind = FailureKind.AGE_RESTRICTED


class InvalidLoanAmountError(DomainException):
    """Requested amount is outside the configured bounds"""

    kind = FailureKind.INVALID_AMOUNT


class InvalidLoanPeriodError(DomainException):
    """Requested period is outside the configured bounds"""

    kind = FailureKind.INVALID_PERIOD


class NoValidLoanError(DomainException):
    """No amount/period combination can be approved"""

    kind = FailureKind.NO_VALID_LOAN
