"""Personal identity code parsing and checksum validation.

Layout of an 11-digit code: GYYMMDDSSSC
- G: century and sex digit (1-2: 1800s, 3-4: 1900s, 5-8: 2000s)
- YYMMDD: birth date
- SSS: serial number
- C: check digit
"""

from datetime import date

from loan_decision.domain.exceptions import MalformedIdentityCodeError

PERSONAL_CODE_LENGTH = 11

CENTURY_BY_DIGIT = {
    1: 1800,
    2: 1800,
    3: 1900,
    4: 1900,
    5: 2000,
    6: 2000,
    7: 2000,
    8: 2000,
}

_FIRST_PASS_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
_SECOND_PASS_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


def _parse_digits(code: str, start: int, end: int) -> int:
    part = code[start:end]
    if len(part) != end - start or not (part.isascii() and part.isdigit()):
        raise MalformedIdentityCodeError(f"Invalid personal ID code: expected digits at positions {start}-{end - 1}")
    return int(part)


def parse_segment_key(code: str) -> int:
    """Integer value (0-9999) of the last four digits"""
    if len(code) < 4:
        raise MalformedIdentityCodeError("Invalid personal ID code: too short")
    return _parse_digits(code, len(code) - 4, len(code))


def parse_birth_date(code: str) -> date:
    """
    Extract birth date from the identity code.

    Raises:
        MalformedIdentityCodeError: digits missing or not a calendar date
    """
    century_digit = _parse_digits(code, 0, 1)
    century = CENTURY_BY_DIGIT.get(century_digit)
    if century is None:
        raise MalformedIdentityCodeError(f"Invalid personal ID code: unknown century digit {century_digit}")

    year = century + _parse_digits(code, 1, 3)
    month = _parse_digits(code, 3, 5)
    day = _parse_digits(code, 5, 7)

    try:
        return date(year, month, day)
    except ValueError as e:
        raise MalformedIdentityCodeError(f"Invalid personal ID code: {e}") from e


def personal_code_check_digit(first_ten: str) -> int:
    """
    Compute the check digit for the first ten digits of a personal code.

    Weighted sum modulo 11 with weights 1..9,1. A remainder of 10 triggers a
    second pass with weights 3..9,1,2,3, and a second remainder of 10 yields 0.
    """
    digits = [int(c) for c in first_ten]
    remainder = sum(d * w for d, w in zip(digits, _FIRST_PASS_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(d * w for d, w in zip(digits, _SECOND_PASS_WEIGHTS)) % 11
    return 0 if remainder == 10 else remainder


def is_valid_personal_code(code: str) -> bool:
    """Format, birth date and check digit are all correct"""
    if len(code) != PERSONAL_CODE_LENGTH or not (code.isascii() and code.isdigit()):
        return False
    try:
        parse_birth_date(code)
    except MalformedIdentityCodeError:
        return False
    return personal_code_check_digit(code[:10]) == int(code[10])


def validate_personal_code(code: str) -> None:
    if not is_valid_personal_code(code):
        raise MalformedIdentityCodeError("Invalid personal ID code!")
