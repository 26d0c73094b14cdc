"""Date manipulation utilities"""

from datetime import date

from dateutil.relativedelta import relativedelta


def age_between(birth_date: date, on_date: date) -> relativedelta:
    """Calendar age as years, months and days"""
    return relativedelta(on_date, birth_date)


def fractional_years(age: relativedelta) -> float:
    """Years + months/12 + days/365"""
    return age.years + age.months / 12.0 + age.days / 365.0
