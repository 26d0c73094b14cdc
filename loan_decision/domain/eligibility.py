"""Age eligibility rules for loan applicants"""

from datetime import date

from loan_decision.config import Settings
from loan_decision.domain.models import AgeCheck, AgeRule, Country
from loan_decision.utils.date_utils import age_between, fractional_years


def is_under_age(birth_date: date, today: date, settings: Settings) -> bool:
    return age_between(birth_date, today).years < settings.age_of_majority


def is_over_life_expectancy(
    birth_date: date,
    today: date,
    period_months: int,
    country: Country,
    settings: Settings,
) -> bool:
    """
    Check whether the applicant would outlive the loan's country life expectancy.

    Only whole years of the loan period count (period // 12), while the
    applicant's age is fractional.
    """
    age_in_years = fractional_years(age_between(birth_date, today))
    period_in_years = period_months // 12
    return age_in_years + period_in_years > settings.life_expectancy_for(country)


def check_age_eligibility(
    birth_date: date,
    period_months: int,
    country: Country,
    settings: Settings,
    today: date,
) -> AgeCheck:
    """
    Apply both age rules; the first failed rule is reported.

    Rules:
    - Whole-year age must reach the age of majority
    - Fractional age plus loan period in years must not exceed life expectancy
    """
    if is_under_age(birth_date, today, settings):
        return AgeCheck(eligible=False, failed_rule=AgeRule.UNDER_AGE)
    if is_over_life_expectancy(birth_date, today, period_months, country, settings):
        return AgeCheck(eligible=False, failed_rule=AgeRule.OVER_LIFE_EXPECTANCY)
    return AgeCheck(eligible=True)
