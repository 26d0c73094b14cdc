"""Configuration management using Pydantic Settings"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_decision.domain.models import Country, CreditSegment


class Settings(BaseSettings):
    """Decision engine constants loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOAN_DECISION_",
        extra="ignore",
        frozen=True,
    )

    # Loan bounds (euros / months, inclusive)
    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = 12
    maximum_loan_period: int = 60

    # Credit modifiers per segment (debt segment is always 0)
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    # Age restrictions
    age_of_majority: int = 18
    life_expectancy_estonia: float = 78.0
    life_expectancy_latvia: float = 75.0
    life_expectancy_lithuania: float = 76.0

    # Personal code checksum check before parsing
    validate_personal_code: bool = True

    # Service
    service_name: str = "loan-decision"
    log_level: str = "INFO"

    @model_validator(mode="after")
    def check_bounds(self) -> "Settings":
        if self.minimum_loan_amount > self.maximum_loan_amount:
            raise ValueError("minimum_loan_amount must not exceed maximum_loan_amount")
        if self.minimum_loan_period > self.maximum_loan_period:
            raise ValueError("minimum_loan_period must not exceed maximum_loan_period")
        for name in ("segment_1_credit_modifier", "segment_2_credit_modifier", "segment_3_credit_modifier"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        return self

    def credit_modifier_for(self, segment: CreditSegment) -> int:
        """Modifier for a segment; 0 for debt"""
        return {
            CreditSegment.DEBT: 0,
            CreditSegment.SEGMENT_1: self.segment_1_credit_modifier,
            CreditSegment.SEGMENT_2: self.segment_2_credit_modifier,
            CreditSegment.SEGMENT_3: self.segment_3_credit_modifier,
        }[segment]

    def life_expectancy_for(self, country: Country) -> float:
        if country is Country.LATVIA:
            return self.life_expectancy_latvia
        if country is Country.LITHUANIA:
            return self.life_expectancy_lithuania
        return self.life_expectancy_estonia


settings = Settings()
