# This project was developed with assistance from AI tools.
"""Public API request/response schemas.

Requests carry the form-layer validation the engine relies on: ranges per
field, plus cross-field household rules in model validators.
"""

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from .affordability import (
    AffordabilityResult,
    EmiScenarioRow,
    FinancialProfile,
    LoanTerms,
    PriceScenario,
)
from .policy import EmploymentType
from .property import PropertyMatch

# Existing EMIs may not exceed this share of household income
MAX_EXISTING_OBLIGATION_SHARE = 0.8
MAX_AGE_AT_MATURITY = 70
MAX_EXPLICIT_TENURES = 10


class IncomeDetails(BaseModel):
    """Household income as entered by the buyer (monthly INR)."""

    employment_type: EmploymentType = EmploymentType.SALARIED
    monthly_income: float = Field(gt=0)
    existing_emis: float = Field(default=0, ge=0)
    age: int = Field(default=30, ge=21, le=65)
    include_co_applicant: bool = False
    co_applicant_income: float = Field(default=0, ge=0)
    co_applicant_age: int | None = None

    @model_validator(mode="after")
    def _check_household(self) -> "IncomeDetails":
        if self.include_co_applicant:
            if self.co_applicant_income <= 0:
                raise ValueError("Add co-applicant income or remove the co-applicant")
            if self.co_applicant_age is None or not 21 <= self.co_applicant_age <= 65:
                raise ValueError("Co-applicant age must be between 21 and 65")

        total = self.monthly_income + (
            self.co_applicant_income if self.include_co_applicant else 0
        )
        if self.existing_emis > total * MAX_EXISTING_OBLIGATION_SHARE:
            raise ValueError("Existing EMIs should not exceed 80% of combined income")
        return self

    def to_profile(self) -> FinancialProfile:
        return FinancialProfile(
            primary_income=self.monthly_income,
            employment_type=self.employment_type,
            existing_obligations=self.existing_emis,
            applicant_age=self.age,
            include_co_applicant=self.include_co_applicant,
            co_applicant_income=self.co_applicant_income,
            co_applicant_age=self.co_applicant_age,
        )


class LoanPreferences(BaseModel):
    """Loan structure chosen by the buyer."""

    tenure_years: int = Field(default=20, ge=15, le=30)
    down_payment_percent: float = Field(default=0.25, ge=0.2, le=0.5)
    interest_rate: float = Field(default=8.5, ge=0.1, le=15)

    def to_terms(self) -> LoanTerms:
        return LoanTerms(
            tenure_years=self.tenure_years,
            down_payment_percent=self.down_payment_percent,
            interest_rate=self.interest_rate,
        )


class AffordabilityRequest(BaseModel):
    """Input for the affordability report."""

    income: IncomeDetails
    loan: LoanPreferences = Field(default_factory=LoanPreferences)
    policy_variant: str | None = None

    @model_validator(mode="after")
    def _check_age_at_maturity(self) -> "AffordabilityRequest":
        if self.income.age + self.loan.tenure_years > MAX_AGE_AT_MATURITY:
            raise ValueError("Age plus tenure should not exceed 70 years")
        return self


class AffordabilityReport(BaseModel):
    """Budget envelope plus the scenario tables derived from it."""

    policy_variant: str
    result: AffordabilityResult
    price_scenarios: list[PriceScenario]
    emi_table: list[EmiScenarioRow]
    headline: str


class EmiTableRequest(BaseModel):
    """Input for a tenure x rate EMI table."""

    loan_amount: float = Field(ge=0)
    interest_rate: float = Field(default=8.5, ge=0, le=15)
    tenure_years: int = Field(default=20, ge=1, le=40)
    tenures: list[Annotated[int, Field(ge=1, le=40)]] | None = Field(
        default=None,
        max_length=MAX_EXPLICIT_TENURES,
        description="Explicit tenures; replaces the variants derived from tenure_years.",
    )
    policy_variant: str | None = None


class PropertyMatchRequest(BaseModel):
    """Input for ranking the catalogue against a budget."""

    affordable_price: float = Field(ge=0)
    target_count: int | None = Field(default=None, ge=1, le=50)
    loan: LoanPreferences | None = None
    policy_variant: str | None = None


class PropertyMatchResponse(BaseModel):
    """Ranked shortlist."""

    policy_variant: str
    matches: list[PropertyMatch]


class ReturnsRequest(BaseModel):
    """Input for the rent/appreciation projection."""

    price: float = Field(gt=0)
    rent_yield: float | None = Field(default=None, ge=0, le=1)
    appreciation: float | None = Field(default=None, ge=-1, le=1)
    policy_variant: str | None = None
