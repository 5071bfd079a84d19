# This project was developed with assistance from AI tools.
"""Engine inputs and outputs for affordability and EMI scenarios.

These models carry no range constraints: the engine clamps degenerate values
itself. Range validation belongs to the request schemas in calculator.py.
"""

import enum

from pydantic import BaseModel, ConfigDict

from .policy import EmploymentType


class FinancialProfile(BaseModel):
    """Household income and obligations, all amounts monthly."""

    model_config = ConfigDict(frozen=True)

    primary_income: float
    employment_type: EmploymentType = EmploymentType.SALARIED
    existing_obligations: float = 0.0
    applicant_age: int | None = None
    include_co_applicant: bool = False
    co_applicant_income: float = 0.0
    co_applicant_age: int | None = None
    # Explicit override; derived from the co-applicant fields when None.
    has_young_co_applicant: bool | None = None

    @property
    def total_income(self) -> float:
        co_income = self.co_applicant_income if self.include_co_applicant else 0.0
        return max(0.0, self.primary_income) + max(0.0, co_income)


class LoanTerms(BaseModel):
    """Loan preferences. Rate is an annual nominal percentage (8.5 == 8.5%)."""

    model_config = ConfigDict(frozen=True)

    tenure_years: int = 20
    down_payment_percent: float = 0.25
    interest_rate: float = 8.5
    # ROI extension, ignored by the affordability calculator
    rent_yield: float | None = None
    appreciation: float | None = None


class AffordabilityWarning(str, enum.Enum):
    OBLIGATIONS_EXCEED_INCOME = "obligations_exceed_income"
    ELIGIBLE_EMI_ZERO = "eligible_emi_zero"
    COMBINED_EMI_GUARDRAIL_BREACH = "combined_emi_guardrail_breach"


class AffordabilityResult(BaseModel):
    """Budget envelope for one profile. Every figure is finite."""

    model_config = ConfigDict(frozen=True)

    total_income: float
    surplus_income: float
    foir_applied: float
    max_eligible_emi: float
    eligible_loan_amount: float
    price_by_down_payment: float
    price_by_ltv: float
    affordable_price: float
    down_payment_amount: float
    warnings: tuple[AffordabilityWarning, ...] = ()


class EmiScenarioRow(BaseModel):
    """One cell of the tenure x rate EMI matrix."""

    model_config = ConfigDict(frozen=True)

    tenure_years: int
    rate: float
    emi: float


class PriceScenario(BaseModel):
    """EMI outcome for buying at a fraction of the affordable price."""

    model_config = ConfigDict(frozen=True)

    label: str
    ratio: float
    property_price: float
    down_payment_amount: float
    loan_amount: float
    monthly_emi: float


class ReturnsProjection(BaseModel):
    """Yearly rental and appreciation gains for a property price."""

    model_config = ConfigDict(frozen=True)

    price: float
    rent_yield: float
    appreciation: float
    annual_rent: float
    annual_appreciation: float
    total_annual_return: float
