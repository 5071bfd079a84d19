# This project was developed with assistance from AI tools.
"""Affordability calculation logic.

Pure math, no I/O. Shared by the public API routes and any other caller.
Degenerate inputs never raise: they produce zeroed figures and warnings.
"""

import logging
import math

from ..schemas.affordability import (
    AffordabilityResult,
    AffordabilityWarning,
    FinancialProfile,
    LoanTerms,
)
from ..schemas.policy import DEFAULT_POLICY, LendingPolicy
from .amortization import finite_or_zero, loan_from_emi
from .foir import compute_foir, is_young_co_applicant

logger = logging.getLogger(__name__)


def clamp_down_payment(down_payment_percent: float) -> float:
    """Clamp a down-payment fraction into [0, 1]; NaN becomes 0."""
    if math.isnan(down_payment_percent):
        return 0.0
    return min(1.0, max(0.0, down_payment_percent))


def calculate_affordability(
    profile: FinancialProfile,
    terms: LoanTerms,
    policy: LendingPolicy = DEFAULT_POLICY,
) -> AffordabilityResult:
    """Turn a household profile and loan preferences into a budget envelope."""
    total_income = finite_or_zero(profile.total_income)
    obligations = max(0.0, finite_or_zero(profile.existing_obligations))
    surplus = max(0.0, total_income - obligations)

    foir = compute_foir(
        profile.employment_type,
        is_young_co_applicant(profile, policy),
        total_income,
        policy,
    )
    max_eligible_emi = surplus * foir if surplus > 0 else 0.0
    eligible_loan = loan_from_emi(max_eligible_emi, terms.interest_rate, terms.tenure_years)

    down_payment = clamp_down_payment(terms.down_payment_percent)
    financed_share = 1 - down_payment
    price_by_down_payment = eligible_loan / financed_share if financed_share > 0 else math.inf
    price_by_ltv = eligible_loan / policy.ltv_cap

    if math.isfinite(price_by_down_payment) and math.isfinite(price_by_ltv):
        affordable_price = min(price_by_down_payment, price_by_ltv)
    else:
        price_by_down_payment = finite_or_zero(price_by_down_payment)
        price_by_ltv = finite_or_zero(price_by_ltv)
        affordable_price = 0.0
    down_payment_amount = affordable_price * down_payment

    warnings: list[AffordabilityWarning] = []
    if surplus <= 0:
        warnings.append(AffordabilityWarning.OBLIGATIONS_EXCEED_INCOME)
    if max_eligible_emi == 0:
        warnings.append(AffordabilityWarning.ELIGIBLE_EMI_ZERO)
    if obligations + max_eligible_emi > total_income * policy.combined_obligation_guardrail:
        warnings.append(AffordabilityWarning.COMBINED_EMI_GUARDRAIL_BREACH)

    logger.debug(
        "Affordability: income=%.2f surplus=%.2f foir=%.2f emi=%.2f loan=%.2f price=%.2f",
        total_income,
        surplus,
        foir,
        max_eligible_emi,
        eligible_loan,
        affordable_price,
    )

    return AffordabilityResult(
        total_income=round(total_income, 2),
        surplus_income=round(surplus, 2),
        foir_applied=round(foir, 4),
        max_eligible_emi=round(max_eligible_emi, 2),
        eligible_loan_amount=round(eligible_loan, 2),
        price_by_down_payment=round(price_by_down_payment, 2),
        price_by_ltv=round(price_by_ltv, 2),
        affordable_price=round(affordable_price, 2),
        down_payment_amount=round(down_payment_amount, 2),
        warnings=tuple(warnings),
    )
