# This project was developed with assistance from AI tools.
"""EMI scenario tables.

Two flavours, both pure and deterministic:

- price-ratio scenarios: what buying at 70/85/100% of the affordable price
  costs each month;
- tenure x rate matrix: EMI for a fixed loan across tenure and rate variants.
"""

import math

from ..schemas.affordability import EmiScenarioRow, LoanTerms, PriceScenario
from ..schemas.policy import DEFAULT_POLICY, LendingPolicy
from .amortization import emi_from_loan, finite_or_zero
from .calculator import clamp_down_payment


def build_price_scenarios(
    affordable_price: float,
    terms: LoanTerms,
    policy: LendingPolicy = DEFAULT_POLICY,
) -> list[PriceScenario]:
    """One row per policy scenario ratio, each with its own loan and EMI."""
    if not math.isfinite(affordable_price) or affordable_price <= 0:
        return [
            PriceScenario(
                label=scenario.label,
                ratio=scenario.ratio,
                property_price=0.0,
                down_payment_amount=0.0,
                loan_amount=0.0,
                monthly_emi=0.0,
            )
            for scenario in policy.scenario_ratios
        ]

    down_payment = clamp_down_payment(terms.down_payment_percent)
    rows = []
    for scenario in policy.scenario_ratios:
        property_price = affordable_price * scenario.ratio
        down_payment_amount = property_price * down_payment
        loan_amount = property_price - down_payment_amount
        monthly_emi = emi_from_loan(loan_amount, terms.interest_rate, terms.tenure_years)
        rows.append(
            PriceScenario(
                label=scenario.label,
                ratio=scenario.ratio,
                property_price=round(property_price, 2),
                down_payment_amount=round(down_payment_amount, 2),
                loan_amount=round(loan_amount, 2),
                monthly_emi=round(monthly_emi, 2),
            )
        )
    return rows


def tenure_variants(tenure_years: int, policy: LendingPolicy = DEFAULT_POLICY) -> list[int]:
    """Selected tenure shifted by the policy offsets, clamped, unique, ascending."""
    variants = {
        min(policy.max_tenure_years, max(policy.min_tenure_years, tenure_years + offset))
        for offset in policy.tenure_offsets
    }
    return sorted(variants)


def rate_variants(base_rate: float, policy: LendingPolicy = DEFAULT_POLICY) -> list[float]:
    """Base rate minus/plus one step, rounded to 2 dp and floored at 0."""
    step = policy.rate_step
    return [
        max(finite_or_zero(round(rate, 2)), 0.0)
        for rate in (base_rate - step, base_rate, base_rate + step)
    ]


def build_emi_matrix(
    loan_amount: float,
    base_rate: float,
    tenure_years: int,
    policy: LendingPolicy = DEFAULT_POLICY,
    tenures: list[int] | None = None,
) -> list[EmiScenarioRow]:
    """Flat tenure-major list of EMIs across tenure and rate variants.

    Args:
        loan_amount: Principal to amortize.
        base_rate: Annual nominal rate percentage the rate variants centre on.
        tenure_years: Selected tenure the tenure variants centre on.
        policy: Supplies tenure bounds, offsets and the rate step.
        tenures: Explicit tenure list; replaces the offset-derived variants.
    """
    if tenures is None:
        tenure_list = tenure_variants(tenure_years, policy)
    else:
        tenure_list = sorted(set(tenures))

    rates = rate_variants(base_rate, policy)
    rows: list[EmiScenarioRow] = []
    for tenure in tenure_list:
        for rate in rates:
            rows.append(
                EmiScenarioRow(
                    tenure_years=tenure,
                    rate=rate,
                    emi=round(emi_from_loan(loan_amount, rate, tenure), 2),
                )
            )
    return rows
