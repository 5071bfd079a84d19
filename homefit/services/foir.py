# This project was developed with assistance from AI tools.
"""Fixed Obligation to Income Ratio (FOIR) policy.

The FOIR ceiling is the share of household income a lender lets go towards
all fixed obligations, the new loan's EMI included.
"""

from ..schemas.affordability import FinancialProfile
from ..schemas.policy import DEFAULT_POLICY, EmploymentType, LendingPolicy


def is_young_co_applicant(
    profile: FinancialProfile,
    policy: LendingPolicy = DEFAULT_POLICY,
) -> bool:
    """Whether the profile qualifies for the young co-applicant bonus.

    Only an included co-applicant can qualify. For one, an explicit
    ``has_young_co_applicant`` on the profile decides; otherwise the
    co-applicant must be at or below the policy age and earn at least the
    policy's minimum co-applicant income.
    """
    if not profile.include_co_applicant:
        return False
    if profile.has_young_co_applicant is not None:
        return profile.has_young_co_applicant
    if profile.co_applicant_age is None:
        return False
    return (
        profile.co_applicant_age <= policy.young_co_applicant_age
        and profile.co_applicant_income >= policy.min_co_applicant_income
    )


def compute_foir(
    employment_type: EmploymentType,
    has_young_co_applicant: bool,
    total_income: float,
    policy: LendingPolicy = DEFAULT_POLICY,
) -> float:
    """Applicable FOIR ceiling as a fraction.

    Bonuses are summed onto the employment base first; only the final value
    is capped at ``policy.max_foir``.
    """
    foir = policy.base_foir[EmploymentType(employment_type)]
    if has_young_co_applicant:
        foir += policy.young_co_applicant_bonus
    if total_income >= policy.high_income_threshold:
        foir += policy.high_income_bonus
    return min(policy.max_foir, foir)
