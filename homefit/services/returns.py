# This project was developed with assistance from AI tools.
"""Rental yield and appreciation projection for a property price."""

import math

from ..schemas.affordability import LoanTerms, ReturnsProjection
from ..schemas.policy import DEFAULT_POLICY, LendingPolicy


def project_returns(
    price: float,
    terms: LoanTerms,
    policy: LendingPolicy = DEFAULT_POLICY,
) -> ReturnsProjection:
    """Yearly rent and appreciation on ``price``.

    Missing yield/appreciation on the terms fall back to the policy
    defaults. A non-finite or non-positive price projects to zero.
    """
    rent_yield = terms.rent_yield if terms.rent_yield is not None else policy.default_rent_yield
    appreciation = (
        terms.appreciation if terms.appreciation is not None else policy.default_appreciation
    )
    base = price if math.isfinite(price) and price > 0 else 0.0

    annual_rent = base * rent_yield
    annual_appreciation = base * appreciation
    return ReturnsProjection(
        price=round(base, 2),
        rent_yield=rent_yield,
        appreciation=appreciation,
        annual_rent=round(annual_rent, 2),
        annual_appreciation=round(annual_appreciation, 2),
        total_annual_return=round(annual_rent + annual_appreciation, 2),
    )
