# This project was developed with assistance from AI tools.
"""Public API routes -- no authentication required.

Thin wrappers: validate the request, pick the policy variant, call the pure
engine, shape the response.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.config import settings
from ..schemas.affordability import EmiScenarioRow, LoanTerms, ReturnsProjection
from ..schemas.calculator import (
    AffordabilityReport,
    AffordabilityRequest,
    EmiTableRequest,
    PropertyMatchRequest,
    PropertyMatchResponse,
    ReturnsRequest,
)
from ..schemas.policy import LendingPolicy
from ..schemas.property import PropertyRecord
from ..services.calculator import calculate_affordability
from ..services.catalogue import PropertyCatalogue, get_catalogue
from ..services.formatting import format_currency
from ..services.matching import match_properties
from ..services.policy import get_policies, get_policy
from ..services.returns import project_returns
from ..services.scenarios import build_emi_matrix, build_price_scenarios

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_policy(variant: str | None) -> tuple[str, LendingPolicy]:
    name = variant or settings.DEFAULT_POLICY_VARIANT
    try:
        return name, get_policy(name)
    except KeyError:
        logger.warning("Unknown policy variant requested: %s", name)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown policy variant '{name}'",
        ) from None


@router.get("/policies", response_model=dict[str, LendingPolicy])
async def list_policies() -> dict[str, LendingPolicy]:
    """Return every configured lending policy variant."""
    return get_policies()


@router.post("/affordability", response_model=AffordabilityReport)
async def affordability_report(req: AffordabilityRequest) -> AffordabilityReport:
    """Budget envelope, price-ratio scenarios and EMI table for a household."""
    variant, policy = _resolve_policy(req.policy_variant)
    terms = req.loan.to_terms()
    result = calculate_affordability(req.income.to_profile(), terms, policy)

    headline = (
        f"Eligible loan {format_currency(result.eligible_loan_amount)} and target budget "
        f"{format_currency(result.affordable_price)}."
    )
    return AffordabilityReport(
        policy_variant=variant,
        result=result,
        price_scenarios=build_price_scenarios(result.affordable_price, terms, policy),
        emi_table=build_emi_matrix(
            result.eligible_loan_amount, terms.interest_rate, terms.tenure_years, policy
        ),
        headline=headline,
    )


@router.post("/emi-table", response_model=list[EmiScenarioRow])
async def emi_table(req: EmiTableRequest) -> list[EmiScenarioRow]:
    """EMI for a fixed loan across tenure and rate variants."""
    _, policy = _resolve_policy(req.policy_variant)
    return build_emi_matrix(
        req.loan_amount, req.interest_rate, req.tenure_years, policy, tenures=req.tenures
    )


@router.get("/properties", response_model=list[PropertyRecord])
async def list_properties(
    limit: int | None = Query(default=None, ge=1, le=100),
    catalogue: PropertyCatalogue = Depends(get_catalogue),
) -> list[PropertyRecord]:
    """Catalogue listings, cheapest first."""
    return catalogue.list_properties(limit or settings.CATALOGUE_LIMIT)


@router.post("/property-matches", response_model=PropertyMatchResponse)
async def property_matches(
    req: PropertyMatchRequest,
    catalogue: PropertyCatalogue = Depends(get_catalogue),
) -> PropertyMatchResponse:
    """Rank the catalogue against an affordable price."""
    variant, policy = _resolve_policy(req.policy_variant)
    matches = match_properties(
        catalogue.list_properties(),
        req.affordable_price,
        req.target_count or settings.DEFAULT_MATCH_COUNT,
        policy,
        terms=req.loan.to_terms() if req.loan else None,
    )
    return PropertyMatchResponse(policy_variant=variant, matches=matches)


@router.post("/returns", response_model=ReturnsProjection)
async def returns_projection(req: ReturnsRequest) -> ReturnsProjection:
    """Yearly rent and appreciation projection for a price."""
    _, policy = _resolve_policy(req.policy_variant)
    terms = LoanTerms(rent_yield=req.rent_yield, appreciation=req.appreciation)
    return project_returns(req.price, terms, policy)
