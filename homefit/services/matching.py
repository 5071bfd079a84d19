# This project was developed with assistance from AI tools.
"""Property matching against an affordability budget.

Two ranking strategies, selected by ``LendingPolicy.ranking_strategy``:

- ``weighted`` (primary): every listing gets a score mixing closeness to
  budget, affordability, highlights, and small bonuses for a stated
  configuration and ready possession. Sorted by score descending, cheaper
  listing first on ties.
- ``partition``: listings bucketed into within budget, within the buffer
  above budget, and beyond; the first two buckets are shown in price order,
  back-filled from the third.

Both clamp the shortlist to the policy's [min_matches, max_matches] range and
never raise. Listings are read, never modified.
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

from ..schemas.affordability import LoanTerms
from ..schemas.policy import DEFAULT_POLICY, LendingPolicy, RankingStrategy
from ..schemas.property import FitLabel, PropertyMatch, PropertyRecord
from .amortization import emi_from_loan
from .calculator import clamp_down_payment

logger = logging.getLogger(__name__)


@dataclass
class _Scored:
    record: PropertyRecord
    score: float
    fit_label: FitLabel


def clamp_match_count(count: int, policy: LendingPolicy = DEFAULT_POLICY) -> int:
    """Clamp a requested shortlist size into the policy's allowed range."""
    return min(policy.max_matches, max(policy.min_matches, count))


def _sort_price(record: PropertyRecord) -> float:
    return record.price if math.isfinite(record.price) else math.inf


def score_property(
    record: PropertyRecord,
    affordable_price: float,
    policy: LendingPolicy = DEFAULT_POLICY,
) -> tuple[float, FitLabel]:
    """Score one listing against the budget and classify its fit.

    An unknown or zero budget counts as the maximal gap (worst score).
    """
    budget = affordable_price if math.isfinite(affordable_price) else 0.0
    weights = policy.match_weights

    price_gap = record.price - budget
    within_budget = price_gap <= 0
    gap_ratio = abs(price_gap) / budget if budget > 0 else 1.0
    if not math.isfinite(gap_ratio):
        gap_ratio = 1.0

    distance_score = 1 - min(gap_ratio, 1.0)
    if within_budget:
        affordability_score = 1.0
    else:
        affordability_score = max(0.0, 1 - gap_ratio * weights.over_budget_penalty)
    highlight_score = min(len(record.highlights) / weights.highlight_normalizer, 1.0)

    bonus = 0.0
    if record.configuration:
        bonus += weights.configuration_bonus
    if "ready" in record.possession.lower():
        bonus += weights.ready_possession_bonus

    score = round(
        distance_score * weights.distance
        + affordability_score * weights.affordability
        + highlight_score * weights.highlights
        + bonus,
        4,
    )

    if within_budget:
        fit_label = FitLabel.FITS_BUDGET
    elif gap_ratio <= policy.stretch_threshold:
        fit_label = FitLabel.STRETCH
    else:
        fit_label = FitLabel.PREMIUM
    return score, fit_label


def _unique_by_id(catalogue: Iterable[PropertyRecord]) -> list[PropertyRecord]:
    """Drop repeated ids, keeping the first occurrence."""
    seen: set[str] = set()
    unique = []
    for record in catalogue:
        if record.id in seen:
            continue
        seen.add(record.id)
        unique.append(record)
    return unique


def _backfill(
    shortlisted: list[_Scored],
    pool: list[_Scored],
    minimum: int,
) -> list[_Scored]:
    """Top up a shortlist from an already-ordered pool without repeating ids."""
    if len(shortlisted) >= minimum:
        return shortlisted
    selected = {item.record.id for item in shortlisted}
    remainder = [item for item in pool if item.record.id not in selected]
    return shortlisted + remainder[: minimum - len(shortlisted)]


def _rank_weighted(scored: list[_Scored], target: int, policy: LendingPolicy) -> list[_Scored]:
    ordered = sorted(scored, key=lambda item: (-item.score, _sort_price(item.record)))
    return _backfill(ordered[:target], ordered, policy.min_matches)


def _rank_partitioned(
    scored: list[_Scored],
    affordable_price: float,
    target: int,
    policy: LendingPolicy,
) -> list[_Scored]:
    budget = affordable_price if math.isfinite(affordable_price) else 0.0
    ideal: list[_Scored] = []
    buffer: list[_Scored] = []
    beyond: list[_Scored] = []

    for item in sorted(scored, key=lambda item: _sort_price(item.record)):
        price = item.record.price
        if price <= budget:
            ideal.append(_relabel(item, FitLabel.FITS_BUDGET))
        elif price <= budget * policy.buffer_factor:
            buffer.append(_relabel(item, FitLabel.STRETCH))
        else:
            beyond.append(_relabel(item, FitLabel.STRETCH))

    combined = _backfill(ideal + buffer, beyond, policy.min_matches)
    return combined[:target]


def _relabel(item: _Scored, fit_label: FitLabel) -> _Scored:
    return replace(item, fit_label=fit_label)


def _to_match(item: _Scored, terms: LoanTerms | None) -> PropertyMatch:
    if terms is None:
        return PropertyMatch(property=item.record, fit_label=item.fit_label, score=item.score)

    down_payment = clamp_down_payment(terms.down_payment_percent)
    price = max(0.0, item.record.price) if math.isfinite(item.record.price) else 0.0
    down_payment_amount = price * down_payment
    monthly_emi = emi_from_loan(
        price - down_payment_amount, terms.interest_rate, terms.tenure_years
    )
    return PropertyMatch(
        property=item.record,
        fit_label=item.fit_label,
        score=item.score,
        monthly_emi=round(monthly_emi, 2),
        down_payment_amount=round(down_payment_amount, 2),
    )


def match_properties(
    catalogue: Iterable[PropertyRecord],
    affordable_price: float,
    target_count: int = 6,
    policy: LendingPolicy = DEFAULT_POLICY,
    terms: LoanTerms | None = None,
) -> list[PropertyMatch]:
    """Rank a catalogue against a budget and return a bounded shortlist.

    Args:
        catalogue: Listings to rank. Not modified.
        affordable_price: Budget from the affordability calculator.
        target_count: Requested shortlist size, clamped to the policy range.
        policy: Supplies weights, thresholds, strategy and size bounds.
        terms: When given, each match carries its own down payment and EMI.

    Returns:
        At most ``clamp_match_count(target_count)`` matches with unique ids,
        or an empty list for an empty catalogue.
    """
    records = _unique_by_id(catalogue)
    if not records:
        return []

    target = clamp_match_count(target_count, policy)
    scored = []
    for record in records:
        score, fit_label = score_property(record, affordable_price, policy)
        scored.append(_Scored(record=record, score=score, fit_label=fit_label))

    if policy.ranking_strategy == RankingStrategy.PARTITION:
        ranked = _rank_partitioned(scored, affordable_price, target, policy)
    else:
        ranked = _rank_weighted(scored, target, policy)

    logger.debug(
        "Matched %d of %d listings (strategy=%s, budget=%.2f)",
        len(ranked),
        len(records),
        policy.ranking_strategy.value,
        affordable_price,
    )
    return [_to_match(item, terms) for item in ranked]
