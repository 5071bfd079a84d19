# This project was developed with assistance from AI tools.
"""Lending policy configuration.

Every constant the engine uses (FOIR ceilings, bonuses, LTV cap, tenure
bounds, scenario ratios, matching weights) lives here so one engine can
serve every product variant.
"""

import enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EmploymentType(str, enum.Enum):
    SALARIED = "salaried"
    SELF_EMPLOYED = "self_employed"


class RankingStrategy(str, enum.Enum):
    """How the matcher orders a catalogue against a budget."""

    WEIGHTED = "weighted"
    PARTITION = "partition"


class ScenarioRatio(BaseModel):
    """One row of the price-ratio scenario table."""

    model_config = ConfigDict(frozen=True)

    label: str
    ratio: float = Field(gt=0)


class MatchWeights(BaseModel):
    """Weights and bonuses for the weighted property scorer."""

    model_config = ConfigDict(frozen=True)

    distance: float = 0.55
    affordability: float = 0.25
    highlights: float = 0.10
    configuration_bonus: float = 0.10
    ready_possession_bonus: float = 0.10
    over_budget_penalty: float = 1.5
    highlight_normalizer: int = Field(default=5, gt=0)


class LendingPolicy(BaseModel):
    """Policy constants for one lending product variant."""

    model_config = ConfigDict(frozen=True)

    # -- FOIR --
    base_foir: dict[EmploymentType, float] = Field(
        default_factory=lambda: {
            EmploymentType.SALARIED: 0.50,
            EmploymentType.SELF_EMPLOYED: 0.45,
        }
    )
    young_co_applicant_bonus: float = 0.10
    young_co_applicant_age: int = 35
    min_co_applicant_income: float = Field(
        default=0.0,
        ge=0,
        description="Co-applicant monthly income needed for the young co-applicant bonus.",
    )
    high_income_threshold: float = Field(
        default=250_000.0,
        description="Household monthly income (INR) at which the high income bonus applies.",
    )
    high_income_bonus: float = 0.05
    max_foir: float = Field(default=0.60, gt=0, le=1)

    # -- Price constraints --
    ltv_cap: float = Field(default=0.75, gt=0, le=1)
    combined_obligation_guardrail: float = Field(default=0.80, gt=0)

    # -- Tenure bounds for scenario variants --
    min_tenure_years: int = Field(default=15, gt=0)
    max_tenure_years: int = Field(default=30, gt=0)

    # -- EMI scenarios --
    scenario_ratios: tuple[ScenarioRatio, ...] = (
        ScenarioRatio(label="Comfort buy (70%)", ratio=0.70),
        ScenarioRatio(label="Sweet spot (85%)", ratio=0.85),
        ScenarioRatio(label="Max stretch (100%)", ratio=1.0),
    )
    tenure_offsets: tuple[int, ...] = (-10, -5, 0, 5, 10)
    rate_step: float = Field(default=0.5, ge=0)

    # -- Matching --
    ranking_strategy: RankingStrategy = RankingStrategy.WEIGHTED
    match_weights: MatchWeights = Field(default_factory=MatchWeights)
    stretch_threshold: float = Field(default=0.20, ge=0)
    buffer_factor: float = Field(default=1.05, ge=1)
    min_matches: int = Field(default=3, ge=0)
    max_matches: int = Field(default=12, gt=0)

    # -- Returns projection --
    default_rent_yield: float = 0.045
    default_appreciation: float = 0.08

    @model_validator(mode="after")
    def _check_bounds(self) -> "LendingPolicy":
        if self.min_tenure_years > self.max_tenure_years:
            raise ValueError("min_tenure_years must not exceed max_tenure_years")
        if self.min_matches > self.max_matches:
            raise ValueError("min_matches must not exceed max_matches")
        missing = set(EmploymentType) - set(self.base_foir)
        if missing:
            names = sorted(m.value for m in missing)
            raise ValueError(f"base_foir is missing employment types: {names}")
        return self


DEFAULT_POLICY = LendingPolicy()
