# This project was developed with assistance from AI tools.
"""Tests for the affordability calculator."""

import itertools
import math

import pytest

from homefit.schemas.affordability import AffordabilityWarning, FinancialProfile, LoanTerms
from homefit.schemas.policy import EmploymentType
from homefit.services.amortization import loan_from_emi
from homefit.services.calculator import calculate_affordability
from homefit.services.policy import build_policy

NUMERIC_FIELDS = (
    "total_income",
    "surplus_income",
    "foir_applied",
    "max_eligible_emi",
    "eligible_loan_amount",
    "price_by_down_payment",
    "price_by_ltv",
    "affordable_price",
    "down_payment_amount",
)


def _terms(**overrides) -> LoanTerms:
    fields = {"tenure_years": 20, "down_payment_percent": 0.25, "interest_rate": 8.5}
    fields.update(overrides)
    return LoanTerms(**fields)


# ---------------------------------------------------------------------------
# Reference scenario
# ---------------------------------------------------------------------------


class TestSalariedReference:
    """1.2 lakh/month salaried, no co-applicant, no existing EMIs."""

    @pytest.fixture
    def result(self):
        profile = FinancialProfile(primary_income=120_000, employment_type=EmploymentType.SALARIED)
        return calculate_affordability(profile, _terms())

    def test_foir(self, result):
        assert result.foir_applied == pytest.approx(0.50)

    def test_max_eligible_emi(self, result):
        assert result.max_eligible_emi == pytest.approx(60_000)

    def test_eligible_loan(self, result):
        assert result.eligible_loan_amount == pytest.approx(6_914_000, rel=0.01)

    def test_affordable_price_is_min_of_bounds(self, result):
        loan = loan_from_emi(60_000, 8.5, 20)
        expected = min(loan / 0.75, loan / (1 - 0.25))
        assert result.affordable_price == pytest.approx(expected, abs=0.01)
        assert result.affordable_price <= result.price_by_down_payment
        assert result.affordable_price <= result.price_by_ltv

    def test_down_payment_amount(self, result):
        assert result.down_payment_amount == pytest.approx(result.affordable_price * 0.25, abs=0.01)

    def test_no_warnings(self, result):
        assert result.warnings == ()

    def test_total_and_surplus(self, result):
        assert result.total_income == 120_000
        assert result.surplus_income == 120_000


# ---------------------------------------------------------------------------
# Price bounds
# ---------------------------------------------------------------------------


class TestPriceBounds:
    def test_high_down_payment_bound_by_ltv(self):
        """50% down -> down-payment bound is looser, LTV cap wins."""
        profile = FinancialProfile(primary_income=100_000)
        result = calculate_affordability(profile, _terms(down_payment_percent=0.5))
        assert result.price_by_down_payment > result.price_by_ltv
        assert result.affordable_price == result.price_by_ltv

    def test_low_down_payment_bound_by_down_payment(self):
        """20% down against a 75% LTV cap -> down-payment bound wins."""
        profile = FinancialProfile(primary_income=100_000)
        result = calculate_affordability(profile, _terms(down_payment_percent=0.2))
        assert result.price_by_down_payment < result.price_by_ltv
        assert result.affordable_price == result.price_by_down_payment

    def test_ltv_cap_from_policy(self):
        policy = build_policy({"ltv_cap": 0.8})
        profile = FinancialProfile(primary_income=100_000)
        result = calculate_affordability(profile, _terms(down_payment_percent=0.5), policy)
        assert result.price_by_ltv == pytest.approx(result.eligible_loan_amount / 0.8, abs=0.05)

    def test_full_down_payment_zeroes_price(self):
        """A 100% down payment has no finite down-payment bound -> price 0."""
        profile = FinancialProfile(primary_income=100_000)
        result = calculate_affordability(profile, _terms(down_payment_percent=1.0))
        assert result.affordable_price == 0
        assert result.down_payment_amount == 0
        assert all(math.isfinite(getattr(result, name)) for name in NUMERIC_FIELDS)


# ---------------------------------------------------------------------------
# Household composition
# ---------------------------------------------------------------------------


class TestHousehold:
    def test_included_co_applicant_income_counts(self):
        profile = FinancialProfile(
            primary_income=80_000,
            include_co_applicant=True,
            co_applicant_income=40_000,
            co_applicant_age=30,
        )
        result = calculate_affordability(profile, _terms())
        assert result.total_income == 120_000
        assert result.foir_applied == pytest.approx(0.60)

    def test_excluded_co_applicant_income_ignored(self):
        profile = FinancialProfile(
            primary_income=80_000,
            include_co_applicant=False,
            co_applicant_income=40_000,
            co_applicant_age=30,
        )
        result = calculate_affordability(profile, _terms())
        assert result.total_income == 80_000
        assert result.foir_applied == pytest.approx(0.50)

    def test_young_flag_without_co_applicant_gets_no_bonus(self):
        profile = FinancialProfile(
            primary_income=100_000, include_co_applicant=False, has_young_co_applicant=True
        )
        result = calculate_affordability(profile, _terms())
        assert result.total_income == 100_000
        assert result.foir_applied == pytest.approx(0.50)
        assert result.max_eligible_emi == pytest.approx(50_000)

    def test_high_income_bonus(self):
        profile = FinancialProfile(primary_income=300_000)
        result = calculate_affordability(profile, _terms())
        assert result.foir_applied == pytest.approx(0.55)

    def test_self_employed(self):
        profile = FinancialProfile(
            primary_income=100_000, employment_type=EmploymentType.SELF_EMPLOYED
        )
        result = calculate_affordability(profile, _terms())
        assert result.max_eligible_emi == pytest.approx(45_000)

    def test_obligations_reduce_surplus(self):
        profile = FinancialProfile(primary_income=100_000, existing_obligations=20_000)
        result = calculate_affordability(profile, _terms())
        assert result.surplus_income == 80_000
        assert result.max_eligible_emi == pytest.approx(40_000)


# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------


class TestWarnings:
    def test_obligations_exceed_income(self):
        """Every warning fires, in order, when debts exceed income."""
        profile = FinancialProfile(primary_income=50_000, existing_obligations=60_000)
        result = calculate_affordability(profile, _terms())
        assert result.warnings == (
            AffordabilityWarning.OBLIGATIONS_EXCEED_INCOME,
            AffordabilityWarning.ELIGIBLE_EMI_ZERO,
            AffordabilityWarning.COMBINED_EMI_GUARDRAIL_BREACH,
        )
        assert result.max_eligible_emi == 0
        assert result.affordable_price == 0

    def test_guardrail_only(self):
        """70k obligations + 15k new EMI > 80% of 1 lakh."""
        profile = FinancialProfile(primary_income=100_000, existing_obligations=70_000)
        result = calculate_affordability(profile, _terms())
        assert result.warnings == (AffordabilityWarning.COMBINED_EMI_GUARDRAIL_BREACH,)

    def test_guardrail_not_breached(self):
        profile = FinancialProfile(primary_income=100_000, existing_obligations=50_000)
        result = calculate_affordability(profile, _terms())
        assert result.warnings == ()

    def test_zero_income(self):
        profile = FinancialProfile(primary_income=0)
        result = calculate_affordability(profile, _terms())
        assert result.warnings == (
            AffordabilityWarning.OBLIGATIONS_EXCEED_INCOME,
            AffordabilityWarning.ELIGIBLE_EMI_ZERO,
        )

    def test_warnings_serialize_as_identifiers(self):
        profile = FinancialProfile(primary_income=0)
        dumped = calculate_affordability(profile, _terms()).model_dump(mode="json")
        assert dumped["warnings"] == ["obligations_exceed_income", "eligible_emi_zero"]


# ---------------------------------------------------------------------------
# Degenerate inputs
# ---------------------------------------------------------------------------


class TestDegenerateInputs:
    @pytest.mark.parametrize(
        "income,obligation_factor,down_payment",
        list(itertools.product([0, 1, 1e9], [0, 1, 2], [0.20, 0.50])),
    )
    def test_always_finite(self, income, obligation_factor, down_payment):
        profile = FinancialProfile(
            primary_income=income, existing_obligations=income * obligation_factor
        )
        result = calculate_affordability(profile, _terms(down_payment_percent=down_payment))
        for name in NUMERIC_FIELDS:
            assert math.isfinite(getattr(result, name)), name
        assert result.affordable_price <= result.price_by_down_payment
        assert result.affordable_price <= result.price_by_ltv

    def test_negative_inputs_clamped(self):
        profile = FinancialProfile(primary_income=-10_000, existing_obligations=-5_000)
        result = calculate_affordability(profile, _terms(interest_rate=-1, tenure_years=-5))
        assert result.total_income == 0
        assert result.surplus_income == 0
        assert result.affordable_price == 0

    def test_zero_rate(self):
        profile = FinancialProfile(primary_income=100_000)
        result = calculate_affordability(profile, _terms(interest_rate=0))
        assert result.eligible_loan_amount == pytest.approx(50_000 * 240)

    def test_idempotent(self):
        profile = FinancialProfile(primary_income=95_000, existing_obligations=12_500)
        terms = _terms(tenure_years=25, interest_rate=9.1)
        assert calculate_affordability(profile, terms) == calculate_affordability(profile, terms)

    def test_extension_fields_ignored(self):
        profile = FinancialProfile(primary_income=95_000)
        plain = calculate_affordability(profile, _terms())
        extended = calculate_affordability(profile, _terms(rent_yield=0.05, appreciation=0.1))
        assert plain == extended
