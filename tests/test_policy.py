# This project was developed with assistance from AI tools.
"""Tests for lending policy loading, validation and hot-reload."""

import os
import textwrap

import pytest
from pydantic import ValidationError

import homefit.services.policy as policy_mod
from homefit.core.config import settings
from homefit.schemas.policy import DEFAULT_POLICY, EmploymentType, LendingPolicy, RankingStrategy
from homefit.services.policy import (
    PolicyConfigError,
    build_policy,
    get_policies,
    get_policy,
    load_policies,
)


@pytest.fixture(autouse=True)
def _reset_cache():
    """Reset the module-level policy cache before each test."""
    policy_mod._cached_policies = None
    policy_mod._cached_path = None
    policy_mod._cached_mtime = 0.0
    yield
    policy_mod._cached_policies = None
    policy_mod._cached_path = None
    policy_mod._cached_mtime = 0.0


def _write(path, content: str):
    path.write_text(textwrap.dedent(content))
    return path


class TestBuildPolicy:
    def test_no_overrides_returns_defaults(self):
        assert build_policy() is DEFAULT_POLICY
        assert build_policy({}) is DEFAULT_POLICY

    def test_scalar_override(self):
        policy = build_policy({"ltv_cap": 0.8})
        assert policy.ltv_cap == 0.8
        assert policy.max_foir == DEFAULT_POLICY.max_foir

    def test_nested_override_keeps_siblings(self):
        policy = build_policy({"match_weights": {"distance": 0.6}})
        assert policy.match_weights.distance == 0.6
        assert policy.match_weights.affordability == 0.25

    def test_partial_base_foir_keeps_other_type(self):
        policy = build_policy({"base_foir": {"salaried": 0.4}})
        assert policy.base_foir[EmploymentType.SALARIED] == 0.4
        assert policy.base_foir[EmploymentType.SELF_EMPLOYED] == 0.45

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            build_policy({"ltv_cap": 1.5})

    def test_tenure_bounds_checked(self):
        with pytest.raises(ValidationError, match="min_tenure_years"):
            build_policy({"min_tenure_years": 30, "max_tenure_years": 15})

    def test_match_bounds_checked(self):
        with pytest.raises(ValidationError, match="min_matches"):
            build_policy({"min_matches": 10, "max_matches": 5})

    def test_base_foir_must_cover_employment_types(self):
        with pytest.raises(ValidationError, match="self_employed"):
            LendingPolicy(base_foir={EmploymentType.SALARIED: 0.5})

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_POLICY.ltv_cap = 0.9


class TestBundledVariants:
    def test_variants_present(self):
        policies = load_policies(settings.POLICY_FILE)
        assert set(policies) == {"default", "classic", "conservative"}

    def test_default_matches_builtin(self):
        assert load_policies(settings.POLICY_FILE)["default"] == DEFAULT_POLICY

    def test_classic(self):
        classic = load_policies(settings.POLICY_FILE)["classic"]
        assert classic.young_co_applicant_age == 32
        assert classic.min_co_applicant_income == 25_000
        assert classic.ltv_cap == 0.80
        assert classic.ranking_strategy == RankingStrategy.PARTITION

    def test_conservative(self):
        conservative = load_policies(settings.POLICY_FILE)["conservative"]
        assert conservative.base_foir[EmploymentType.SALARIED] == 0.45
        assert conservative.max_foir == 0.55
        assert conservative.combined_obligation_guardrail == 0.70


class TestLoadPolicies:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_policies(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = _write(tmp_path / "policies.yaml", "variants: [unclosed\n")
        with pytest.raises(PolicyConfigError, match="not valid YAML"):
            load_policies(path)

    def test_missing_variants_section(self, tmp_path):
        path = _write(tmp_path / "policies.yaml", "ltv_cap: 0.8\n")
        with pytest.raises(PolicyConfigError, match="variants"):
            load_policies(path)

    def test_non_mapping_variant(self, tmp_path):
        path = _write(
            tmp_path / "policies.yaml",
            """\
            variants:
              broken: 3
            """,
        )
        with pytest.raises(PolicyConfigError, match="must be a mapping"):
            load_policies(path)

    def test_invalid_variant(self, tmp_path):
        path = _write(
            tmp_path / "policies.yaml",
            """\
            variants:
              greedy:
                max_foir: 2.0
            """,
        )
        with pytest.raises(PolicyConfigError, match="greedy"):
            load_policies(path)

    def test_empty_variant_is_default(self, tmp_path):
        path = _write(
            tmp_path / "policies.yaml",
            """\
            variants:
              plain:
            """,
        )
        assert load_policies(path)["plain"] == DEFAULT_POLICY


class TestGetPolicies:
    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        policies = get_policies(tmp_path / "missing.yaml")
        assert policies == {"default": DEFAULT_POLICY}

    def test_cached_between_calls(self, tmp_path):
        path = _write(tmp_path / "policies.yaml", "variants:\n  default: {}\n")
        assert get_policies(path) is get_policies(path)

    def test_hot_reload_on_mtime_change(self, tmp_path):
        path = _write(
            tmp_path / "policies.yaml",
            """\
            variants:
              default:
                ltv_cap: 0.75
            """,
        )
        assert get_policies(path)["default"].ltv_cap == 0.75

        _write(
            path,
            """\
            variants:
              default:
                ltv_cap: 0.80
            """,
        )
        mtime = path.stat().st_mtime + 10
        os.utime(path, (mtime, mtime))
        assert get_policies(path)["default"].ltv_cap == 0.80

    def test_deleted_file_keeps_cache(self, tmp_path):
        path = _write(
            tmp_path / "policies.yaml",
            """\
            variants:
              default: {}
              strict:
                max_foir: 0.5
            """,
        )
        loaded = get_policies(path)
        path.unlink()
        assert get_policies(path) is loaded


class TestGetPolicy:
    def test_named_variant(self):
        assert get_policy("classic", settings.POLICY_FILE).ltv_cap == 0.80

    def test_none_uses_configured_default(self):
        assert get_policy(None, settings.POLICY_FILE) == DEFAULT_POLICY

    def test_unknown_variant(self):
        with pytest.raises(KeyError, match="nosuch"):
            get_policy("nosuch", settings.POLICY_FILE)
