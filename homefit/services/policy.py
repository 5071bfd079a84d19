# This project was developed with assistance from AI tools.
"""Lending policy variant loader.

Reads config/policies.yaml, merges each variant's overrides over the
built-in defaults, validates them into LendingPolicy objects, and supports
mtime-based hot-reload so policy edits take effect without a restart.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..core.config import settings
from ..schemas.policy import DEFAULT_POLICY, LendingPolicy

logger = logging.getLogger(__name__)

_cached_policies: dict[str, LendingPolicy] | None = None
_cached_path: Path | None = None
_cached_mtime: float = 0.0


class PolicyConfigError(ValueError):
    """The policy file is malformed or a variant fails validation."""


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overrides into a copy of base."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def build_policy(overrides: dict[str, Any] | None = None) -> LendingPolicy:
    """Build a LendingPolicy from partial overrides over the defaults."""
    if not overrides:
        return DEFAULT_POLICY
    base = DEFAULT_POLICY.model_dump(mode="json")
    return LendingPolicy.model_validate(_deep_merge(base, overrides))


def load_policies(path: Path | None = None) -> dict[str, LendingPolicy]:
    """Load and validate every variant in the policy file."""
    policy_path = path or settings.POLICY_FILE
    if not policy_path.exists():
        raise FileNotFoundError(f"Policy config not found: {policy_path}")

    try:
        raw = yaml.safe_load(policy_path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise PolicyConfigError(f"{policy_path} is not valid YAML: {exc}") from exc

    variants = raw.get("variants") if isinstance(raw, dict) else None
    if not variants or not isinstance(variants, dict):
        raise PolicyConfigError(
            "policies.yaml must contain a 'variants' section with at least one variant"
        )

    policies: dict[str, LendingPolicy] = {}
    for name, overrides in variants.items():
        if overrides is not None and not isinstance(overrides, dict):
            raise PolicyConfigError(f"Variant '{name}' must be a mapping")
        try:
            policies[str(name)] = build_policy(overrides)
        except ValidationError as exc:
            raise PolicyConfigError(f"Variant '{name}' is invalid: {exc}") from exc
    return policies


def get_policies(path: Path | None = None) -> dict[str, LendingPolicy]:
    """Return cached variants, reloading if the file's mtime has changed.

    Falls back to the built-in default policy when no file has ever loaded.
    """
    global _cached_policies, _cached_path, _cached_mtime  # noqa: PLW0603
    policy_path = path or settings.POLICY_FILE

    try:
        current_mtime = policy_path.stat().st_mtime
    except FileNotFoundError:
        if _cached_policies is not None and _cached_path == policy_path:
            logger.warning("Policy file disappeared, using cached policies")
            return _cached_policies
        logger.warning("Policy file %s not found, using built-in defaults", policy_path)
        return {"default": DEFAULT_POLICY}

    if _cached_policies is None or _cached_path != policy_path or current_mtime > _cached_mtime:
        logger.info("Loading lending policies from %s", policy_path)
        _cached_policies = load_policies(policy_path)
        _cached_path = policy_path
        _cached_mtime = current_mtime

    return _cached_policies


def get_policy(variant: str | None = None, path: Path | None = None) -> LendingPolicy:
    """Return one named variant (the configured default when None)."""
    name = variant or settings.DEFAULT_POLICY_VARIANT
    policies = get_policies(path)
    if name not in policies:
        raise KeyError(f"Unknown policy variant '{name}'. Available: {list(policies)}")
    return policies[name]
