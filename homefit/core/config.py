# This project was developed with assistance from AI tools.
"""
Application configuration.

Environment-driven service settings with local dev defaults.
Lending policy constants are not settings; they live in the policy YAML file
that POLICY_FILE points at.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Service settings; every field can be overridden by an env var of the same name."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "homefit"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- Lending policy --
    POLICY_FILE: Path = Field(
        default=_PROJECT_ROOT / "config" / "policies.yaml",
        description="YAML file with named lending policy variants.",
    )
    DEFAULT_POLICY_VARIANT: str = Field(
        default="default",
        description="Variant used when a request does not name one.",
    )

    # -- Catalogue / matching --
    CATALOGUE_LIMIT: int = Field(
        default=24,
        description="Maximum number of listings returned by the catalogue endpoint.",
    )
    DEFAULT_MATCH_COUNT: int = Field(
        default=9,
        description="Shortlist size requested when the caller does not pass one.",
    )


settings = Settings()
