# This project was developed with assistance from AI tools.
"""Property catalogue and match schemas."""

import enum

from pydantic import BaseModel, ConfigDict, Field


class FitLabel(str, enum.Enum):
    FITS_BUDGET = "Fits budget"
    STRETCH = "Stretch"
    PREMIUM = "Premium"


class PropertyRecord(BaseModel):
    """A catalogue listing. Read-only to the engine."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float
    location: str = ""
    configuration: str = ""
    possession: str = ""
    highlights: tuple[str, ...] = ()
    carpet_area: str = ""
    image_url: str = ""
    details_url: str = ""
    latitude: float | None = None
    longitude: float | None = None
    tags: tuple[str, ...] = ()


class PropertyMatch(BaseModel):
    """A listing ranked against a budget."""

    model_config = ConfigDict(frozen=True)

    property: PropertyRecord
    fit_label: FitLabel
    score: float
    monthly_emi: float | None = Field(
        default=None,
        description="EMI for this listing under the caller's loan terms, when supplied.",
    )
    down_payment_amount: float | None = None
