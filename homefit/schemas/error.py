# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details body returned by every failing endpoint."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Problem Details (https://datatracker.ietf.org/doc/html/rfc7807)."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str = ""
    request_id: str = Field(
        default="",
        description="Echo of X-Request-ID, or a generated id, for log correlation.",
    )
    errors: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Per-field validation failures (422 only).",
    )
