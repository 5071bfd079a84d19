# This project was developed with assistance from AI tools.
"""Liveness endpoint."""

from fastapi import APIRouter, Request

from ..core.config import settings

router = APIRouter()


@router.get("/")
async def health(request: Request) -> dict[str, str | int]:
    """Report the service as up, with the size of the attached catalogue."""
    catalogue = getattr(request.app.state, "catalogue", None)
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "policy_variant": settings.DEFAULT_POLICY_VARIANT,
        "catalogue_size": len(catalogue.list_properties()) if catalogue is not None else 0,
    }
