# This project was developed with assistance from AI tools.
"""homefit HTTP service: app factory wiring, error handlers and routers."""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .routes import health, public
from .schemas.error import ErrorResponse
from .services.catalogue import seed_catalogue
from .services.policy import get_policies

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Attach the catalogue and warm the policy cache."""
    if getattr(app.state, "catalogue", None) is None:
        app.state.catalogue = seed_catalogue()
    policies = get_policies()
    logger.info(
        "Started with %d listings, policy variants %s (default=%s)",
        len(app.state.catalogue.list_properties()),
        sorted(policies),
        settings.DEFAULT_POLICY_VARIANT,
    )
    yield


app = FastAPI(
    title="Homefit Affordability API",
    description="Mortgage affordability, EMI scenarios and property matching",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", str(uuid.uuid4()))


def _problem(
    status_code: int,
    detail: str,
    request_id: str,
    errors: list[dict] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request_id,
        errors=errors or [],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors (404 unknown variant, 405, ...) as Problem Details."""
    return _problem(exc.status_code, str(exc.detail), _request_id(request))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert request validation errors to RFC 7807 Problem Details."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    detail = "; ".join(err["msg"] for err in errors)
    return _problem(422, detail, _request_id(request), errors)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log anything the engine or routes did not anticipate and answer 500."""
    request_id = _request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    return _problem(500, "An unexpected error occurred.", request_id)


app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(public.router, prefix="/api/public", tags=["public"])
