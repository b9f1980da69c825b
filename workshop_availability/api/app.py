"""
FastAPI application: health check and the availability query endpoint.

Usage:
    uvicorn workshop_availability.api.app:app --port 3000
"""

import json
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workshop_availability.availability.engine import compute_availability
from workshop_availability.catalog.loader import get_workshop_config
from workshop_availability.config import settings
from workshop_availability.api.validation import validate_availability_request
from workshop_availability.logging_context import (
    get_request_logger,
    new_request_id,
    reset_request_id,
    set_request_id,
)
from workshop_availability.schemas.availability_schema import (
    AvailabilityRequest,
    AvailabilityResponse,
    ErrorResponse,
    ValidationErrorDetail,
)
from workshop_availability.utils import parse_iso_date

logger = get_request_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

router = APIRouter()


def error_response(
    status_code: int,
    error: str,
    message: Optional[str] = None,
    details: Optional[list[ValidationErrorDetail]] = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def _compute(query: AvailabilityRequest) -> AvailabilityResponse:
    config = get_workshop_config()
    period_start = parse_iso_date(query.start_date) if query.start_date else None
    return compute_availability(config, query, period_start)


@router.post("/availability")
async def availability(request: Request) -> JSONResponse:
    """Find slots at every workshop for the requested services and repairs."""
    raw = await request.body()
    try:
        # An empty body is treated as an empty object.
        body = json.loads(raw) if raw.strip() else {}
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.info("Rejected request with invalid JSON: %s", e)
        return error_response(400, "Invalid JSON", message=str(e))

    validation = validate_availability_request(body)
    if not validation.valid or validation.data is None:
        return error_response(400, "Validation failed", details=validation.errors)

    try:
        # Catalog file I/O and the slot search are blocking.
        response = await run_in_threadpool(_compute, validation.data)
    except Exception as e:
        logger.exception("Availability computation failed")
        return error_response(500, "Internal server error", message=str(e))

    return JSONResponse(status_code=200, content=response.to_json_dict())


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Wrong method on a known path is reported as not found.
    if exc.status_code in (404, 405):
        return error_response(404, "Not found")
    return error_response(exc.status_code, str(exc.detail))


def create_app() -> FastAPI:
    """Build the FastAPI app with routes, request-id middleware and error handlers."""
    app = FastAPI(title=settings.service_name)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "service": settings.service_name}

    app.include_router(router, prefix="/api")
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    return app


app = create_app()
