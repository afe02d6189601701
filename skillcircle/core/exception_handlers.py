"""Exception handlers that turn every failure into the API error body.

Clients always get {"type", "message"} (plus "details" for field-level
validation problems). Internal error text is logged, never returned.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from skillcircle.core.exceptions import AppException, ValidationError

logger = logging.getLogger("skillcircle.exception")

# Location prefixes FastAPI adds to validation errors; not useful to clients.
_LOCATION_PREFIXES = {"body", "query", "path"}


def _error_field(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc if part not in _LOCATION_PREFIXES)


def _request_extra(request: Request, status_code: int) -> dict[str, Any]:
    return {
        "request_id": getattr(request.state, "request_id", None),
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
    }


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Map a domain error to {type, message} with its status code."""
    extra = _request_extra(request, exc.status_code) | {"error_type": exc.error_type}
    if exc.status_code >= 500:
        logger.error("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    else:
        logger.info("AppException: %s - %s", exc.error_type, exc.message, extra=extra)

    content: dict[str, Any] = {"type": exc.error_type, "message": exc.message}
    if isinstance(exc, ValidationError) and exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTPException raised by the framework (404 routes, 405, ...)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"type": "http_error", "message": str(exc.detail)},
    )


def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors with unified format.

    Malformed bodies, query strings and path parameters are all reported
    as 400 with one entry per failing field.
    """
    details = []
    messages = []
    for error in exc.errors():
        field = _error_field(error["loc"])
        details.append({"field": field, "message": error["msg"]})
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])

    return JSONResponse(
        status_code=400,
        content={
            "type": "validation_error",
            "message": "; ".join(messages) or "Invalid request data",
            "details": details,
        },
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors."""
    logger.error(
        "Unhandled exception: %s %s - %s",
        request.method,
        request.url.path,
        exc,
        extra=_request_extra(request, 500),
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"type": "internal_error", "message": "An unexpected error occurred"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
