"""
Custom exception handlers for FastAPI.

Issue endpoints answer their own failures in the response body; these
handlers cover everything else (unknown routes, unexpected exceptions).

Security:
- Request IDs are logged server-side for tracing but NOT exposed to clients
- Generic error messages for 500 errors to prevent information disclosure
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.logging import get_logger

logger = get_logger("backend.errors")


def _get_request_id() -> str:
    """
    Get the current request ID from context.

    Used for server-side logging only - NOT exposed to clients.
    """
    return structlog.contextvars.get_contextvars().get("request_id", "-")


def _response_payload(detail: str, status_code: int) -> dict:
    return {
        "detail": detail,
        "status_code": status_code,
    }


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_response_payload(str(exc.detail), exc.status_code),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "validation_error",
            errors=exc.errors(),
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=422,
            content={
                **_response_payload("Validation error", 422),
                "errors": exc.errors(),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        # Log full details server-side (including request_id for tracing)
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=500,
            content=_response_payload("Internal server error", 500),
        )
