"""
API error types and the application-level exception handlers.

Endpoints raise ``ApiError`` subclasses for the failures they know
about (missing fields, unknown ids).  Everything else that escapes a
handler ends up in the fault handler and is reported as a generic 500.
All handlers answer with the standard response envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .responses import error_response

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """An error that maps directly onto an HTTP status and message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


def _requested_path(request: Request) -> str:
    path = request.scope.get("original_path", request.url.path)
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return path


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Attach envelope-producing exception handlers to ``app``."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return error_response(exc.message, status_code=exc.status_code)

    @app.exception_handler(ValidationError)
    async def record_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        # Raised when a request value cannot be stored in a record, e.g. a
        # numeric ``name``.
        detail = "; ".join(
            f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors()
        )
        return error_response(f"Invalid field value: {detail}", status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Starlette raises 404 for unknown paths and 405 for a known path
        # with an unknown method.  Both are reported as an unknown route.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return error_response(
                "Route not found",
                status_code=status.HTTP_404_NOT_FOUND,
                path=_requested_path(request),
            )
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return error_response(detail, status_code=exc.status_code)

    async def fault_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(
            "Something went wrong!",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Internal Server Error" if settings.is_production else str(exc),
        )

    # A body that is not valid JSON never reaches a handler; it is
    # reported like any other fault.
    app.add_exception_handler(RequestValidationError, fault_handler)
    app.add_exception_handler(Exception, fault_handler)
