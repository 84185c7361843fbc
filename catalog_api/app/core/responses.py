"""
Response envelope helpers.

Every endpoint answers with the same JSON wrapper::

    {"success": true, "data": ..., "count": 2, "message": "..."}
    {"success": false, "error": "User not found"}

Keys that are not relevant to a given response are omitted.  This is
the only layer (together with the exception handlers in
``core.errors``) that deals with HTTP status codes.
"""

from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class Envelope(BaseModel):
    """Uniform wrapper returned by every endpoint."""

    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    message: Optional[str] = None
    count: Optional[int] = None
    query: Optional[str] = None
    path: Optional[str] = None


def envelope(
    success: bool,
    *,
    data: Any = None,
    error: Optional[str] = None,
    message: Optional[str] = None,
    count: Optional[int] = None,
    query: Optional[str] = None,
    path: Optional[str] = None,
) -> dict:
    """Build the envelope as a plain JSON-compatible dictionary."""
    body = Envelope(
        success=success,
        data=jsonable_encoder(data),
        error=error,
        message=message,
        count=count,
        query=query,
        path=path,
    )
    return body.model_dump(exclude_none=True)


def success_response(
    data: Any = None,
    *,
    status_code: int = status.HTTP_200_OK,
    message: Optional[str] = None,
    count: Optional[int] = None,
    query: Optional[str] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope(True, data=data, message=message, count=count, query=query),
    )


def list_response(items: list, *, query: Optional[str] = None) -> JSONResponse:
    """Wrap a list of records, adding ``count`` (and the echoed search query)."""
    return success_response(items, count=len(items), query=query)


def error_response(error: str, *, status_code: int, message: Optional[str] = None, path: Optional[str] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope(False, error=error, message=message, path=path),
    )
