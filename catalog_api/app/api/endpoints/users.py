"""
User endpoints.

CRUD over the in-memory users collection plus a bulk-create route.
Ids in the path are read by their leading integer; a path id that is
not a number simply matches no user.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from ...core.coercion import parse_int
from ...core.errors import BadRequestError, NotFoundError
from ...core.responses import list_response, success_response
from ...services.errors import InvalidInputError
from ...services.user_service import UserService
from ..deps import get_payload, get_user_service

router = APIRouter()

USER_NOT_FOUND = "User not found"


@router.get("")
async def list_users(
    role: Optional[str] = Query(None, description="Exact role to match, e.g. admin"),
    limit: Optional[str] = Query(None, description="Return at most this many users"),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """List users, optionally filtered by ``role`` and truncated to ``limit``."""
    users = await service.list_users(role=role, limit=limit)
    return list_response(users)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Dict[str, Any] = Depends(get_payload),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Create a user.  ``name`` and ``email`` are required."""
    try:
        user = await service.create_user(payload)
    except InvalidInputError as e:
        raise BadRequestError(str(e))
    return success_response(user, status_code=status.HTTP_201_CREATED, message="User created successfully")


@router.post("/bulk", status_code=status.HTTP_201_CREATED)
async def bulk_users(
    payload: Dict[str, Any] = Depends(get_payload),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Run a bulk operation on users.

    The body is ``{"operation": "create", "data": [{...}, ...]}``.  All
    users of the batch are created together with consecutive ids.
    """
    try:
        created = await service.bulk(payload.get("operation"), payload.get("data"))
    except InvalidInputError as e:
        raise BadRequestError(str(e))
    return success_response(
        created,
        status_code=status.HTTP_201_CREATED,
        message=f"{len(created)} users created successfully",
    )


@router.get("/{user_id}")
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> JSONResponse:
    user_pk = parse_int(user_id)
    user = await service.get_user(user_pk) if user_pk is not None else None
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return success_response(user)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: Dict[str, Any] = Depends(get_payload),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Update a user's ``name``, ``email`` or ``role``.

    Empty values are ignored, so sending ``{"name": ""}`` leaves the
    name as it was.
    """
    user_pk = parse_int(user_id)
    user = await service.update_user(user_pk, payload) if user_pk is not None else None
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return success_response(user, message="User updated successfully")


@router.delete("/{user_id}")
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> JSONResponse:
    user_pk = parse_int(user_id)
    if user_pk is None or not await service.delete_user(user_pk):
        raise NotFoundError(USER_NOT_FOUND)
    return success_response(message="User deleted successfully")
