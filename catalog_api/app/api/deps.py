"""
Shared FastAPI dependencies for the endpoint modules.

Services are built per request around the application's ``DataStore``
so that no route touches module-level state.
"""

import json
from typing import Any, Dict

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError

from ..core.config import Settings
from ..core.store import DataStore, get_store
from ..services.product_service import ProductService
from ..services.user_service import UserService

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_service(store: DataStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_product_service(store: DataStore = Depends(get_store)) -> ProductService:
    return ProductService(store)


def as_object(body: Any) -> Dict[str, Any]:
    """Return ``body`` if it is a JSON object, otherwise an empty one.

    A missing body, or one that is a list or scalar, carries none of
    the named fields the endpoints look for.
    """
    return body if isinstance(body, dict) else {}


async def get_payload(request: Request) -> Dict[str, Any]:
    """Read the request body as a dictionary of fields.

    Form bodies (url-encoded or multipart) give their fields as
    strings.  JSON bodies, and bodies sent without a content type, are
    decoded as JSON.  Any other content type carries no fields.  A
    JSON body that does not decode is a request error, reported the
    same way FastAPI reports it for declared body parameters.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    if content_type and content_type != "application/json" and not content_type.endswith("+json"):
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body", e.pos),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": e.msg},
                }
            ],
            body=e.doc,
        )
    return as_object(body)
