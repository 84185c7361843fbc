"""
Search endpoints.

Case-insensitive substring search over users (name, email) and
products (name, category).  The query is echoed back in the response.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ...core.errors import BadRequestError
from ...core.responses import list_response
from ...services.errors import InvalidInputError
from ...services.product_service import ProductService
from ...services.user_service import UserService
from ..deps import get_product_service, get_user_service

router = APIRouter()


@router.get("/users")
async def search_users(
    q: Optional[str] = Query(None, description="Text to look for in name or email"),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    try:
        users = await service.search(q)
    except InvalidInputError as e:
        raise BadRequestError(str(e))
    return list_response(users, query=q)


@router.get("/products")
async def search_products(
    q: Optional[str] = Query(None, description="Text to look for in name or category"),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    try:
        products = await service.search(q)
    except InvalidInputError as e:
        raise BadRequestError(str(e))
    return list_response(products, query=q)
