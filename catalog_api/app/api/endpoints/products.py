"""
Product endpoints.

CRUD over the in-memory products collection.  The list route accepts
``category``, ``minPrice``, ``maxPrice`` and ``limit`` filters.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from ...core.coercion import parse_int
from ...core.errors import BadRequestError, NotFoundError
from ...core.responses import list_response, success_response
from ...services.errors import InvalidInputError
from ...services.product_service import ProductService
from ..deps import get_payload, get_product_service

router = APIRouter()

PRODUCT_NOT_FOUND = "Product not found"


@router.get("")
async def list_products(
    category: Optional[str] = Query(None, description="Category to match, ignoring case"),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    limit: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """List products.

    Price bounds are inclusive.  A bound that is not a number is
    ignored.
    """
    products = await service.list_products(
        category=category,
        min_price=min_price,
        max_price=max_price,
        limit=limit,
    )
    return list_response(products)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: Dict[str, Any] = Depends(get_payload),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    try:
        product = await service.create_product(payload)
    except InvalidInputError as e:
        raise BadRequestError(str(e))
    return success_response(product, status_code=status.HTTP_201_CREATED, message="Product created successfully")


@router.get("/{product_id}")
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)) -> JSONResponse:
    product_pk = parse_int(product_id)
    product = await service.get_product(product_pk) if product_pk is not None else None
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return success_response(product)


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    payload: Dict[str, Any] = Depends(get_payload),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Update a product.

    ``name``, ``price`` and ``category`` are only changed by non-empty,
    non-zero values; ``stock`` is changed by any number, including 0.
    """
    product_pk = parse_int(product_id)
    if product_pk is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    try:
        product = await service.update_product(product_pk, payload)
    except InvalidInputError as e:
        raise BadRequestError(str(e))
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return success_response(product, message="Product updated successfully")


@router.delete("/{product_id}")
async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)) -> JSONResponse:
    product_pk = parse_int(product_id)
    if product_pk is None or not await service.delete_product(product_pk):
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return success_response(message="Product deleted successfully")
