"""
Top-level router for the API.

This router aggregates the domain routers under the ``/api`` prefix
applied in ``main.create_app``.  When new endpoints are added, include
their routers here.
"""

from fastapi import APIRouter

from .endpoints import products, search, system, users

router = APIRouter()

# Health and status live directly under /api.
router.include_router(system.router, tags=["system"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(search.router, prefix="/search", tags=["search"])
