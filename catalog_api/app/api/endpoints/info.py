"""
Welcome endpoint.

Served at the site root; points clients at the main routes.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...core.config import Settings
from ..deps import get_settings
from .system import timestamp

router = APIRouter()


@router.get("/")
async def welcome(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "success": True,
        "message": f"Welcome to the {settings.project_name}",
        "version": settings.api_version,
        "documentation": {
            "health": "GET /api/health",
            "status": "GET /api/status",
            "users": "GET /api/users",
            "products": "GET /api/products",
            "search": "GET /api/search/users?q=...",
            "openapi": "GET /docs",
        },
        "timestamp": timestamp(),
    }
