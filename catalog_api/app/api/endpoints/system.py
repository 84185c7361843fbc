"""
Health and status endpoints.

``/api/health`` is meant for load balancers and uptime checks;
``/api/status`` reports what is running and which routes it serves.
"""

import os
import platform
import resource
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from ...core.config import Settings
from ..deps import get_settings

router = APIRouter()

ENDPOINTS = [
    "GET /api/health",
    "GET /api/status",
    "GET /api/users",
    "POST /api/users",
    "POST /api/users/bulk",
    "GET /api/users/:id",
    "PUT /api/users/:id",
    "DELETE /api/users/:id",
    "GET /api/products",
    "POST /api/products",
    "GET /api/products/:id",
    "PUT /api/products/:id",
    "DELETE /api/products/:id",
    "GET /api/search/users",
    "GET /api/search/products",
]


def timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def uptime(request: Request) -> float:
    """Seconds since the application was created."""
    return round(time.monotonic() - request.app.state.started_at, 3)


def memory_usage() -> Dict[str, Any]:
    """Resource usage of this process as reported by ``getrusage``.

    ``maxRss`` is the peak resident set size in the platform's unit
    (kilobytes on Linux, bytes on macOS).
    """
    usage = resource.getrusage(resource.RUSAGE_SELF)
    return {
        "maxRss": usage.ru_maxrss,
        "userCpuSeconds": round(usage.ru_utime, 3),
        "systemCpuSeconds": round(usage.ru_stime, 3),
    }


@router.get("/health")
async def health(request: Request, settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "success": True,
        "status": "healthy",
        "timestamp": timestamp(),
        "uptime": uptime(request),
        "version": settings.api_version,
    }


@router.get("/status")
async def server_status(request: Request, settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "success": True,
        "server": settings.server_name,
        "environment": settings.environment,
        "pythonVersion": platform.python_version(),
        "pid": os.getpid(),
        "memory": memory_usage(),
        "uptime": uptime(request),
        "timestamp": timestamp(),
        "endpoints": ENDPOINTS,
    }
