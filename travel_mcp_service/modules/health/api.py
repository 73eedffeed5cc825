from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Request

from travel_mcp_service.modules.common.deps import get_settings

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict[str, str]:
    app_settings = get_settings(request)
    return {
        "status": "OK",
        "service": app_settings.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": app_settings.service_version,
    }


@router.get("/")
async def root(request: Request) -> dict[str, Any]:
    app_settings = get_settings(request)
    return {
        "status": "success",
        "message": f"{app_settings.service_name} is running",
        "endpoints": {
            "mcp": "POST /mcp - MCP protocol endpoint",
            "health": "GET /health - Health check endpoint",
        },
        "version": app_settings.service_version,
    }
