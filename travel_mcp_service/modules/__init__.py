from __future__ import annotations

from fastapi import APIRouter


def build_api_router() -> APIRouter:
    from travel_mcp_service.modules.ask.api import router as ask_router
    from travel_mcp_service.modules.flights.api import router as flights_router
    from travel_mcp_service.modules.health.api import router as health_router
    from travel_mcp_service.modules.mcp.api import router as mcp_router
    from travel_mcp_service.modules.trains.api import router as trains_router

    api_router = APIRouter()
    api_router.include_router(health_router)
    api_router.include_router(mcp_router)
    api_router.include_router(trains_router)
    api_router.include_router(flights_router)
    api_router.include_router(ask_router)
    return api_router


__all__ = ["build_api_router"]
