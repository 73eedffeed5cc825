from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header, Query, Request

from travel_mcp_service.app.flight_deals import DEFAULT_LIMIT, DEFAULT_ORIGIN
from travel_mcp_service.modules.common.deps import get_flight_deals_service, require_auth

router = APIRouter(prefix="/api/flights")


@router.get("/deals")
async def flight_deals(
    request: Request,
    query: str = Query(default=DEFAULT_ORIGIN),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=100),
    authorization: str = Header(default=""),
) -> dict[str, Any]:
    require_auth(request, authorization)
    return await get_flight_deals_service(request).get_formatted_deals(query, limit)
