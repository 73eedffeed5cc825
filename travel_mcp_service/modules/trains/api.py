from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header, Query, Request

from libs.common.errors import ValidationError
from libs.common.logging import get_logger
from travel_mcp_service.app.irctc_service import DEFAULT_CLASS_TYPE, DEFAULT_QUOTA, format_travel_date
from travel_mcp_service.app.tools.base import count_items
from travel_mcp_service.modules.common.deps import get_irctc_service, require_auth

router = APIRouter(prefix="/api/trains")
logger = get_logger("travel_mcp_service.modules.trains")


@router.get("/stations")
async def search_stations(
    request: Request,
    query: str = Query(default=""),
    authorization: str = Header(default=""),
) -> dict[str, Any]:
    require_auth(request, authorization)
    query = query.strip()
    if len(query) < 2:
        raise ValidationError("Please provide a search query with at least 2 characters")

    stations = await get_irctc_service(request).search_station(query)
    return {"status": True, "data": stations}


@router.get("/between-stations")
async def trains_between_stations(
    request: Request,
    from_station: str = Query(default="", alias="from"),
    to_station: str = Query(default="", alias="to"),
    date: str | None = Query(default=None),
    authorization: str = Header(default=""),
) -> dict[str, Any]:
    require_auth(request, authorization)
    if not from_station or not to_station:
        raise ValidationError("Please provide both source (from) and destination (to) station codes")

    compact_date = format_travel_date(date)
    trains = await get_irctc_service(request).trains_between_stations(from_station, to_station, date)
    logger.info("trains_searched", from_station=from_station, to_station=to_station, date=compact_date)
    return {
        "status": True,
        "searchParams": {
            "from": from_station,
            "to": to_station,
            "date": f"{compact_date[:4]}-{compact_date[4:6]}-{compact_date[6:]}",
        },
        "totalResults": count_items(trains),
        "data": trains if trains is not None else [],
    }


@router.get("/schedule/{train_no}")
async def train_schedule(
    request: Request,
    train_no: str,
    authorization: str = Header(default=""),
) -> dict[str, Any]:
    require_auth(request, authorization)
    schedule = await get_irctc_service(request).train_schedule(train_no)
    return {"status": True, "trainNo": train_no, "data": schedule}


@router.get("/check-availability")
async def check_availability(
    request: Request,
    train_no: str = Query(default="", alias="trainNo"),
    from_station: str = Query(default="", alias="from"),
    to_station: str = Query(default="", alias="to"),
    class_type: str = Query(default=DEFAULT_CLASS_TYPE, alias="class"),
    quota: str = Query(default=DEFAULT_QUOTA),
    authorization: str = Header(default=""),
) -> dict[str, Any]:
    require_auth(request, authorization)
    if not train_no or not from_station or not to_station:
        raise ValidationError("Please provide train number, from and to station codes")

    availability = await get_irctc_service(request).seat_availability(
        train_no,
        from_station,
        to_station,
        class_type,
        quota,
    )
    return {
        "status": True,
        "searchParams": {
            "trainNo": train_no,
            "from": from_station,
            "to": to_station,
            "class": class_type,
            "quota": quota,
        },
        "data": availability,
    }


@router.get("/pnr/{pnr}")
async def pnr_status(
    request: Request,
    pnr: str,
    authorization: str = Header(default=""),
) -> dict[str, Any]:
    require_auth(request, authorization)
    status = await get_irctc_service(request).pnr_status(pnr)
    return {"status": True, "pnr": pnr, "data": status}
