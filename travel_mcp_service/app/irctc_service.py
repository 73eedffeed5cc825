"""IRCTC 열차 조회 API를 감싸는 서비스예요."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from libs.common.errors import ValidationError
from travel_mcp_service.app.rapidapi_client import RapidApiClient

DEFAULT_CLASS_TYPE = "3A"
DEFAULT_QUOTA = "GN"


def format_travel_date(value: date | str | None = None) -> str:
    """업스트림이 요구하는 ``YYYYMMDD`` 형식으로 날짜를 변환해요.

    값이 없으면 오늘 날짜를 사용해요. 문자열은 ``YYYY-MM-DD`` 또는
    ISO 8601 일시 형식을 받아요.
    """
    if value is None or value == "":
        return date.today().strftime("%Y%m%d")
    if isinstance(value, datetime):
        return value.date().strftime("%Y%m%d")
    if isinstance(value, date):
        return value.strftime("%Y%m%d")

    text = value.strip()
    try:
        parsed = date.fromisoformat(text[:10])
    except ValueError as exc:
        raise ValidationError(f"날짜 형식이 올바르지 않아요: {value!r} (YYYY-MM-DD)") from exc
    return parsed.strftime("%Y%m%d")


class IrctcService:
    def __init__(self, *, client: RapidApiClient, host: str) -> None:
        self._client = client
        self._host = host

    async def search_station(self, query: str) -> Any:
        return await self._client.fetch(self._host, "/api/v1/searchStation", {"query": query})

    async def trains_between_stations(
        self,
        from_station_code: str,
        to_station_code: str,
        travel_date: date | str | None = None,
    ) -> Any:
        return await self._client.fetch(
            self._host,
            "/api/v3/trainBetweenStations",
            {
                "fromStationCode": from_station_code,
                "toStationCode": to_station_code,
                "date": format_travel_date(travel_date),
            },
        )

    async def pnr_status(self, pnr_number: str) -> Any:
        return await self._client.fetch(self._host, "/api/v3/getPNRStatus", {"pnrNumber": pnr_number})

    async def train_schedule(self, train_no: str) -> Any:
        return await self._client.fetch(self._host, "/api/v1/getTrainSchedule", {"trainNo": train_no})

    async def seat_availability(
        self,
        train_no: str,
        from_station_code: str,
        to_station_code: str,
        class_type: str = DEFAULT_CLASS_TYPE,
        quota: str = DEFAULT_QUOTA,
    ) -> Any:
        return await self._client.fetch(
            self._host,
            "/api/v1/checkSeatAvailability",
            {
                "trainNo": train_no,
                "fromStationCode": from_station_code,
                "toStationCode": to_station_code,
                "classType": class_type,
                "quota": quota,
            },
        )
