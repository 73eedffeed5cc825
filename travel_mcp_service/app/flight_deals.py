from __future__ import annotations

from typing import Any

from travel_mcp_service.app.formatting import format_flight_deals
from travel_mcp_service.app.rapidapi_client import RapidApiClient

DEFAULT_ORIGIN = "DEL"
DEFAULT_LIMIT = 10


class FlightDealsService:
    def __init__(self, *, client: RapidApiClient, host: str, deals_path: str) -> None:
        self._client = client
        self._host = host
        self._deals_path = deals_path

    async def get_deals(self, query: str = DEFAULT_ORIGIN, limit: int = DEFAULT_LIMIT) -> Any:
        return await self._client.fetch(self._host, self._deals_path, {"query": query, "limit": limit})

    async def get_formatted_deals(self, query: str = DEFAULT_ORIGIN, limit: int = DEFAULT_LIMIT) -> dict[str, Any]:
        return format_flight_deals(await self.get_deals(query, limit))
