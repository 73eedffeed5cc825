"""항공권 딜 검색 도구예요."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from travel_mcp_service.app.flight_deals import DEFAULT_LIMIT, FlightDealsService
from travel_mcp_service.app.tools.base import BaseTool, ToolArguments, ToolResult, count_items


class SearchFlightsArguments(ToolArguments):
    query: str = Field(min_length=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=100)


class SearchFlightsTool(BaseTool):
    arguments_model = SearchFlightsArguments

    def __init__(self, *, flights: FlightDealsService) -> None:
        self._flights = flights

    @property
    def name(self) -> str:
        return "search_flights"

    @property
    def description(self) -> str:
        return "Search for flight deals"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Origin airport code or city"},
                "limit": {"type": "integer", "minimum": 1, "maximum": 100, "description": "Number of results to return"},
            },
            "required": ["query"],
        }

    async def execute(self, arguments: SearchFlightsArguments) -> ToolResult:
        # 가격은 INR로 환산된 형태로 돌려줘요.
        deals = await self._flights.get_formatted_deals(arguments.query, arguments.limit)
        return ToolResult(
            summary=f"Found {count_items(deals)} flight deals from {arguments.query}",
            data=deals,
        )
