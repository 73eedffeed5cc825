"""IRCTC 열차 조회 도구예요."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from travel_mcp_service.app.irctc_service import DEFAULT_CLASS_TYPE, DEFAULT_QUOTA, IrctcService
from travel_mcp_service.app.tools.base import BaseTool, ToolArguments, ToolResult, count_items


class SearchTrainsArguments(ToolArguments):
    from_station: str = Field(alias="from", min_length=1)
    to_station: str = Field(alias="to", min_length=1)
    date: str | None = None


class SearchStationsArguments(ToolArguments):
    query: str = Field(min_length=1)


class PnrStatusArguments(ToolArguments):
    pnr: str = Field(min_length=1)


class TrainScheduleArguments(ToolArguments):
    train_no: str = Field(alias="trainNo", min_length=1)


class SeatAvailabilityArguments(ToolArguments):
    train_no: str = Field(alias="trainNo", min_length=1)
    from_station: str = Field(alias="from", min_length=1)
    to_station: str = Field(alias="to", min_length=1)
    class_type: str = Field(default=DEFAULT_CLASS_TYPE, alias="classType", min_length=1)
    quota: str = Field(default=DEFAULT_QUOTA, min_length=1)


def _string_property(description: str) -> dict[str, str]:
    return {"type": "string", "description": description}


class _IrctcTool(BaseTool):
    def __init__(self, *, irctc: IrctcService) -> None:
        self._irctc = irctc


class SearchTrainsTool(_IrctcTool):
    arguments_model = SearchTrainsArguments

    @property
    def name(self) -> str:
        return "search_trains"

    @property
    def description(self) -> str:
        return "Search for trains between two stations"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "from": _string_property("Source station code or name"),
                "to": _string_property("Destination station code or name"),
                "date": _string_property("Travel date (YYYY-MM-DD)"),
            },
            "required": ["from", "to"],
        }

    async def execute(self, arguments: SearchTrainsArguments) -> ToolResult:
        trains = await self._irctc.trains_between_stations(
            arguments.from_station,
            arguments.to_station,
            arguments.date,
        )
        return ToolResult(
            summary=f"Found {count_items(trains)} trains from {arguments.from_station} to {arguments.to_station}",
            data=trains,
        )


class SearchStationsTool(_IrctcTool):
    arguments_model = SearchStationsArguments

    @property
    def name(self) -> str:
        return "search_stations"

    @property
    def description(self) -> str:
        return "Search for railway stations"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {"query": _string_property("Station name or code to search")},
            "required": ["query"],
        }

    async def execute(self, arguments: SearchStationsArguments) -> ToolResult:
        stations = await self._irctc.search_station(arguments.query)
        return ToolResult(
            summary=f"Found {count_items(stations)} stations matching '{arguments.query}'",
            data=stations,
        )


class PnrStatusTool(_IrctcTool):
    arguments_model = PnrStatusArguments

    @property
    def name(self) -> str:
        return "get_pnr_status"

    @property
    def description(self) -> str:
        return "Get PNR status for a train ticket"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {"pnr": _string_property("10-digit PNR number")},
            "required": ["pnr"],
        }

    async def execute(self, arguments: PnrStatusArguments) -> ToolResult:
        status = await self._irctc.pnr_status(arguments.pnr)
        return ToolResult(summary=f"PNR Status for {arguments.pnr}", data=status)


class TrainScheduleTool(_IrctcTool):
    arguments_model = TrainScheduleArguments

    @property
    def name(self) -> str:
        return "get_train_schedule"

    @property
    def description(self) -> str:
        return "Get detailed schedule for a train"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {"trainNo": _string_property("Train number")},
            "required": ["trainNo"],
        }

    async def execute(self, arguments: TrainScheduleArguments) -> ToolResult:
        schedule = await self._irctc.train_schedule(arguments.train_no)
        return ToolResult(summary=f"Schedule for train {arguments.train_no}", data=schedule)


class SeatAvailabilityTool(_IrctcTool):
    arguments_model = SeatAvailabilityArguments

    @property
    def name(self) -> str:
        return "check_seat_availability"

    @property
    def description(self) -> str:
        return "Check seat availability for a train"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "trainNo": _string_property("Train number"),
                "from": _string_property("Source station code"),
                "to": _string_property("Destination station code"),
                "classType": _string_property("Class type (SL, 3A, 2A, 1A)"),
                "quota": _string_property("Quota type (GN, TQ, etc.)"),
            },
            "required": ["trainNo", "from", "to"],
        }

    async def execute(self, arguments: SeatAvailabilityArguments) -> ToolResult:
        availability = await self._irctc.seat_availability(
            arguments.train_no,
            arguments.from_station,
            arguments.to_station,
            arguments.class_type,
            arguments.quota,
        )
        return ToolResult(summary=f"Seat availability for train {arguments.train_no}", data=availability)
