from __future__ import annotations

from typing import Any

import pytest

from libs.common.errors import ConfigurationError, ValidationError
from tests.conftest import StubRapidApiClient
from travel_mcp_service.app.flight_deals import FlightDealsService
from travel_mcp_service.app.irctc_service import IrctcService
from travel_mcp_service.app.mcp_protocol import METHOD_NOT_FOUND, UnknownTool
from travel_mcp_service.app.tools import BaseTool, ToolDispatcher, ToolResult
from travel_mcp_service.app.tools.base import ToolArguments, count_items
from travel_mcp_service.app.tools.defaults import build_default_tool_dispatcher
from travel_mcp_service.app.tools.trains import SeatAvailabilityArguments


class EchoArguments(ToolArguments):
    text: str


class EchoTool(BaseTool):
    arguments_model = EchoArguments

    @property
    def name(self) -> str:
        return "echo"

    @property
    def description(self) -> str:
        return "Echo the given text"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {"text": {"type": "string"}}, "required": ["text"]}

    async def execute(self, arguments: EchoArguments) -> ToolResult:
        return ToolResult(summary=arguments.text, data={"text": arguments.text})


def _default_dispatcher(client: StubRapidApiClient) -> ToolDispatcher:
    irctc = IrctcService(client=client, host="irctc.test")
    flights = FlightDealsService(client=client, host="flights.test", deals_path="/deals")
    return build_default_tool_dispatcher(irctc=irctc, flights=flights)


def test_register_rejects_duplicate_name() -> None:
    dispatcher = ToolDispatcher()
    dispatcher.register(EchoTool())
    with pytest.raises(ConfigurationError):
        dispatcher.register(EchoTool())


def test_register_after_freeze_is_rejected() -> None:
    dispatcher = ToolDispatcher()
    dispatcher.register(EchoTool())
    dispatcher.freeze()

    with pytest.raises(ConfigurationError):
        dispatcher.register(EchoTool())
    assert len(dispatcher) == 1
    assert "echo" in dispatcher


def test_default_catalog_has_six_tools_with_schemas() -> None:
    dispatcher = _default_dispatcher(StubRapidApiClient())
    descriptors = dispatcher.to_descriptors()

    assert len(dispatcher) == 6
    assert dispatcher.list_names()[0] == "search_trains"
    for descriptor in descriptors:
        assert set(descriptor) == {"name", "description", "inputSchema"}
        assert descriptor["inputSchema"]["type"] == "object"
    flight_schema = descriptors[-1]["inputSchema"]["properties"]["limit"]
    assert flight_schema["type"] == "integer"
    assert (flight_schema["minimum"], flight_schema["maximum"]) == (1, 100)
    with pytest.raises(TypeError):
        dispatcher.tools["extra"] = EchoTool()  # type: ignore[index]


@pytest.mark.asyncio
async def test_call_runs_registered_tool() -> None:
    dispatcher = ToolDispatcher()
    dispatcher.register(EchoTool())

    result = await dispatcher.call("echo", {"text": "  namaste "})

    assert result.to_content() == {
        "content": [{"type": "text", "text": "namaste", "data": {"text": "namaste"}}]
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["missing", None, 42])
async def test_call_with_unknown_name_raises(name: object) -> None:
    dispatcher = ToolDispatcher()
    dispatcher.register(EchoTool())

    with pytest.raises(UnknownTool) as exc_info:
        await dispatcher.call(name, {})
    assert exc_info.value.code == METHOD_NOT_FOUND


@pytest.mark.asyncio
async def test_call_with_invalid_arguments_raises_validation_error() -> None:
    dispatcher = ToolDispatcher()
    dispatcher.register(EchoTool())

    with pytest.raises(ValidationError) as exc_info:
        await dispatcher.call("echo", {"text": "hi", "loud": True})
    assert "loud" in exc_info.value.message


def test_seat_availability_arguments_defaults() -> None:
    arguments = SeatAvailabilityArguments.model_validate({"trainNo": "12951", "from": "NDLS", "to": "BCT"})
    assert arguments.class_type == "3A"
    assert arguments.quota == "GN"


@pytest.mark.asyncio
async def test_search_trains_formats_date_for_upstream() -> None:
    client = StubRapidApiClient({"/api/v3/trainBetweenStations": {"status": True, "data": [{"train_number": "12951"}]}})
    dispatcher = _default_dispatcher(client)

    result = await dispatcher.call("search_trains", {"from": "NDLS", "to": "BCT", "date": "2025-03-01"})

    assert result.summary == "Found 1 trains from NDLS to BCT"
    assert client.calls == [
        (
            "irctc.test",
            "/api/v3/trainBetweenStations",
            {"fromStationCode": "NDLS", "toStationCode": "BCT", "date": "20250301"},
        )
    ]


@pytest.mark.asyncio
async def test_search_flights_returns_formatted_deals() -> None:
    payload = {
        "status": True,
        "data": {
            "totalResultCount": 1,
            "itineraries": [{"id": "deal-1", "price": {"amount": 100, "currency": "USD"}}],
        },
    }
    client = StubRapidApiClient({"/deals": payload})
    dispatcher = _default_dispatcher(client)

    result = await dispatcher.call("search_flights", {"query": "DEL", "limit": 5})

    assert result.summary == "Found 1 flight deals from DEL"
    assert result.data["deals"][0]["price"]["amount"] == "₹8,764"
    assert client.calls == [("flights.test", "/deals", {"query": "DEL", "limit": 5})]


def test_count_items_handles_common_shapes() -> None:
    assert count_items([1, 2, 3]) == 3
    assert count_items({"data": [1, 2]}) == 2
    assert count_items({"deals": [1]}) == 1
    assert count_items({"data": {"train": "12951"}}) == 0
    assert count_items(None) == 0
