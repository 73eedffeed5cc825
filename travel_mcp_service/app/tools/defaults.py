"""기본 도구를 등록한 ToolDispatcher를 생성하는 팩토리예요."""

from __future__ import annotations

from travel_mcp_service.app.flight_deals import FlightDealsService
from travel_mcp_service.app.irctc_service import IrctcService
from travel_mcp_service.app.tools.dispatcher import ToolDispatcher
from travel_mcp_service.app.tools.flights import SearchFlightsTool
from travel_mcp_service.app.tools.trains import (
    PnrStatusTool,
    SearchStationsTool,
    SearchTrainsTool,
    SeatAvailabilityTool,
    TrainScheduleTool,
)


def build_default_tool_dispatcher(*, irctc: IrctcService, flights: FlightDealsService) -> ToolDispatcher:
    """6개 기본 도구가 등록되고 잠긴 `ToolDispatcher`를 생성해요.

    Args:
        irctc: 열차 도구가 공유하는 IRCTC 서비스예요.
        flights: 항공권 딜 서비스예요.
    """
    dispatcher = ToolDispatcher()
    dispatcher.register(SearchTrainsTool(irctc=irctc))
    dispatcher.register(SearchStationsTool(irctc=irctc))
    dispatcher.register(PnrStatusTool(irctc=irctc))
    dispatcher.register(TrainScheduleTool(irctc=irctc))
    dispatcher.register(SeatAvailabilityTool(irctc=irctc))
    dispatcher.register(SearchFlightsTool(flights=flights))
    dispatcher.freeze()
    return dispatcher
