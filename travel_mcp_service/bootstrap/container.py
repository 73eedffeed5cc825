from __future__ import annotations

from dataclasses import dataclass

import httpx

from travel_mcp_service.app.flight_deals import FlightDealsService
from travel_mcp_service.app.irctc_service import IrctcService
from travel_mcp_service.app.mcp_auth import McpAuthGate
from travel_mcp_service.app.mcp_server import McpServer
from travel_mcp_service.app.rapidapi_client import RapidApiClient
from travel_mcp_service.app.settings import Settings
from travel_mcp_service.app.tools.defaults import build_default_tool_dispatcher
from travel_mcp_service.app.tools.dispatcher import ToolDispatcher


@dataclass(slots=True)
class RuntimeComponents:
    upstream_client: RapidApiClient
    irctc_service: IrctcService
    flight_deals_service: FlightDealsService
    tool_dispatcher: ToolDispatcher
    mcp_server: McpServer


def build_runtime_components(
    settings: Settings,
    *,
    upstream_transport: httpx.AsyncBaseTransport | None = None,
) -> RuntimeComponents:
    bearer_token = settings.require_bearer_token()

    upstream_client = RapidApiClient(
        api_key=settings.rapidapi_key,
        timeout_seconds=settings.upstream_timeout_seconds,
        transport=upstream_transport,
    )
    irctc_service = IrctcService(client=upstream_client, host=settings.irctc_api_host)
    flight_deals_service = FlightDealsService(
        client=upstream_client,
        host=settings.flights_api_host,
        deals_path=settings.flights_deals_path,
    )

    tool_dispatcher = build_default_tool_dispatcher(irctc=irctc_service, flights=flight_deals_service)
    mcp_server = McpServer(
        tool_dispatcher=tool_dispatcher,
        auth_gate=McpAuthGate(token=bearer_token),
        server_name=settings.service_name,
        server_version=settings.service_version,
    )

    return RuntimeComponents(
        upstream_client=upstream_client,
        irctc_service=irctc_service,
        flight_deals_service=flight_deals_service,
        tool_dispatcher=tool_dispatcher,
        mcp_server=mcp_server,
    )
