from __future__ import annotations

import asyncio
from typing import Any

import pytest

from travel_mcp_service.app.flight_deals import FlightDealsService
from travel_mcp_service.app.irctc_service import IrctcService
from travel_mcp_service.app.mcp_auth import McpAuthGate
from travel_mcp_service.app.mcp_server import McpServer
from travel_mcp_service.app.rapidapi_client import QueryParams, RapidApiClient
from travel_mcp_service.app.settings import Settings
from travel_mcp_service.app.tools.defaults import build_default_tool_dispatcher

TEST_TOKEN = "test-token"
IRCTC_HOST = "irctc.test"
FLIGHTS_HOST = "flights.test"


class StubRapidApiClient(RapidApiClient):
    """경로별로 미리 정한 응답을 돌려주는 업스트림 스텁이에요."""

    def __init__(self, responses: dict[str, Any] | None = None, delays: dict[str, float] | None = None) -> None:
        super().__init__(api_key="test-key", timeout_seconds=3.0)
        self._responses = responses or {}
        self._delays = delays or {}
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    async def fetch(self, host: str, path: str, params: QueryParams | None = None) -> Any:
        query = dict(params or {})
        self.calls.append((host, path, query))
        delay = self._delays.get(str(query.get("query")))
        if delay:
            await asyncio.sleep(delay)
        response = self._responses.get(path)
        if isinstance(response, Exception):
            raise response
        return response


def build_test_server(client: RapidApiClient, *, token: str = TEST_TOKEN) -> McpServer:
    irctc = IrctcService(client=client, host=IRCTC_HOST)
    flights = FlightDealsService(client=client, host=FLIGHTS_HOST, deals_path="/deals")
    return McpServer(
        tool_dispatcher=build_default_tool_dispatcher(irctc=irctc, flights=flights),
        auth_gate=McpAuthGate(token=token),
        server_name="mcp-train-flight-server",
        server_version="1.0.0",
    )


@pytest.fixture
def test_settings() -> Settings:
    """테스트용 토큰과 호스트가 채워진 설정이에요."""
    return Settings(
        api_bearer_token=TEST_TOKEN,
        rapidapi_key="test-key",
        irctc_api_host=IRCTC_HOST,
        flights_api_host=FLIGHTS_HOST,
        flights_deals_path="/deals",
    )


@pytest.fixture
def auth_header() -> dict[str, str]:
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
