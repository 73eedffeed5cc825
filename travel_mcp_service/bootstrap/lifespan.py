from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from libs.common.logging import get_logger
from travel_mcp_service.app.settings import Settings
from travel_mcp_service.bootstrap.container import build_runtime_components

logger = get_logger("travel_mcp_service.lifespan")


def create_lifespan(settings: Settings, *, upstream_transport: httpx.AsyncBaseTransport | None = None):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # 토큰이 없으면 여기서 ConfigurationError가 나서 서버가 뜨지 않아요.
        runtime = build_runtime_components(settings, upstream_transport=upstream_transport)

        app.state.settings = settings
        app.state.irctc_service = runtime.irctc_service
        app.state.flight_deals_service = runtime.flight_deals_service
        app.state.mcp_server = runtime.mcp_server
        logger.info(
            "service_started",
            service=settings.service_name,
            version=settings.service_version,
            tools=runtime.tool_dispatcher.list_names(),
        )

        try:
            yield
        finally:
            await runtime.upstream_client.aclose()

    return lifespan
