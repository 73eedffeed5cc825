from __future__ import annotations

import httpx
from fastapi import FastAPI

from libs.common.http_handlers import register_exception_handlers
from libs.common.logging import configure_logging
from travel_mcp_service.app.settings import Settings
from travel_mcp_service.bootstrap.lifespan import create_lifespan
from travel_mcp_service.modules import build_api_router


def create_app(
    settings: Settings,
    *,
    upstream_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    app = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        lifespan=create_lifespan(settings, upstream_transport=upstream_transport),
    )
    app.state.settings = settings
    app.include_router(build_api_router())
    register_exception_handlers(app, "travel_mcp_service.errors")
    return app


settings = Settings()
configure_logging(settings.log_level)

app = create_app(settings)
