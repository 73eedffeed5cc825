from __future__ import annotations

import sys

import uvicorn

from libs.common.errors import ConfigurationError
from libs.common.logging import configure_logging, get_logger
from travel_mcp_service.app.settings import Settings


def _run(*, reload_enabled: bool) -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    logger = get_logger("travel_mcp_service.cli")
    try:
        settings.require_bearer_token()
    except ConfigurationError as exc:
        logger.error("startup_aborted", reason=exc.message)
        sys.exit(1)

    logger.info("mcp_endpoint_ready", host=settings.host, port=settings.port, path="/mcp")
    uvicorn.run(
        "travel_mcp_service.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload_enabled,
    )


def main() -> None:
    _run(reload_enabled=False)


def main_dev() -> None:
    _run(reload_enabled=True)
