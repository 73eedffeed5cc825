from __future__ import annotations

from travel_mcp_service.modules.common.deps import (
    get_flight_deals_service,
    get_irctc_service,
    get_mcp_server,
    get_settings,
    require_auth,
)

__all__ = [
    "get_flight_deals_service",
    "get_irctc_service",
    "get_mcp_server",
    "get_settings",
    "require_auth",
]
