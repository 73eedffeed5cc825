from travel_mcp_service.app.tools.base import BaseTool, ToolResult
from travel_mcp_service.app.tools.dispatcher import ToolDispatcher

__all__ = [
    "BaseTool",
    "ToolDispatcher",
    "ToolResult",
]
