"""`tools/call` 요청을 도구 이름으로 찾아 실행하는 디스패처예요."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from libs.common.errors import ConfigurationError
from libs.common.logging import get_logger
from travel_mcp_service.app.mcp_protocol import UnknownTool
from travel_mcp_service.app.tools.base import BaseTool, ToolResult

logger = get_logger("travel_mcp_service.tools")


class ToolDispatcher:
    """도구를 이름으로 관리하는 레지스트리 겸 디스패처예요.

    시작 시점에 `register()`로 도구를 채우고 `freeze()`로 잠그면
    이후에는 읽기 전용으로만 쓰여요.

    사용법::

        dispatcher = ToolDispatcher()
        dispatcher.register(SearchStationsTool(irctc=irctc_service))
        dispatcher.freeze()

        # tools/list 응답용 카탈로그
        descriptors = dispatcher.to_descriptors()

        # 이름으로 도구 실행
        result = await dispatcher.call("search_stations", {"query": "del"})
    """

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}
        self._frozen: Mapping[str, BaseTool] | None = None

    def register(self, tool: BaseTool) -> None:
        """도구를 등록해요. 같은 이름이 이미 있거나 잠긴 뒤라면 설정 오류예요."""
        if self._frozen is not None:
            raise ConfigurationError("도구 카탈로그는 시작 이후에 바꿀 수 없어요.")
        if tool.name in self._tools:
            raise ConfigurationError(f"도구 이름이 중복됐어요: {tool.name}")
        self._tools[tool.name] = tool

    def freeze(self) -> None:
        self._frozen = MappingProxyType(dict(self._tools))

    @property
    def tools(self) -> Mapping[str, BaseTool]:
        return self._frozen if self._frozen is not None else MappingProxyType(self._tools)

    def get(self, name: str) -> BaseTool | None:
        return self.tools.get(name)

    def list_names(self) -> list[str]:
        return list(self.tools.keys())

    def to_descriptors(self) -> list[dict[str, Any]]:
        return [tool.to_descriptor() for tool in self.tools.values()]

    async def call(self, name: object, arguments: dict[str, Any]) -> ToolResult:
        """이름으로 도구를 찾아 실행해요.

        등록되지 않은 이름이면 `UnknownTool`을 올리고, 업스트림 오류는 그대로 전파해요.
        """
        tool = self.tools.get(name) if isinstance(name, str) else None
        if tool is None:
            raise UnknownTool(name)

        parsed = tool.parse_arguments(arguments)
        logger.info("tool_call_started", tool=tool.name)
        return await tool.execute(parsed)

    def __len__(self) -> int:
        return len(self.tools)

    def __contains__(self, name: str) -> bool:
        return name in self.tools
