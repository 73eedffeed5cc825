"""JSON-RPC 메서드 레지스트리와 요청 디스패치예요.

정규화된 본문 하나(객체 또는 배치 배열)를 받아서 항상 완결된 JSON-RPC
응답 봉투를 만들어요. 핸들러 안에서 난 오류는 모두 여기서 error 객체로
바뀌고, 전송 계층까지 올라가지 않아요.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from libs.common.errors import ConfigurationError, DomainError, ValidationError
from libs.common.logging import get_logger
from travel_mcp_service.app.mcp_auth import McpAuthGate
from travel_mcp_service.app.mcp_protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    MCP_PROTOCOL_VERSION,
    InvalidParams,
    InvalidRequest,
    MethodNotFound,
    RpcError,
    acknowledgement_envelope,
    error_envelope,
    extract_request_id,
    parse_rpc_request,
    rpc_error_envelope,
    success_envelope,
)
from travel_mcp_service.app.tools.dispatcher import ToolDispatcher

logger = get_logger("travel_mcp_service.mcp")

MethodHandler = Callable[[dict[str, Any]], Awaitable[Any]]


@dataclass(slots=True, frozen=True)
class RegisteredMethod:
    name: str
    handler: MethodHandler
    # 알림 핸들러는 동작만 하고 의미 있는 결과를 돌려주지 않아요.
    notification: bool = False


class MethodRegistry:
    """메서드 이름 → 핸들러 매핑이에요. 생성 후에는 바뀌지 않아요."""

    def __init__(self, methods: list[RegisteredMethod]) -> None:
        table: dict[str, RegisteredMethod] = {}
        for method in methods:
            if method.name in table:
                raise ConfigurationError(f"JSON-RPC 메서드 이름이 중복됐어요: {method.name}")
            table[method.name] = method
        self._methods: Mapping[str, RegisteredMethod] = MappingProxyType(table)

    def get(self, name: str) -> RegisteredMethod | None:
        return self._methods.get(name)

    def names(self) -> list[str]:
        return list(self._methods.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._methods


def error_code_for(exc: Exception) -> int:
    if isinstance(exc, RpcError):
        return exc.code
    if isinstance(exc, ValidationError):
        return INVALID_PARAMS
    return INTERNAL_ERROR


def failure_envelope(exc: Exception, request_id: Any) -> dict[str, Any]:
    if isinstance(exc, RpcError):
        return rpc_error_envelope(exc, request_id)
    if isinstance(exc, DomainError):
        return error_envelope(
            error_code_for(exc),
            exc.message,
            request_id,
            {"error_code": exc.error_code, "retryable": exc.retryable},
        )
    return error_envelope(INTERNAL_ERROR, "Internal error", request_id, str(exc) or type(exc).__name__)


class McpServer:
    def __init__(
        self,
        *,
        tool_dispatcher: ToolDispatcher,
        auth_gate: McpAuthGate,
        server_name: str,
        server_version: str,
    ) -> None:
        self._tools = tool_dispatcher
        self._auth_gate = auth_gate
        self._server_name = server_name
        self._server_version = server_version
        self._registry = MethodRegistry(
            [
                RegisteredMethod("initialize", self._handle_initialize),
                RegisteredMethod("tools/list", self._handle_tools_list),
                RegisteredMethod("tools/call", self._handle_tools_call),
                RegisteredMethod("notifications/initialized", self._handle_initialized, notification=True),
                RegisteredMethod("ping", self._handle_ping),
            ]
        )

    @property
    def registry(self) -> MethodRegistry:
        return self._registry

    async def handle_payload(self, payload: Any, *, authorization: str | None) -> Any:
        """정규화된 본문을 처리해요.

        배열이면 각 요청을 동시에 실행하고, 입력 순서대로 응답 배열을 돌려줘요.
        id 없이 온 단일 알림은 ``None``을 돌려줘서 본문 없이 응답하게 해요.
        """
        if isinstance(payload, list):
            if not payload:
                return rpc_error_envelope(InvalidRequest("Invalid Request", data="empty batch"), None)
            # gather는 완료 순서와 상관없이 입력 순서대로 결과를 모아요.
            return list(
                await asyncio.gather(*(self.handle_request(item, authorization=authorization) for item in payload))
            )

        if isinstance(payload, dict) and self._is_silent_notification(payload):
            response = await self.handle_request(payload, authorization=authorization)
            return response if "error" in response else None
        return await self.handle_request(payload, authorization=authorization)

    async def handle_request(self, item: Any, *, authorization: str | None) -> dict[str, Any]:
        request_id = extract_request_id(item)
        try:
            request = parse_rpc_request(item)
            self._auth_gate.check(request.method, authorization)
            method = self._resolve(request.method)
            logger.info("mcp_request_dispatched", method=request.method, request_id=request.id)
            result = await method.handler(request.params)
        except Exception as exc:
            if not isinstance(exc, (RpcError, DomainError)):
                logger.exception("mcp_handler_failed", request_id=request_id, error=str(exc))
            else:
                logger.info(
                    "mcp_request_failed",
                    request_id=request_id,
                    error_type=type(exc).__name__,
                    code=error_code_for(exc),
                )
            return failure_envelope(exc, request_id)

        if method.notification:
            return acknowledgement_envelope(request.id)
        return success_envelope(result, request.id)

    def _resolve(self, name: str) -> RegisteredMethod:
        method = self._registry.get(name)
        if method is None:
            raise MethodNotFound(name)
        return method

    def _is_silent_notification(self, item: dict[str, Any]) -> bool:
        method_name = item.get("method")
        if "id" in item or not isinstance(method_name, str):
            return False
        method = self._registry.get(method_name)
        return method is not None and method.notification

    async def _handle_initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        client_info = params.get("clientInfo")
        if isinstance(client_info, dict):
            logger.info(
                "mcp_client_initialized",
                client_name=client_info.get("name"),
                client_version=client_info.get("version"),
            )
        return {
            "protocolVersion": MCP_PROTOCOL_VERSION,
            "capabilities": {
                "tools": {"listChanged": False},
                "resources": {"subscribe": False, "listChanged": False},
                "prompts": {"listChanged": False},
                "logging": {},
            },
            "serverInfo": {
                "name": self._server_name,
                "version": self._server_version,
            },
        }

    async def _handle_tools_list(self, params: dict[str, Any]) -> dict[str, Any]:
        del params
        return {"tools": self._tools.to_descriptors()}

    async def _handle_tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        unexpected = set(params) - {"name", "arguments", "_meta"}
        if unexpected:
            raise InvalidParams("Invalid params", data=f"unexpected fields: {', '.join(sorted(unexpected))}")

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            raise InvalidParams("Invalid params", data="arguments must be a JSON object")

        result = await self._tools.call(params.get("name"), arguments)
        return result.to_content()

    async def _handle_initialized(self, params: dict[str, Any]) -> None:
        del params
        logger.info("mcp_session_initialized")

    async def _handle_ping(self, params: dict[str, Any]) -> str:
        del params
        return "pong"
