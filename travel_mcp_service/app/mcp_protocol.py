from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

JSONRPC_VERSION = "2.0"
MCP_PROTOCOL_VERSION = "2024-11-05"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
UNAUTHORIZED = -32001

RequestId = str | int | float | None


class RpcError(Exception):
    """JSON-RPC error 객체로 그대로 변환되는 예외예요."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, *, data: Any = None, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.data = data
        if code is not None:
            self.code = code


class ParseError(RpcError):
    code = PARSE_ERROR


class InvalidRequest(RpcError):
    code = INVALID_REQUEST


class InvalidVersion(InvalidRequest):
    def __init__(self, version: object) -> None:
        super().__init__("Invalid JSON-RPC version", data=f"expected {JSONRPC_VERSION!r}, got {version!r}")


class MethodNotFound(RpcError):
    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        super().__init__(f"Method not found: {method}")


class UnknownTool(RpcError):
    code = METHOD_NOT_FOUND

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown tool: {name}")


class InvalidParams(RpcError):
    code = INVALID_PARAMS


class Unauthorized(RpcError):
    code = UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__("Unauthorized")


@dataclass(slots=True, frozen=True)
class RpcRequest:
    method: str
    params: dict[str, Any] = field(default_factory=dict)
    id: RequestId = None
    # id 멤버가 아예 없으면 알림(notification)이에요. id가 null인 요청과 구분해요.
    has_id: bool = False


def _is_valid_id(value: object) -> bool:
    # bool은 int의 하위 타입이라 따로 걸러요. NaN/Infinity는 응답에 다시 쓸 수 없어요.
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, (str, int))


def extract_request_id(item: object) -> RequestId:
    """응답에 되돌려 줄 id를 꺼내요. 형식이 잘못됐으면 None이에요."""
    if not isinstance(item, dict):
        return None
    value = item.get("id")
    return value if _is_valid_id(value) else None


def parse_rpc_request(item: object) -> RpcRequest:
    if not isinstance(item, dict):
        raise InvalidRequest("Invalid Request", data="request must be a JSON object")

    # 버전 필드는 jsonrpc가 기본이고, 일부 클라이언트가 보내는 protocolVersion도 받아요.
    version = item["jsonrpc"] if "jsonrpc" in item else item.get("protocolVersion")
    if version != JSONRPC_VERSION:
        raise InvalidVersion(version)

    raw_id = item.get("id")
    if raw_id is not None and not _is_valid_id(raw_id):
        raise InvalidRequest("Invalid Request", data="id must be a string, number or null")

    method = item.get("method")
    if not isinstance(method, str) or not method:
        raise InvalidRequest("Invalid Request", data="method must be a non-empty string")

    params = item.get("params")
    if params is None:
        params = {}
    elif not isinstance(params, dict):
        raise InvalidParams("Invalid params", data="params must be a JSON object")

    return RpcRequest(method=method, params=params, id=raw_id, has_id="id" in item)


def success_envelope(result: Any, request_id: RequestId) -> dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "result": result, "id": request_id}


def acknowledgement_envelope(request_id: RequestId) -> dict[str, Any]:
    """알림 메서드용 빈 수신 확인이에요. result도 error도 담지 않아요."""
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id}


def error_envelope(code: int, message: str, request_id: RequestId, data: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "error": error, "id": request_id}


def rpc_error_envelope(exc: RpcError, request_id: RequestId) -> dict[str, Any]:
    return error_envelope(exc.code, exc.message, request_id, exc.data)
