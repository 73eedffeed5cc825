"""HTTP 본문을 JSON-RPC 요청 값으로 복원하는 정규화 로직이에요.

에이전트 프레임워크가 JSON-RPC 봉투를 문자열로 한 번 더 인코딩해서 보내는
경우가 잦아서, 정해진 횟수만큼만 다시 파싱을 시도해요.

1. 본문 그대로 ``json.loads``
2. 실패하면 감싼 따옴표를 벗기고 ``\\"`` / ``\\\\`` 이스케이프를 풀어서 한 번 더
3. 결과가 여전히 문자열이면 딱 한 번 더 파싱

모든 시도가 실패하면 `ParseError`를 올려요.
"""

from __future__ import annotations

import json
import re
from typing import Any

from travel_mcp_service.app.mcp_protocol import ParseError

_WRAPPING_QUOTES = re.compile(r'^"+|"+$')


def unescape_payload_text(text: str) -> str:
    return _WRAPPING_QUOTES.sub("", text).replace('\\"', '"').replace("\\\\", "\\")


def _reject_constant(name: str) -> Any:
    # NaN/Infinity는 JSON 응답으로 다시 직렬화할 수 없어요.
    raise ValueError(f"Non-finite number is not allowed: {name}")


def _loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def normalize_payload(body: Any) -> Any:
    if isinstance(body, (bytes, bytearray)):
        try:
            body = bytes(body).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError("Parse error", data=f"Invalid JSON: {exc}") from exc

    if not isinstance(body, str):
        return body

    try:
        decoded = _loads(body)
    except ValueError as first_exc:
        try:
            decoded = _loads(unescape_payload_text(body))
        except ValueError as exc:
            raise ParseError("Parse error", data=f"Invalid JSON: {exc}") from first_exc

    if isinstance(decoded, str):
        try:
            decoded = _loads(decoded)
        except ValueError:
            # 더 풀 수 없는 문자열은 그대로 넘겨서 Invalid Request로 응답해요.
            return decoded
    return decoded
