from __future__ import annotations

import secrets

from libs.common.logging import get_logger
from travel_mcp_service.app.mcp_protocol import Unauthorized

logger = get_logger("travel_mcp_service.auth")

BEARER_PREFIX = "Bearer "

# 인증 정보를 주고받기 전에 핸드셰이크와 생존 확인은 통과시켜요.
AUTH_EXEMPT_METHODS: frozenset[str] = frozenset(
    {
        "initialize",
        "notifications/initialized",
        "ping",
    }
)


def bearer_token_matches(authorization: str | None, expected_token: str) -> bool:
    """``Authorization`` 헤더가 ``Bearer <token>`` 형태이고 토큰이 정확히 같은지 확인해요."""
    if not expected_token or not authorization or not authorization.startswith(BEARER_PREFIX):
        return False
    presented = authorization[len(BEARER_PREFIX) :]
    return secrets.compare_digest(presented.encode("utf-8"), expected_token.encode("utf-8"))


class McpAuthGate:
    def __init__(self, *, token: str, exempt_methods: frozenset[str] = AUTH_EXEMPT_METHODS) -> None:
        self._token = token
        self._exempt_methods = exempt_methods

    def is_exempt(self, method: str) -> bool:
        return method in self._exempt_methods

    def check(self, method: str, authorization: str | None) -> None:
        """인증에 실패하면 `Unauthorized`를 올려요. 헤더 누락과 토큰 불일치는 구분하지 않아요."""
        if self.is_exempt(method):
            return
        if bearer_token_matches(authorization, self._token):
            return
        logger.warning(
            "mcp_unauthorized",
            method=method,
            has_authorization=bool(authorization),
        )
        raise Unauthorized()
