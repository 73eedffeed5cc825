from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from libs.common.errors import (
    ConfigurationError,
    RateLimitError,
    TimeoutError,
    UpstreamError,
)
from libs.common.logging import get_logger

logger = get_logger("travel_mcp_service.upstream")

QueryParams = Mapping[str, str | int | None]


class RapidApiClient:
    """RapidAPI 호스트로 GET 요청을 보내고 JSON 본문을 돌려주는 클라이언트예요.

    재시도나 서킷 브레이커는 두지 않아요. 타임아웃은 생성 시 받은 값만 사용해요.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = httpx.AsyncClient(timeout=timeout_seconds, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self, host: str, path: str, params: QueryParams | None = None) -> Any:
        if not host:
            raise ConfigurationError("업스트림 API 호스트가 설정되지 않았어요.")

        query = {key: str(value) for key, value in (params or {}).items() if value is not None}
        headers = {
            "x-rapidapi-key": self._api_key,
            "x-rapidapi-host": host,
        }

        try:
            response = await self._client.get(f"https://{host}{path}", params=query, headers=headers)
        except httpx.TimeoutException as exc:
            logger.warning("upstream_request_timeout", host=host, path=path)
            raise TimeoutError("업스트림 API 요청이 시간 초과됐어요.") from exc
        except httpx.HTTPError as exc:
            logger.warning("upstream_request_failed", host=host, path=path, error=str(exc))
            raise UpstreamError("업스트림 API 연결에 실패했어요.") from exc

        if response.status_code == 429:
            raise RateLimitError("업스트림 API 요청 제한을 초과했어요.")
        if response.status_code >= 500:
            raise UpstreamError(f"업스트림 API 서버 오류가 발생했어요. (HTTP {response.status_code})")
        if response.status_code >= 400:
            raise UpstreamError(
                f"업스트림 API가 요청을 거부했어요. (HTTP {response.status_code})",
                retryable=False,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamError("업스트림 API 응답 형식이 올바르지 않아요.", retryable=False) from exc

        _raise_for_provider_error(body)
        return body


def _raise_for_provider_error(body: Any) -> None:
    # 제공자는 HTTP 200과 함께 {"status": false, "message": ...} 로 실패를 알려요.
    if not isinstance(body, dict) or body.get("status") is not False:
        return
    message_value = body.get("message")
    message = message_value if isinstance(message_value, str) and message_value else "업스트림 API가 오류를 반환했어요."
    raise UpstreamError(message, retryable=False)
