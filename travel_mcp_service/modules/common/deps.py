from __future__ import annotations

from fastapi import HTTPException, Request, status

from libs.common.errors import AuthenticationError
from travel_mcp_service.app.flight_deals import FlightDealsService
from travel_mcp_service.app.irctc_service import IrctcService
from travel_mcp_service.app.mcp_auth import bearer_token_matches
from travel_mcp_service.app.mcp_server import McpServer
from travel_mcp_service.app.settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]


def require_auth(request: Request, authorization: str) -> None:
    # REST 표면은 DomainError 핸들러를 거쳐 401 오류 봉투로 응답해요.
    if not bearer_token_matches(authorization, get_settings(request).api_bearer_token):
        raise AuthenticationError("유효한 Bearer 토큰을 Authorization 헤더에 포함해 주세요.")


def get_mcp_server(request: Request) -> McpServer:
    mcp_server = getattr(request.app.state, "mcp_server", None)
    if not isinstance(mcp_server, McpServer):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="MCP 서버를 사용할 수 없어요.")
    return mcp_server


def get_irctc_service(request: Request) -> IrctcService:
    return request.app.state.irctc_service  # type: ignore[no-any-return]


def get_flight_deals_service(request: Request) -> FlightDealsService:
    return request.app.state.flight_deals_service  # type: ignore[no-any-return]
