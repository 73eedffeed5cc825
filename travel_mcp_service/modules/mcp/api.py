from __future__ import annotations

from fastapi import APIRouter, Header, Request, Response, status
from fastapi.responses import JSONResponse

from libs.common.logging import get_logger
from travel_mcp_service.app.mcp_payload import normalize_payload
from travel_mcp_service.app.mcp_protocol import ParseError, rpc_error_envelope
from travel_mcp_service.modules.common.deps import get_mcp_server

router = APIRouter()
logger = get_logger("travel_mcp_service.modules.mcp")


@router.post("/mcp")
async def mcp_endpoint(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Response:
    # 일부 클라이언트 전송 계층은 2xx가 아닌 응답 본문을 버려요. 실패도 항상 200으로 돌려줘요.
    body = await request.body()
    try:
        payload = normalize_payload(body)
    except ParseError as exc:
        logger.warning("mcp_parse_error", detail=exc.data, body_bytes=len(body))
        return JSONResponse(content=rpc_error_envelope(exc, None))

    response = await get_mcp_server(request).handle_payload(payload, authorization=authorization)
    if response is None:
        return Response(status_code=status.HTTP_202_ACCEPTED)
    return JSONResponse(content=response)
