from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header, Request
from pydantic import BaseModel

from libs.common.errors import ValidationError
from libs.common.logging import get_logger
from travel_mcp_service.modules.ask.service import AskService
from travel_mcp_service.modules.common.deps import get_irctc_service, require_auth

router = APIRouter()
logger = get_logger("travel_mcp_service.modules.ask")


class AskRequest(BaseModel):
    query: str | None = None


@router.post("/ask")
async def ask(
    request: Request,
    req: AskRequest,
    authorization: str = Header(default=""),
) -> dict[str, Any]:
    require_auth(request, authorization)
    if not req.query or not req.query.strip():
        raise ValidationError("Query is required")

    answer = await AskService(irctc=get_irctc_service(request)).answer(req.query)
    logger.info("ask_answered", query_length=len(req.query), message=answer.message)
    return answer.to_dict()
