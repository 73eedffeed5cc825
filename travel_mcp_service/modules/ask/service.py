"""자유 텍스트 질의를 항공편/열차 조회로 라우팅하는 간단한 휴리스틱이에요."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from travel_mcp_service.app.irctc_service import IrctcService
from travel_mcp_service.app.sample_flights import list_sample_flights

_FROM_PATTERN = re.compile(r"\bfrom\s+(\w+)")
_TO_PATTERN = re.compile(r"\bto\s+(\w+)")


@dataclass(slots=True)
class AskAnswer:
    message: str
    data: Any = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"status": True, "message": self.message, "data": self.data}


def extract_route(query: str) -> tuple[str, str] | None:
    """``trains from delhi to mumbai`` 에서 (DELHI, MUMBAI)를 꺼내요."""
    lowered = query.lower()
    from_match = _FROM_PATTERN.search(lowered)
    to_match = _TO_PATTERN.search(lowered)
    if from_match is None or to_match is None:
        return None
    return from_match.group(1).upper(), to_match.group(1).upper()


class AskService:
    def __init__(self, *, irctc: IrctcService) -> None:
        self._irctc = irctc

    async def answer(self, query: str) -> AskAnswer:
        lowered = query.lower()

        if "flight" in lowered:
            if "delayed" in lowered:
                return AskAnswer("Here are the delayed flights:", list_sample_flights(status="Delayed"))
            return AskAnswer("Here are the available flights:", list_sample_flights())

        if "train" in lowered:
            route = extract_route(query)
            if route is None:
                return AskAnswer(
                    'Please specify source and destination stations, e.g., "trains from delhi to mumbai"'
                )
            from_station, to_station = route
            trains = await self._irctc.trains_between_stations(from_station, to_station)
            return AskAnswer(f"Here are the trains from {from_station} to {to_station}:", trains)

        return AskAnswer("I can help you with flight and train information. Try asking about trains or flights.")
