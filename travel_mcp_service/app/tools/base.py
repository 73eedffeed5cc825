"""`tools/call`로 호출되는 도구의 추상 기반 클래스예요.

새 도구를 추가하려면 `BaseTool`을 상속하고 `name`, `description`,
`input_schema`, `arguments_model`, `execute`를 구현하면 돼요.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, ClassVar

import pydantic
from pydantic import BaseModel, ConfigDict

from libs.common.errors import ValidationError


class ToolArguments(BaseModel):
    """도구 인자 모델의 기반이에요. 선언하지 않은 필드는 거부하고, 숫자로 온 코드 값은 문자열로 받아요."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, coerce_numbers_to_str=True)


@dataclass(slots=True)
class ToolResult:
    """도구 실행 결과를 담는 컨테이너예요."""

    summary: str
    """사람이 읽는 한 줄 요약이에요 (건수나 대상)."""

    data: Any
    """업스트림에서 받은 구조화된 데이터예요."""

    def to_content(self) -> dict[str, Any]:
        return {
            "content": [
                {
                    "type": "text",
                    "text": self.summary,
                    "data": self.data,
                }
            ]
        }


def count_items(payload: Any) -> int:
    """업스트림 응답에서 결과 건수를 세요. 목록이 아니면 0이에요."""
    if isinstance(payload, list):
        return len(payload)
    if isinstance(payload, dict):
        for key in ("data", "deals"):
            value = payload.get(key)
            if isinstance(value, list):
                return len(value)
    return 0


class BaseTool(abc.ABC):
    """모든 도구가 구현해야 하는 추상 클래스예요.

    확장 방법:
        1. `BaseTool`을 상속하는 클래스를 만들어요.
        2. `name`, `description`, `input_schema` 프로퍼티와 `arguments_model`을 정의해요.
        3. `execute` 메서드에서 업스트림 작업 하나를 호출해요.
        4. `ToolDispatcher.register()`로 등록하면 끝이에요.
    """

    arguments_model: ClassVar[type[ToolArguments]]

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """도구의 고유 이름이에요. LLM이 호출할 때 사용돼요."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """도구가 무엇을 하는지 설명하는 문장이에요. LLM에게 전달돼요."""

    @property
    @abc.abstractmethod
    def input_schema(self) -> dict[str, Any]:
        """`tools/list`에 노출되는 JSON Schema예요. 호출 시 검증에는 쓰지 않아요."""

    @abc.abstractmethod
    async def execute(self, arguments: Any) -> ToolResult:
        """검증된 인자로 업스트림 작업을 실행해요.

        Args:
            arguments: `arguments_model` 인스턴스예요.

        Returns:
            요약과 원본 데이터를 담은 `ToolResult` 인스턴스예요.
        """

    def parse_arguments(self, arguments: dict[str, Any]) -> ToolArguments:
        try:
            return self.arguments_model.model_validate(arguments)
        except pydantic.ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}"
                for error in exc.errors()
            )
            raise ValidationError(f"{self.name} 인자가 올바르지 않아요: {problems}") from exc

    def to_descriptor(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }
