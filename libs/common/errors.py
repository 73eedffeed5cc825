from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(slots=True)
class ErrorEnvelope:
    error_code: str
    message: str
    trace_id: str
    retryable: bool


class DomainError(Exception):
    def __init__(self, error_code: str, message: str, retryable: bool = False) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.retryable = retryable


class AuthenticationError(DomainError):
    def __init__(self, message: str = "인증에 실패했어요.") -> None:
        super().__init__("AUTH_FAILED", message, retryable=False)


class ValidationError(DomainError):
    def __init__(self, message: str = "검증에 실패했어요.") -> None:
        super().__init__("VALIDATION_FAILED", message, retryable=False)


class UpstreamError(DomainError):
    def __init__(self, message: str = "외부 데이터 제공자 요청에 실패했어요.", retryable: bool = True) -> None:
        super().__init__("UPSTREAM_ERROR", message, retryable=retryable)


class RateLimitError(DomainError):
    def __init__(self, message: str = "요청 제한을 초과했어요.") -> None:
        super().__init__("RATE_LIMITED", message, retryable=True)


class TimeoutError(DomainError):
    def __init__(self, message: str = "작업 시간이 초과됐어요.") -> None:
        super().__init__("TIMEOUT", message, retryable=True)


class ConfigurationError(DomainError):
    def __init__(self, message: str = "설정이 올바르지 않아요.") -> None:
        super().__init__("CONFIGURATION_ERROR", message, retryable=False)


# REST 응답에서 사용할 상태 코드예요. 목록에 없으면 400을 사용해요.
ERROR_STATUS_CODES: dict[str, int] = {
    "AUTH_FAILED": 401,
    "VALIDATION_FAILED": 400,
    "RATE_LIMITED": 429,
    "UPSTREAM_ERROR": 502,
    "TIMEOUT": 504,
    "CONFIGURATION_ERROR": 500,
}


def status_code_for(error: DomainError) -> int:
    return ERROR_STATUS_CODES.get(error.error_code, 400)


def build_error_envelope(error_code: str, message: str, retryable: bool) -> ErrorEnvelope:
    return ErrorEnvelope(
        error_code=error_code,
        message=message,
        trace_id=str(uuid.uuid4()),
        retryable=retryable,
    )
