from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from libs.common.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    service_name: str = "mcp-train-flight-server"
    service_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 10000
    log_level: str = "INFO"
    # 기존 배포 환경변수 이름(API_BEARER_TOKEN, RAPIDAPI_KEY)도 그대로 받아요.
    api_bearer_token: str = Field(
        default="",
        validation_alias=AliasChoices("GATEWAY_API_BEARER_TOKEN", "API_BEARER_TOKEN", "api_bearer_token"),
    )
    rapidapi_key: str = Field(
        default="",
        validation_alias=AliasChoices("GATEWAY_RAPIDAPI_KEY", "RAPIDAPI_KEY", "rapidapi_key"),
    )
    irctc_api_host: str = "irctc1.p.rapidapi.com"
    flights_api_host: str = ""
    flights_deals_path: str = "/api/v1/flights/deals"
    upstream_timeout_seconds: float = 15.0

    @field_validator("api_bearer_token", "rapidapi_key", mode="before")
    @classmethod
    def _strip_secret(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    def require_bearer_token(self) -> str:
        """프로세스 시작 전에 인증 토큰이 설정됐는지 확인해요."""
        if not self.api_bearer_token:
            raise ConfigurationError("API_BEARER_TOKEN 환경변수가 설정되지 않았어요.")
        return self.api_bearer_token
