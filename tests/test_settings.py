from __future__ import annotations

from typing import Any

import pytest

from libs.common.errors import ConfigurationError
from travel_mcp_service import cli
from travel_mcp_service.app.settings import Settings
from travel_mcp_service.bootstrap import build_runtime_components

TOKEN_ENV_NAMES = ("API_BEARER_TOKEN", "GATEWAY_API_BEARER_TOKEN")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (*TOKEN_ENV_NAMES, "RAPIDAPI_KEY", "GATEWAY_RAPIDAPI_KEY", "GATEWAY_PORT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = Settings(_env_file=None)

    assert settings.port == 10000
    assert settings.irctc_api_host == "irctc1.p.rapidapi.com"
    assert settings.flights_api_host == ""
    assert settings.upstream_timeout_seconds == 15.0
    assert settings.api_bearer_token == ""


def test_legacy_environment_names_are_read_and_stripped(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_BEARER_TOKEN", "  env-token \n")
    clean_env.setenv("RAPIDAPI_KEY", "rapid-key")
    clean_env.setenv("GATEWAY_PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.api_bearer_token == "env-token"
    assert settings.rapidapi_key == "rapid-key"
    assert settings.port == 8080


def test_require_bearer_token(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(ConfigurationError):
        Settings(_env_file=None, api_bearer_token="   ").require_bearer_token()
    assert Settings(_env_file=None, api_bearer_token="abc").require_bearer_token() == "abc"


def test_runtime_components_refuse_to_start_without_token(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(ConfigurationError):
        build_runtime_components(Settings(_env_file=None))


def test_cli_exits_when_token_missing(clean_env: pytest.MonkeyPatch) -> None:
    def _unexpected_run(*args: Any, **kwargs: Any) -> None:
        raise AssertionError("server must not start without a token")

    clean_env.setattr(cli.uvicorn, "run", _unexpected_run)

    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    assert exc_info.value.code == 1


def test_cli_starts_uvicorn_with_configured_port(clean_env: pytest.MonkeyPatch) -> None:
    calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
    clean_env.setenv("API_BEARER_TOKEN", "abc")
    clean_env.setenv("GATEWAY_PORT", "9001")
    clean_env.setattr(cli.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    cli.main_dev()

    args, kwargs = calls[0]
    assert args == ("travel_mcp_service.app.main:app",)
    assert kwargs["port"] == 9001
    assert kwargs["reload"] is True
