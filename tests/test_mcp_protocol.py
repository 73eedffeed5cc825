from __future__ import annotations

import pytest

from travel_mcp_service.app.mcp_protocol import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    InvalidRequest,
    InvalidVersion,
    RpcError,
    error_envelope,
    extract_request_id,
    parse_rpc_request,
)


def test_parse_rpc_request_defaults_params_and_tracks_id_presence() -> None:
    request = parse_rpc_request({"jsonrpc": "2.0", "method": "ping", "id": None})
    assert request.params == {}
    assert request.id is None
    assert request.has_id is True

    notification = parse_rpc_request({"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert notification.has_id is False


def test_parse_rpc_request_accepts_protocol_version_alias() -> None:
    request = parse_rpc_request({"protocolVersion": "2.0", "method": "ping", "id": "a"})
    assert request.method == "ping"
    assert request.id == "a"


@pytest.mark.parametrize("version", ["1.0", None, 2.0])
def test_parse_rpc_request_rejects_unsupported_version(version: object) -> None:
    with pytest.raises(InvalidVersion) as exc_info:
        parse_rpc_request({"jsonrpc": version, "method": "ping", "id": 1})
    assert exc_info.value.code == INVALID_REQUEST


@pytest.mark.parametrize(
    "item",
    [
        "ping",
        {"jsonrpc": "2.0", "id": 1},
        {"jsonrpc": "2.0", "method": "", "id": 1},
        {"jsonrpc": "2.0", "method": "ping", "id": {"nested": True}},
        {"jsonrpc": "2.0", "method": "ping", "id": float("nan")},
        {"jsonrpc": "2.0", "method": "ping", "id": float("inf")},
    ],
)
def test_parse_rpc_request_rejects_malformed_requests(item: object) -> None:
    with pytest.raises(InvalidRequest):
        parse_rpc_request(item)


def test_parse_rpc_request_rejects_non_object_params() -> None:
    with pytest.raises(RpcError) as exc_info:
        parse_rpc_request({"jsonrpc": "2.0", "method": "ping", "params": [1, 2], "id": 1})
    assert exc_info.value.code == INVALID_PARAMS


def test_extract_request_id_ignores_malformed_ids() -> None:
    assert extract_request_id({"id": 7}) == 7
    assert extract_request_id({"id": "abc"}) == "abc"
    assert extract_request_id({"id": True}) is None
    assert extract_request_id({"id": [1]}) is None
    assert extract_request_id({"id": float("nan")}) is None
    assert extract_request_id({"id": 1.5}) == 1.5
    assert extract_request_id("not a dict") is None


def test_error_envelope_omits_missing_data() -> None:
    assert error_envelope(-32601, "Method not found: x", 3) == {
        "jsonrpc": "2.0",
        "error": {"code": -32601, "message": "Method not found: x"},
        "id": 3,
    }
