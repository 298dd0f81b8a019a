"""Тесты нормализации ошибок и таблицы переопределений."""

from __future__ import annotations

import asyncio

import pytest

from dockr.docker_api.errors import (
    FALLBACK_STATUS,
    STATUS_OVERRIDES,
    call_engine,
    normalize_error,
    override_message,
)
from dockr.docker_api.exceptions import DockerAPIError
from dockr.docker_api.models import ErrorResponse


def http_error(status: int, reason: str, explanation: str | None = None) -> DockerAPIError:
    return DockerAPIError(reason, status_code=status, reason=reason, explanation=explanation)


def test_same_status_maps_per_operation() -> None:
    error = http_error(404, "Not Found")
    assert normalize_error("config", "inspect", error) == ErrorResponse(404, "Config not found.")
    assert normalize_error("container", "list", error) == ErrorResponse(
        404, "Could not find any container"
    )
    assert normalize_error("config", "update", error).message == "No such config."


def test_unlisted_status_keeps_reason_phrase() -> None:
    error = http_error(418, "I'm a teapot", "short and stout")
    result = normalize_error("volume", "delete", error)
    assert result == ErrorResponse(418, "I'm a teapot", "short and stout")


def test_description_comes_from_engine_message() -> None:
    error = http_error(409, "Conflict", "remove data: volume is in use")
    result = normalize_error("volume", "delete", error)
    assert result.message == "Volume is in use and cannot be removed."
    assert result.description == "remove data: volume is in use"


def test_transport_failure_uses_fallback_code_without_override() -> None:
    error = DockerAPIError("Connection aborted.", connection_refused=True)
    result = normalize_error("config", "create", error)
    assert result.code == FALLBACK_STATUS
    # 500 в таблице config.create не применяется: статуса от движка не было
    assert result.message == "Connection aborted."


def test_override_table_contents() -> None:
    assert override_message("config", "list", 503) == "Node is not part of a swarm."
    assert override_message("config", "create", 409) == "Name conflicts with an existing object."
    assert override_message("volume", "inspect", 500) == "Server error."
    assert override_message("volume", "create", 500) is None
    assert ("volume", "prune") not in STATUS_OVERRIDES


def test_error_response_to_dict_omits_missing_description() -> None:
    assert ErrorResponse(404, "No such volume.").to_dict() == {
        "code": 404,
        "message": "No such volume.",
    }


class RaisingTransport:
    def __init__(self, error: Exception) -> None:
        self.error = error

    async def request(self, method: str, path: str, **kwargs: object) -> object:
        raise self.error


def test_call_engine_absorbs_transport_errors() -> None:
    transport = RaisingTransport(http_error(503, "Service Unavailable", "not a swarm manager"))
    payload, error = asyncio.run(call_engine(transport, "config", "list", "GET", "configs"))
    assert payload is None
    assert error == ErrorResponse(503, "Node is not part of a swarm.", "not a swarm manager")


def test_call_engine_absorbs_unexpected_exceptions(caplog: pytest.LogCaptureFixture) -> None:
    transport = RaisingTransport(RuntimeError("adapter exploded"))
    caplog.set_level("ERROR", logger="dockr")
    payload, error = asyncio.run(call_engine(transport, "volume", "inspect", "GET", "volumes/x"))
    assert payload is None
    assert error == ErrorResponse(500, "Unexpected client error", "adapter exploded")
    assert caplog.records[-1].exc_info is not None


def test_override_table_is_complete() -> None:
    swarm = "Node is not part of a swarm."
    server = "Server error."
    assert STATUS_OVERRIDES == {
        ("config", "list"): {503: swarm},
        ("config", "create"): {
            409: "Name conflicts with an existing object.",
            500: server,
            503: swarm,
        },
        ("config", "inspect"): {404: "Config not found.", 500: server, 503: swarm},
        ("config", "delete"): {404: "Config not found.", 500: server, 503: swarm},
        ("config", "update"): {
            400: "Bad parameter.",
            404: "No such config.",
            500: server,
            503: swarm,
        },
        ("container", "list"): {404: "Could not find any container"},
        ("volume", "list"): {404: "Could not find any volumes."},
        ("volume", "inspect"): {404: "No such volume.", 500: server},
        ("volume", "delete"): {
            404: "No such volume or volume driver.",
            409: "Volume is in use and cannot be removed.",
            500: server,
        },
    }
