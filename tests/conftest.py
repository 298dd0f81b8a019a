"""Общие фикстуры тестов."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

import pytest
from fakes import FakeEngine, FakeResponse, ScriptedRawClient

from dockr.client import DockerClient
from dockr.docker_api.transport import DockerTransport


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def client(engine: FakeEngine) -> DockerClient:
    return DockerClient(transport=DockerTransport(raw_client=engine))


@pytest.fixture
def scripted() -> Callable[..., Tuple[DockerTransport, ScriptedRawClient]]:
    """Фабрика транспорта, отвечающего заданными ответами."""

    def build(
        *responses: FakeResponse, error: Optional[Exception] = None
    ) -> Tuple[DockerTransport, ScriptedRawClient]:
        raw = ScriptedRawClient(list(responses), error=error)
        return DockerTransport(raw_client=raw), raw

    return build
