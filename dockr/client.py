"""Фасад клиента: пространства имён ``container``, ``volume`` и ``config``.

Пример::

    client = create_docker_client(base_url="tcp://127.0.0.1:2375")
    result = await client.config.list(filters={"name": ["app-settings"]})
    if result.error:
        ...
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from dockr.docker_api.configs import ConfigCollection
from dockr.docker_api.containers import ContainerCollection
from dockr.docker_api.transport import DockerTransport, log_request_failure
from dockr.docker_api.volumes import VolumeCollection
from dockr.settings.registry import ClientSettings

LOGGER = logging.getLogger(__name__)


class DockerClient:
    """Клиент Docker Engine API, настроенный одним ``ClientSettings``.

    Клиент не хранит изменяемого состояния, кроме HTTP-сессии транспорта,
    поэтому операции можно вызывать конкурентно.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        *,
        transport: Optional[DockerTransport] = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self.transport = transport or self._create_transport()
        self.container = ContainerCollection(self.transport)
        self.volume = VolumeCollection(self.transport)
        self.config = ConfigCollection(self.transport)

    def _create_transport(self) -> DockerTransport:
        hooks = [log_request_failure] if self.settings.get_value("logging", "log_failures") else []
        transport = DockerTransport(
            self.settings.get_value("transport", "base_url"),
            version=self.settings.get_value("transport", "api_version"),
            timeout=self.settings.get_value("transport", "timeout_sec"),
            user_agent=self.settings.get_value("transport", "user_agent"),
            failure_hooks=hooks,
        )
        LOGGER.debug("Docker client bound to %s (API %s)", transport.base_url, transport.version)
        return transport

    def close(self) -> None:
        """Закрывает HTTP-сессию транспорта."""

        self.transport.close()

    def __enter__(self) -> "DockerClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "DockerClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()


def create_docker_client(
    settings: Optional[ClientSettings] = None, **transport_overrides: Any
) -> DockerClient:
    """Создаёт клиент; именованные аргументы переопределяют ключи группы ``transport``."""

    settings = settings or ClientSettings()
    for key, value in transport_overrides.items():
        settings.set_value("transport", key, value)
    return DockerClient(settings)
