"""Операции с swarm configs."""

from __future__ import annotations

import base64
from typing import Any, Mapping, Optional

from dockr.docker_api.errors import call_engine, unexpected_payload
from dockr.docker_api.filters import CONFIG_LIST_FILTERS, filters_query
from dockr.docker_api.models import (
    Config,
    ConfigCreateResult,
    ConfigInspectResult,
    ConfigListResult,
    DoneResult,
)
from dockr.docker_api.transport import DockerTransport, resource_path

RESOURCE = "config"


async def list_configs(
    transport: DockerTransport, filters: Optional[Mapping[str, Any]] = None
) -> ConfigListResult:
    """Возвращает configs, подходящие под фильтры ``id``, ``label``, ``name``, ``names``."""

    payload, error = await call_engine(
        transport,
        RESOURCE,
        "list",
        "GET",
        "configs",
        params={"filters": filters_query(CONFIG_LIST_FILTERS, filters)},
    )
    if error:
        return ConfigListResult(error=error)
    if payload is None:
        return ConfigListResult(configs=[])
    if not isinstance(payload, list):
        return ConfigListResult(error=unexpected_payload(RESOURCE, "list", payload))
    return ConfigListResult(configs=payload)


async def create_config(transport: DockerTransport, spec: Mapping[str, Any]) -> ConfigCreateResult:
    """Создаёт config; ``Data`` передаётся как текст или bytes и кодируется в base64.

    Исходный словарь не изменяется: кодирование выполняется над копией.
    """

    body = dict(spec)
    if body.get("Data") is not None:
        body["Data"] = encode_config_data(body["Data"])
    payload, error = await call_engine(
        transport, RESOURCE, "create", "POST", "configs/create", json_body=body
    )
    if error:
        return ConfigCreateResult(error=error)
    if not isinstance(payload, dict) or "ID" not in payload:
        return ConfigCreateResult(error=unexpected_payload(RESOURCE, "create", payload))
    return ConfigCreateResult(config_id=payload)


async def inspect_config(transport: DockerTransport, config_id: str) -> ConfigInspectResult:
    """Возвращает config по ID или имени."""

    payload, error = await call_engine(
        transport, RESOURCE, "inspect", "GET", resource_path("configs/{}", config_id)
    )
    if error:
        return ConfigInspectResult(error=error)
    if not isinstance(payload, dict):
        return ConfigInspectResult(error=unexpected_payload(RESOURCE, "inspect", payload))
    return ConfigInspectResult(config=payload)


async def delete_config(transport: DockerTransport, config_id: str) -> DoneResult:
    """Удаляет config."""

    _, error = await call_engine(
        transport, RESOURCE, "delete", "DELETE", resource_path("configs/{}", config_id)
    )
    if error:
        return DoneResult(done=False, error=error)
    return DoneResult(done=True)


async def update_config(
    transport: DockerTransport,
    config_id: str,
    version: int,
    data: Mapping[str, Any],
) -> DoneResult:
    """Обновляет config с защитой версией объекта.

    Движок разрешает менять только ``Labels``; остальные поля спецификации
    должны совпадать с ответом inspect. Тело передаётся без изменений.
    """

    _, error = await call_engine(
        transport,
        RESOURCE,
        "update",
        "POST",
        resource_path("configs/{}/update", config_id),
        params={"version": version},
        json_body=dict(data),
    )
    if error:
        return DoneResult(done=False, error=error)
    return DoneResult(done=True)


async def update_config_labels(
    transport: DockerTransport, config_id: str, labels: Mapping[str, str]
) -> DoneResult:
    """Заменяет метки config, отправляя остальную спецификацию без изменений."""

    inspected = await inspect_config(transport, config_id)
    if inspected.error or inspected.config is None:
        return DoneResult(done=False, error=inspected.error)
    config = inspected.config
    spec = dict(config.get("Spec") or {})
    spec["Labels"] = dict(labels)
    version = (config.get("Version") or {}).get("Index", 0)
    return await update_config(transport, config.get("ID", config_id), version, spec)


def encode_config_data(data: str | bytes) -> str:
    """Кодирует данные config в стандартный base64."""

    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return base64.b64encode(raw).decode("ascii")


def decode_config_data(config: Config) -> bytes:
    """Раскодирует ``Spec.Data`` config, полученного от движка."""

    encoded = (config.get("Spec") or {}).get("Data") or ""
    return base64.b64decode(encoded)


class ConfigCollection:
    """Операции configs, привязанные к одному транспорту (``client.config``)."""

    def __init__(self, transport: DockerTransport) -> None:
        self._transport = transport

    async def list(self, filters: Optional[Mapping[str, Any]] = None) -> ConfigListResult:
        return await list_configs(self._transport, filters)

    async def create(self, spec: Mapping[str, Any]) -> ConfigCreateResult:
        return await create_config(self._transport, spec)

    async def inspect(self, config_id: str) -> ConfigInspectResult:
        return await inspect_config(self._transport, config_id)

    async def delete(self, config_id: str) -> DoneResult:
        return await delete_config(self._transport, config_id)

    async def update(self, config_id: str, version: int, data: Mapping[str, Any]) -> DoneResult:
        return await update_config(self._transport, config_id, version, data)

    async def update_labels(self, config_id: str, labels: Mapping[str, str]) -> DoneResult:
        return await update_config_labels(self._transport, config_id, labels)
