"""Операции с томами Docker."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from dockr.docker_api.errors import call_engine, unexpected_payload
from dockr.docker_api.filters import VOLUME_LIST_FILTERS, VOLUME_PRUNE_FILTERS, filters_query
from dockr.docker_api.models import (
    DoneResult,
    VolumeCreateResult,
    VolumeInspectResult,
    VolumeListResult,
    VolumePruneResult,
)
from dockr.docker_api.transport import DockerTransport, resource_path

RESOURCE = "volume"


async def list_volumes(
    transport: DockerTransport, filters: Optional[Mapping[str, Any]] = None
) -> VolumeListResult:
    """Возвращает тома; фильтры: ``dangling``, ``driver``, ``label``, ``name``."""

    payload, error = await call_engine(
        transport,
        RESOURCE,
        "list",
        "GET",
        "volumes",
        params={"filters": filters_query(VOLUME_LIST_FILTERS, filters)},
    )
    if error:
        return VolumeListResult(error=error)
    if payload is None:
        return VolumeListResult()
    if not isinstance(payload, dict):
        return VolumeListResult(error=unexpected_payload(RESOURCE, "list", payload))
    return VolumeListResult(
        volumes=list(payload.get("Volumes") or []),
        warnings=list(payload.get("Warnings") or []),
    )


async def create_volume(
    transport: DockerTransport, options: Optional[Mapping[str, Any]] = None
) -> VolumeCreateResult:
    """Создаёт том по ``VolumeCreateOptions``."""

    payload, error = await call_engine(
        transport, RESOURCE, "create", "POST", "volumes/create", json_body=dict(options or {})
    )
    if error:
        return VolumeCreateResult(error=error)
    if not isinstance(payload, dict):
        return VolumeCreateResult(error=unexpected_payload(RESOURCE, "create", payload))
    return VolumeCreateResult(volume=payload)


async def inspect_volume(transport: DockerTransport, name: str) -> VolumeInspectResult:
    """Возвращает том по имени."""

    payload, error = await call_engine(
        transport, RESOURCE, "inspect", "GET", resource_path("volumes/{}", name)
    )
    if error:
        return VolumeInspectResult(error=error)
    if not isinstance(payload, dict):
        return VolumeInspectResult(error=unexpected_payload(RESOURCE, "inspect", payload))
    return VolumeInspectResult(volume=payload)


async def delete_volume(
    transport: DockerTransport, name: str, force: Optional[bool] = None
) -> DoneResult:
    """Удаляет том; ``force`` уходит в запрос, только если задан явно."""

    params = {} if force is None else {"force": "true" if force else "false"}
    _, error = await call_engine(
        transport,
        RESOURCE,
        "delete",
        "DELETE",
        resource_path("volumes/{}", name),
        params=params,
    )
    if error:
        return DoneResult(done=False, error=error)
    return DoneResult(done=True)


async def prune_volumes(
    transport: DockerTransport, filters: Optional[Mapping[str, Any]] = None
) -> VolumePruneResult:
    """Удаляет неиспользуемые тома и возвращает отчёт движка.

    Повторный prune без новых томов даёт пустой ``VolumesDeleted``, а не ошибку.
    """

    payload, error = await call_engine(
        transport,
        RESOURCE,
        "prune",
        "POST",
        "volumes/prune",
        params={"filters": filters_query(VOLUME_PRUNE_FILTERS, filters)},
    )
    if error:
        return VolumePruneResult(error=error)
    if payload is not None and not isinstance(payload, dict):
        return VolumePruneResult(error=unexpected_payload(RESOURCE, "prune", payload))
    payload = payload or {}
    deleted = payload.get("VolumesDeleted") or []
    reclaimed = payload.get("SpaceReclaimed") or 0
    valid_reclaimed = isinstance(reclaimed, int) and not isinstance(reclaimed, bool)
    if not isinstance(deleted, list) or not valid_reclaimed:
        return VolumePruneResult(error=unexpected_payload(RESOURCE, "prune", payload))
    return VolumePruneResult(report={"VolumesDeleted": list(deleted), "SpaceReclaimed": reclaimed})


class VolumeCollection:
    """Операции томов, привязанные к одному транспорту (``client.volume``)."""

    def __init__(self, transport: DockerTransport) -> None:
        self._transport = transport

    async def list(self, filters: Optional[Mapping[str, Any]] = None) -> VolumeListResult:
        return await list_volumes(self._transport, filters)

    async def create(self, options: Optional[Mapping[str, Any]] = None) -> VolumeCreateResult:
        return await create_volume(self._transport, options)

    async def inspect(self, name: str) -> VolumeInspectResult:
        return await inspect_volume(self._transport, name)

    async def delete(self, name: str, force: Optional[bool] = None) -> DoneResult:
        return await delete_volume(self._transport, name, force=force)

    async def prune(self, filters: Optional[Mapping[str, Any]] = None) -> VolumePruneResult:
        return await prune_volumes(self._transport, filters)
