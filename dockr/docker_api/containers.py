"""Операции с контейнерами Docker."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from dockr.docker_api.errors import call_engine, unexpected_payload
from dockr.docker_api.filters import CONTAINER_LIST_FILTERS, encode_filters
from dockr.docker_api.models import ContainerListResult
from dockr.docker_api.transport import DockerTransport

RESOURCE = "container"


async def list_containers(
    transport: DockerTransport,
    *,
    all: Optional[bool] = None,
    limit: Optional[int] = None,
    size: Optional[bool] = None,
    filters: Optional[Mapping[str, Any]] = None,
) -> ContainerListResult:
    """Возвращает краткие описания контейнеров.

    По умолчанию движок отдаёт только запущенные контейнеры; ``all=True``
    добавляет остановленные. Параметры, равные None, в запрос не попадают.
    """

    params: Dict[str, Any] = {}
    if all is not None:
        params["all"] = "true" if all else "false"
    if limit is not None:
        params["limit"] = int(limit)
    if size is not None:
        params["size"] = "true" if size else "false"
    encoded = encode_filters(CONTAINER_LIST_FILTERS, filters)
    if encoded:
        params["filters"] = json.dumps(encoded)

    payload, error = await call_engine(
        transport, RESOURCE, "list", "GET", "containers/json", params=params
    )
    if error:
        return ContainerListResult(error=error)
    if payload is None:
        return ContainerListResult()
    if not isinstance(payload, list):
        return ContainerListResult(error=unexpected_payload(RESOURCE, "list", payload))
    return ContainerListResult(containers=payload)


class ContainerCollection:
    """Операции контейнеров, привязанные к одному транспорту (``client.container``)."""

    def __init__(self, transport: DockerTransport) -> None:
        self._transport = transport

    async def list(
        self,
        *,
        all: Optional[bool] = None,
        limit: Optional[int] = None,
        size: Optional[bool] = None,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> ContainerListResult:
        return await list_containers(
            self._transport, all=all, limit=limit, size=size, filters=filters
        )
