"""Нормализация сбоев Docker Engine в ``ErrorResponse``.

Все операции клиента проходят через :func:`call_engine`: это единственное
место, где перехватывается ``DockerAPIError``. Сообщения для конкретных
статусов берутся из таблицы ``STATUS_OVERRIDES`` с ключом-парой
(ресурс, операция): один и тот же 404 у разных операций означает разное.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from dockr.docker_api.exceptions import DockerAPIError
from dockr.docker_api.models import ErrorResponse

LOGGER = logging.getLogger(__name__)

FALLBACK_STATUS = 500

SERVER_ERROR = "Server error."
NOT_IN_SWARM = "Node is not part of a swarm."

STATUS_OVERRIDES: Dict[Tuple[str, str], Dict[int, str]] = {
    ("config", "list"): {503: NOT_IN_SWARM},
    ("config", "create"): {
        409: "Name conflicts with an existing object.",
        500: SERVER_ERROR,
        503: NOT_IN_SWARM,
    },
    ("config", "inspect"): {404: "Config not found.", 500: SERVER_ERROR, 503: NOT_IN_SWARM},
    ("config", "delete"): {404: "Config not found.", 500: SERVER_ERROR, 503: NOT_IN_SWARM},
    ("config", "update"): {
        400: "Bad parameter.",
        404: "No such config.",
        500: SERVER_ERROR,
        503: NOT_IN_SWARM,
    },
    ("container", "list"): {404: "Could not find any container"},
    ("volume", "list"): {404: "Could not find any volumes."},
    ("volume", "inspect"): {404: "No such volume.", 500: SERVER_ERROR},
    ("volume", "delete"): {
        404: "No such volume or volume driver.",
        409: "Volume is in use and cannot be removed.",
        500: SERVER_ERROR,
    },
}


def override_message(resource: str, operation: str, status_code: int) -> Optional[str]:
    """Возвращает переопределённое сообщение для статуса операции, если оно есть."""

    return STATUS_OVERRIDES.get((resource, operation), {}).get(status_code)


def normalize_error(resource: str, operation: str, error: DockerAPIError) -> ErrorResponse:
    """Строит ``ErrorResponse`` из транспортного или протокольного сбоя."""

    if error.is_transport_failure:
        return ErrorResponse(
            code=FALLBACK_STATUS,
            message=error.message,
            description=error.explanation,
        )
    message = override_message(resource, operation, error.status_code)
    return ErrorResponse(
        code=error.status_code,
        message=message or error.reason or error.message,
        description=error.explanation,
    )


def unexpected_payload(resource: str, operation: str, payload: Any) -> ErrorResponse:
    """Ошибка для успешного ответа, тело которого не подходит под ожидаемую форму."""

    LOGGER.error("%s.%s: unexpected engine payload %r", resource, operation, payload)
    return ErrorResponse(
        code=FALLBACK_STATUS,
        message="Unexpected engine response",
        description=f"Got {type(payload).__name__} payload",
    )


async def call_engine(
    transport: Any,
    resource: str,
    operation: str,
    method: str,
    path: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    json_body: Any = None,
) -> Tuple[Any, Optional[ErrorResponse]]:
    """Выполняет один запрос и возвращает пару (тело ответа, ошибка)."""

    try:
        payload = await transport.request(method, path, params=params, json_body=json_body)
    except DockerAPIError as exc:
        error = normalize_error(resource, operation, exc)
        LOGGER.debug("%s.%s failed: %s", resource, operation, error)
        return None, error
    except Exception as exc:
        LOGGER.error("%s.%s: unexpected client failure", resource, operation, exc_info=True)
        return None, ErrorResponse(
            code=FALLBACK_STATUS,
            message="Unexpected client error",
            description=str(exc) or exc.__class__.__name__,
        )
    return payload, None
