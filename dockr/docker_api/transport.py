"""Транспорт до Docker Engine поверх docker-py ``APIClient``.

``APIClient`` является ``requests.Session`` и уже умеет ходить в
``unix://``, ``tcp://``, ``http(s)://`` и ``ssh://``. Здесь к нему добавлены
разбор JSON-ответа, преобразование HTTP- и сетевых сбоев в
``DockerAPIError``, хуки диагностики и асинхронная обёртка.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional
from urllib.parse import quote

import docker
import requests
from docker.constants import DEFAULT_DOCKER_API_VERSION
from docker.errors import DockerException

from dockr.docker_api.exceptions import DockerAPIError
from dockr.utils.helpers import normalize_socket_path

LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "unix:///var/run/docker.sock"
DEFAULT_TIMEOUT_SEC = 60

FailureHook = Callable[[DockerAPIError], None]


def log_request_failure(error: DockerAPIError) -> None:
    """Пишет в лог диагностику сбоя, разделяя отказ соединения, 404 и прочее."""

    if error.connection_refused:
        LOGGER.error(
            "Docker engine is unreachable (%s %s): %s",
            error.method,
            error.path,
            error.message,
        )
    elif error.status_code == 404:
        LOGGER.warning(
            "Docker engine returned 404 for %s %s: %s",
            error.method,
            error.path,
            error.explanation or error.reason,
        )
    else:
        LOGGER.error("Docker engine request %s %s failed: %s", error.method, error.path, error)


def resource_path(template: str, *segments: Any) -> str:
    """Подставляет идентификаторы в шаблон пути, экранируя их."""

    return template.format(*(quote(str(segment), safe="") for segment in segments))


class DockerTransport:
    """Единственная точка, через которую клиент обращается к движку."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        version: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        user_agent: Optional[str] = None,
        failure_hooks: Optional[Iterable[FailureHook]] = None,
        raw_client: Any | None = None,
    ) -> None:
        self.base_url = normalize_socket_path(base_url)
        self.version = version or DEFAULT_DOCKER_API_VERSION
        self.timeout = timeout
        self.user_agent = user_agent
        self._failure_hooks: List[FailureHook] = (
            list(failure_hooks) if failure_hooks is not None else [log_request_failure]
        )
        self._client = raw_client or self._create_client()

    def _create_client(self) -> Any:
        options: Dict[str, Any] = {
            "base_url": self.base_url,
            "version": self.version,
            "timeout": self.timeout,
        }
        if self.user_agent:
            options["user_agent"] = self.user_agent
        try:
            return docker.APIClient(**options)
        except DockerException as exc:
            LOGGER.error("Docker client init error for %s: %s", self.base_url, exc)
            raise DockerAPIError(str(exc)) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker-py APIClient."""

        return self._client

    @property
    def failure_hooks(self) -> List[FailureHook]:
        return list(self._failure_hooks)

    def add_failure_hook(self, hook: FailureHook) -> None:
        if hook not in self._failure_hooks:
            self._failure_hooks.append(hook)

    def url(self, path: str) -> str:
        """Строит версионированный URL вида ``<base>/v<version>/<path>``."""

        return f"{self._client.base_url}/v{self._client.api_version}/{path.lstrip('/')}"

    # ----------------------------------------------------------------- requests
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
    ) -> Any:
        """Выполняет запрос в пуле потоков event loop и возвращает тело ответа."""

        loop = asyncio.get_running_loop()
        call = functools.partial(
            self.request_blocking, method, path, params=params, json_body=json_body
        )
        return await loop.run_in_executor(None, call)

    def request_blocking(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
    ) -> Any:
        """Синхронный запрос: тело ответа при 2xx, иначе ``DockerAPIError``."""

        query = {key: value for key, value in (params or {}).items() if value is not None}
        LOGGER.debug("%s %s params=%s", method, path, query)
        try:
            response = self._client.request(
                method,
                self.url(path),
                params=query or None,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            unreachable = isinstance(exc, requests.exceptions.ConnectionError) and not isinstance(
                exc, requests.exceptions.Timeout
            )
            raise self._failure(
                DockerAPIError(
                    str(exc) or exc.__class__.__name__,
                    method=method,
                    path=path,
                    connection_refused=unreachable,
                )
            ) from exc
        except (TypeError, ValueError, OSError, DockerException) as exc:
            # несериализуемое тело запроса или сбой адаптера (ssh, npipe)
            raise self._failure(
                DockerAPIError(str(exc) or exc.__class__.__name__, method=method, path=path)
            ) from exc

        if not 200 <= response.status_code < 300:
            raise self._failure(
                DockerAPIError(
                    response.reason or f"HTTP {response.status_code}",
                    status_code=response.status_code,
                    reason=response.reason,
                    explanation=_error_message(response),
                    method=method,
                    path=path,
                )
            )
        return self._decode(response, method, path)

    def close(self) -> None:
        """Закрывает HTTP-сессию docker-py."""

        self._client.close()

    # ----------------------------------------------------------------- helpers
    def _decode(self, response: Any, method: str, path: str) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise self._failure(
                DockerAPIError(
                    "Invalid JSON in engine response",
                    explanation=str(exc),
                    method=method,
                    path=path,
                )
            ) from exc

    def _failure(self, error: DockerAPIError) -> DockerAPIError:
        for hook in list(self._failure_hooks):
            try:
                hook(error)
            except Exception as exc:
                LOGGER.error("Failure hook %s failed: %s", hook, exc, exc_info=True)
        return error


def _error_message(response: Any) -> Optional[str]:
    """Достаёт поле ``message`` из JSON-тела ошибки движка."""

    try:
        body = response.json()
    except ValueError:
        text = (response.text or "").strip()
        return text or None
    if isinstance(body, dict):
        message = body.get("message")
        return str(message) if message is not None else None
    return None
