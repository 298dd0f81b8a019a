"""Внутренние исключения транспортного слоя Docker Engine API."""

from __future__ import annotations

from typing import Optional


class DockerAPIError(Exception):
    """Ошибка обращения к Docker Engine.

    Исключение поднимается транспортом и перехватывается нормализатором
    ошибок; за пределы публичных операций клиента оно не выходит.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        explanation: Optional[str] = None,
        method: Optional[str] = None,
        path: Optional[str] = None,
        connection_refused: bool = False,
    ) -> None:
        self.message = message
        self.status_code = status_code  # None, если ответа от движка не было
        self.reason = reason
        self.explanation = explanation  # поле message из JSON тела ошибки
        self.method = method
        self.path = path
        self.connection_refused = connection_refused
        super().__init__(message)

    @property
    def is_transport_failure(self) -> bool:
        """True, если HTTP-статус отсутствует (сокет, DNS, таймаут)."""

        return self.status_code is None

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        if self.reason:
            return f"{self.status_code} {self.reason}: {self.message}"
        return f"{self.status_code}: {self.message}"
