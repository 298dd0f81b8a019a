"""Группы настроек клиента с валидацией значений."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from docker.constants import DEFAULT_DOCKER_API_VERSION

from dockr.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from dockr.settings.validators import (
    CompositeValidator,
    EndpointValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    Validator,
)
from dockr.utils.helpers import normalize_socket_path

API_VERSION_PATTERN = r"^(auto|\d+\.\d+)$"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SettingsGroup(ABC):
    """Абстрактная база для групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def _normalize(self, key: str, value: Any) -> Any:
        """Приводит значение к каноническому виду перед валидацией."""

        return value

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults.keys())

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key, default)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ``SettingsValidationError`` при ошибке."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        value = self._normalize(key, value)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет группу из словаря; неизвестные ключи игнорируются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class TransportSettings(SettingsGroup):
    """Параметры подключения к Docker Engine."""

    group_name = "transport"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "base_url": "unix:///var/run/docker.sock",
            "api_version": DEFAULT_DOCKER_API_VERSION,
            "timeout_sec": 60,
            "user_agent": None,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "base_url": EndpointValidator(),
            "api_version": CompositeValidator(
                [TypeValidator(str), RegexValidator(API_VERSION_PATTERN)]
            ),
            "timeout_sec": CompositeValidator(
                [TypeValidator((int, float)), RangeValidator(1, 3600)]
            ),
            "user_agent": TypeValidator((str, type(None))),
        }

    def _normalize(self, key: str, value: Any) -> Any:
        if key == "base_url" and isinstance(value, str):
            return normalize_socket_path(value)
        if key == "api_version" and isinstance(value, str):
            return value.strip().lstrip("v")
        return value


class LoggingSettings(SettingsGroup):
    """Настройки логирования клиента."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "enabled": True,
            "level": "INFO",
            "log_format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            "log_failures": True,  # подключать хук диагностики сбоев запросов
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "enabled": TypeValidator(bool),
            "level": EnumValidator(LOG_LEVELS),
            "log_format": TypeValidator(str),
            "log_failures": TypeValidator(bool),
        }

    def _normalize(self, key: str, value: Any) -> Any:
        if key == "level" and isinstance(value, str):
            return value.upper()
        return value
