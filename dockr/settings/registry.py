"""Набор настроек одного клиента.

В отличие от глобального реестра, ``ClientSettings`` создаётся явно и
передаётся в клиент: в одном процессе могут жить клиенты к разным движкам.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dockr.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from dockr.settings.groups import LoggingSettings, SettingsGroup, TransportSettings

LOGGER = logging.getLogger(__name__)

# переменная окружения -> (группа, ключ)
ENV_VARIABLES: Dict[str, tuple[str, str]] = {
    "DOCKER_HOST": ("transport", "base_url"),
    "DOCKER_API_VERSION": ("transport", "api_version"),
    "DOCKR_TIMEOUT": ("transport", "timeout_sec"),
    "DOCKR_LOG_LEVEL": ("logging", "level"),
}


class ClientSettings:
    """Группы ``transport`` и ``logging`` с загрузкой из dict, JSON и окружения."""

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self._settings: Dict[str, SettingsGroup] = {
            "transport": TransportSettings(),
            "logging": LoggingSettings(),
        }
        if data:
            self.from_dict(data)

    # --------------------------------------------------------------------- API
    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        settings_group = self._settings.get(group)
        if not settings_group:
            if default is not None:
                return default
            raise SettingsNotFoundError(group, key)
        return settings_group.get(key, default)

    def set_value(self, group: str, key: str, value: Any) -> None:
        self.get_group(group).set(key, value)

    def get_group(self, group: str) -> SettingsGroup:
        try:
            return self._settings[group]
        except KeyError:
            raise SettingsNotFoundError(group, None) from None

    def from_dict(self, data: Mapping[str, Any]) -> None:
        """Применяет вложенный словарь ``{"transport": {...}, "logging": {...}}``."""

        for name, group_data in data.items():
            if name not in self._settings:
                LOGGER.warning("Unknown settings group %r ignored", name)
                continue
            if isinstance(group_data, Mapping):
                self._settings[name].from_dict(dict(group_data))

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: group.to_dict() for name, group in self._settings.items()}

    def load_from_file(self, path: Path) -> None:
        """Читает настройки из JSON-файла."""

        try:
            content = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(path, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(path, "top-level JSON value must be an object")
        self.from_dict(content)

    def load_from_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Переносит известные переменные окружения в настройки."""

        source = os.environ if environ is None else environ
        for variable, (group, key) in ENV_VARIABLES.items():
            raw = source.get(variable)
            if raw is None or raw == "":
                continue
            value: Any = raw
            if key == "timeout_sec":
                try:
                    value = float(raw)
                except ValueError:
                    raise SettingsValidationError(f"{group}.{key}", raw, "expected a number") from None
            self.set_value(group, key, value)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientSettings":
        settings = cls()
        settings.load_from_env(environ)
        return settings
