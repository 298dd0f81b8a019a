"""Кодирование фильтров list/prune в формат Docker Engine.

Движок ожидает параметр ``filters``: JSON-строку вида
``map[string][]string``. Неизвестные и пустые ключи в неё не попадают:
отсутствующий фильтр означает «без ограничения», а не «пустое множество».
"""

from __future__ import annotations

import json
import logging
from typing import Any, AbstractSet, Dict, List, Mapping, Optional

LOGGER = logging.getLogger(__name__)

CONFIG_LIST_FILTERS: frozenset[str] = frozenset({"id", "label", "name", "names"})
VOLUME_LIST_FILTERS: frozenset[str] = frozenset({"dangling", "driver", "label", "name"})
VOLUME_PRUNE_FILTERS: frozenset[str] = frozenset({"label"})
CONTAINER_LIST_FILTERS: frozenset[str] = frozenset(
    {
        "ancestor",
        "before",
        "expose",
        "exited",
        "health",
        "id",
        "isolation",
        "is-task",
        "label",
        "name",
        "network",
        "publish",
        "since",
        "status",
        "volume",
    }
)


def encode_filters(
    recognized_keys: AbstractSet[str], filters: Optional[Mapping[str, Any]]
) -> Dict[str, List[str]]:
    """Оставляет только известные непустые ключи и приводит значения к спискам строк."""

    encoded: Dict[str, List[str]] = {}
    if not filters:
        return encoded
    for key, value in filters.items():
        if key not in recognized_keys:
            LOGGER.debug("Ignoring unsupported filter %r", key)
            continue
        if not value:
            continue
        encoded[key] = _as_string_list(value)
    return encoded


def filters_query(
    recognized_keys: AbstractSet[str], filters: Optional[Mapping[str, Any]]
) -> str:
    """Возвращает значение query-параметра ``filters``."""

    return json.dumps(encode_filters(recognized_keys, filters))


def _as_string_list(value: Any) -> List[str]:
    if isinstance(value, bool):
        return ["true" if value else "false"]
    if isinstance(value, (str, bytes, int, float)):
        return [_as_string(value)]
    return [_as_string(item) for item in value]


def _as_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)
