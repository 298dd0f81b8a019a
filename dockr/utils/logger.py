"""Настройка логирования для приложений, использующих клиент.

Сама библиотека логирование не конфигурирует: модули только получают
логгеры через ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Final, List, Optional, cast

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LIBRARY_LOGGER: Final[str] = "dockr"


def resolve_log_level(level_name: str) -> int:
    """Преобразует строковый уровень логирования в числовой."""

    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return cast(int, level)


def configure_logging(
    *,
    level_name: str = "INFO",
    log_format: str = LOG_FORMAT,
    log_dir: Optional[Path] = None,
    log_file_name: str = "dockr.log",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Вывод в stdout и, если указан ``log_dir``, в файл с ротацией."""

    log_level = resolve_log_level(level_name)
    formatter = logging.Formatter(log_format)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    handlers: List[logging.Handler] = [stream_handler]

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / log_file_name,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def setup_logging_from_settings(settings: Any, log_dir: Optional[Path] = None) -> None:
    """Настраивает логирование по группе ``logging`` из ``ClientSettings``."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.getLogger(LIBRARY_LOGGER).setLevel(logging.CRITICAL + 1)
        return

    logging.getLogger(LIBRARY_LOGGER).setLevel(logging.NOTSET)
    configure_logging(
        level_name=logging_settings.get("level", "INFO"),
        log_format=logging_settings.get("log_format", LOG_FORMAT),
        log_dir=log_dir,
    )
