"""Проверки подсистемы логирования."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from dockr.settings.registry import ClientSettings
from dockr.utils.logger import (
    LIBRARY_LOGGER,
    configure_logging,
    resolve_log_level,
    setup_logging_from_settings,
)


@pytest.fixture(autouse=True)
def restore_library_logger() -> Iterator[None]:
    yield
    logging.getLogger(LIBRARY_LOGGER).setLevel(logging.NOTSET)


def test_configure_logging_creates_file(tmp_path: Path) -> None:
    """После конфигурации появляется файл лога с записью."""

    log_dir = tmp_path / "logs"
    configure_logging(level_name="INFO", log_dir=log_dir, max_bytes=1024, backup_count=1)

    logging.getLogger("dockr.test").info("log entry")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = log_dir / "dockr.log"
    assert log_file.exists()
    assert "log entry" in log_file.read_text(encoding="utf-8")


def test_resolve_log_level_invalid() -> None:
    """Неизвестный уровень логирования приводит к ValueError."""

    assert resolve_log_level("warning") == logging.WARNING
    with pytest.raises(ValueError):
        resolve_log_level("INVALID")


def test_setup_from_settings_applies_level(tmp_path: Path) -> None:
    settings = ClientSettings({"logging": {"level": "DEBUG"}})
    setup_logging_from_settings(settings, log_dir=tmp_path)
    assert logging.getLogger().level == logging.DEBUG
    assert (tmp_path / "dockr.log").exists()


def test_setup_from_settings_disabled_silences_library() -> None:
    settings = ClientSettings({"logging": {"enabled": False}})
    setup_logging_from_settings(settings)
    child = logging.getLogger("dockr.docker_api.transport")
    assert not child.isEnabledFor(logging.CRITICAL)
