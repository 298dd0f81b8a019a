"""Тесты групп настроек."""

from __future__ import annotations

import pytest
from docker.constants import DEFAULT_DOCKER_API_VERSION

from dockr.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from dockr.settings.groups import LoggingSettings, TransportSettings


def test_transport_defaults() -> None:
    settings = TransportSettings()
    assert settings.get("base_url") == "unix:///var/run/docker.sock"
    assert settings.get("api_version") == DEFAULT_DOCKER_API_VERSION
    assert settings.get("timeout_sec") == 60
    assert settings.get("user_agent") is None


def test_transport_normalizes_endpoint_and_version() -> None:
    settings = TransportSettings()
    settings.set("base_url", "/run/user/1000/docker.sock")
    settings.set("api_version", "v1.41")
    assert settings.get("base_url") == "unix:///run/user/1000/docker.sock"
    assert settings.get("api_version") == "1.41"
    settings.set("api_version", "auto")
    assert settings.get("api_version") == "auto"


def test_transport_rejects_bad_values() -> None:
    settings = TransportSettings()
    with pytest.raises(SettingsValidationError):
        settings.set("base_url", "ftp://example.com")
    with pytest.raises(SettingsValidationError):
        settings.set("api_version", "latest")
    with pytest.raises(SettingsValidationError):
        settings.set("timeout_sec", 0)
    with pytest.raises(SettingsValidationError):
        settings.set("timeout_sec", True)
    with pytest.raises(SettingsValidationError):
        settings.set("user_agent", 42)


def test_logging_level_is_upper_cased() -> None:
    settings = LoggingSettings()
    settings.set("level", "debug")
    assert settings.get("level") == "DEBUG"
    with pytest.raises(SettingsValidationError):
        settings.set("level", "verbose")


def test_from_dict_ignores_unknown_keys_and_reset() -> None:
    settings = LoggingSettings()
    settings.from_dict({"enabled": False, "colour": "red"})
    assert settings.get("enabled") is False
    assert "colour" not in settings.to_dict()
    settings.reset_to_defaults()
    assert settings.get("enabled") is True


def test_unknown_key_raises_not_found() -> None:
    settings = TransportSettings()
    with pytest.raises(SettingsNotFoundError):
        settings.get("unknown")
    with pytest.raises(SettingsNotFoundError):
        settings.set("unknown", 1)
