"""Вспомогательные функции для адресов Docker Engine."""

from __future__ import annotations


_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает адрес движка; голый путь к сокету получает префикс ``unix://``.

    ``host:port`` без схемы считается TCP-адресом.
    """

    value = raw_value.strip()
    if not value:
        return value
    lowered = value.lower()
    if lowered.startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    host, _, port = value.rpartition(":")
    if host and port.isdigit():
        return f"tcp://{value}"
    return value
