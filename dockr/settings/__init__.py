"""Настройки клиента."""
