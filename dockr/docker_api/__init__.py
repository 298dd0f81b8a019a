"""Операции Docker Engine API: транспорт, фильтры, нормализация ошибок."""
