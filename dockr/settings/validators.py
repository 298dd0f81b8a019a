"""Валидаторы значений настроек."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Pattern, Tuple


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> Tuple[bool, str]:
        """Возвращает (True, \"\") при успехе либо (False, описание ошибки)."""


class TypeValidator(Validator):
    """Проверяет тип значения; bool не считается числом."""

    def __init__(self, expected_type: type | Tuple[type, ...]) -> None:
        self.expected_type = expected_type

    def _expected_name(self) -> str:
        if isinstance(self.expected_type, tuple):
            return ", ".join(t.__name__ for t in self.expected_type)
        return self.expected_type.__name__

    def _accepts_bool(self) -> bool:
        types = self.expected_type if isinstance(self.expected_type, tuple) else (self.expected_type,)
        return bool in types

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, bool) and not self._accepts_bool():
            return False, f"Expected value of type {self._expected_name()}, got bool"
        if isinstance(value, self.expected_type):
            return True, ""
        return (
            False,
            f"Expected value of type {self._expected_name()}, got {type(value).__name__}",
        )


class RangeValidator(Validator):
    """Контролирует принадлежность числа диапазону."""

    def __init__(self, min_value: Optional[Any] = None, max_value: Optional[Any] = None) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> Tuple[bool, str]:
        if (self.min_value is not None and value < self.min_value) or (
            self.max_value is not None and value > self.max_value
        ):
            return False, f"Value {value} is out of range [{self.min_value}, {self.max_value}]"
        return True, ""


class EnumValidator(Validator):
    """Проверяет, что значение принадлежит конечному набору."""

    def __init__(self, allowed_values: Iterable[Any]) -> None:
        self.allowed_values = list(allowed_values)

    def validate(self, value: Any) -> Tuple[bool, str]:
        if value in self.allowed_values:
            return True, ""
        return False, f"Value {value!r} not in allowed values: {self.allowed_values}"


class RegexValidator(Validator):
    """Проверяет строку регулярным выражением (fullmatch)."""

    def __init__(self, pattern: str | Pattern[str]) -> None:
        self.pattern: Pattern[str] = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(self, value: Any) -> Tuple[bool, str]:
        if not isinstance(value, str):
            return False, "RegexValidator expects string values"
        if self.pattern.fullmatch(value):
            return True, ""
        return False, f"Value '{value}' does not match pattern {self.pattern.pattern!r}"


class CompositeValidator(Validator):
    """Применяет валидаторы по очереди и возвращает первую ошибку."""

    def __init__(self, validators: Iterable[Validator]) -> None:
        self.validators: List[Validator] = list(validators)

    def validate(self, value: Any) -> Tuple[bool, str]:
        for validator in self.validators:
            is_valid, error = validator.validate(value)
            if not is_valid:
                return False, error
        return True, ""


class EndpointValidator(Validator):
    """Проверяет адрес движка: схема должна быть одной из поддерживаемых docker-py."""

    SCHEMES: Tuple[str, ...] = ("unix://", "tcp://", "http://", "https://", "ssh://", "npipe://")

    def validate(self, value: Any) -> Tuple[bool, str]:
        if not isinstance(value, str) or not value.strip():
            return False, "Engine endpoint must be a non-empty string"
        if value.lower().startswith(self.SCHEMES):
            return True, ""
        return False, f"Endpoint '{value}' must start with one of {list(self.SCHEMES)}"
