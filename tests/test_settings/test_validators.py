"""Проверки валидаторов настроек."""

from __future__ import annotations

import re

from dockr.settings.validators import (
    CompositeValidator,
    EndpointValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
)


def test_type_validator_success() -> None:
    validator = TypeValidator((int, float))
    assert validator.validate(5) == (True, "")
    assert validator.validate(2.5) == (True, "")


def test_type_validator_failure() -> None:
    validator = TypeValidator(str)
    is_valid, error = validator.validate(123)
    assert not is_valid
    assert "str" in error


def test_type_validator_rejects_bool_for_numbers() -> None:
    is_valid, error = TypeValidator(int).validate(True)
    assert not is_valid
    assert "bool" in error
    assert TypeValidator(bool).validate(False) == (True, "")


def test_range_validator_out_of_bounds() -> None:
    validator = RangeValidator(1, 3600)
    assert validator.validate(60) == (True, "")
    is_valid, error = validator.validate(0.5)
    assert not is_valid
    assert "out of range" in error


def test_enum_validator_failure() -> None:
    validator = EnumValidator(["DEBUG", "INFO"])
    is_valid, error = validator.validate("TRACE")
    assert not is_valid
    assert "allowed values" in error


def test_regex_validator_failure_when_not_string() -> None:
    validator = RegexValidator(r"^\d+\.\d+$")
    is_valid, error = validator.validate(1.41)
    assert not is_valid
    assert "string" in error


def test_regex_validator_supports_compiled_pattern() -> None:
    validator = RegexValidator(re.compile(r"^\d+\.\d+$"))
    assert validator.validate("1.41") == (True, "")
    assert "does not match" in validator.validate("v1")[1]


def test_composite_validator_stops_on_first_error() -> None:
    validator = CompositeValidator([TypeValidator(int), RangeValidator(0, 10)])
    is_valid, error = validator.validate("not int")
    assert not is_valid
    assert "type" in error


def test_endpoint_validator_schemes() -> None:
    validator = EndpointValidator()
    for endpoint in ("unix:///var/run/docker.sock", "tcp://10.0.0.5:2376", "ssh://user@host"):
        assert validator.validate(endpoint) == (True, "")
    assert not validator.validate("ftp://host")[0]
    assert not validator.validate("")[0]
    assert not validator.validate(None)[0]
