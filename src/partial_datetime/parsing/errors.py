"""Typed failures raised while parsing partial ISO 8601 values."""

from __future__ import annotations

from typing import Any


class DateTimeValueError(ValueError):
    """Base class for every parse/validation failure."""


class InvalidFormatError(DateTimeValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid ISO 8601 datetime: {value}")
        self.value = value


class OutOfRangeError(DateTimeValueError):
    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Invalid {field}: {value}")
        self.field = field
        self.value = value


class ConstructionError(DateTimeValueError):
    pass
