from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from partial_datetime.parsing.formats import CanonicalFormat, DisplayFormat, Precision
from partial_datetime.parsing.instant import Instant

RAW_FIELDS: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "offset_hour",
    "offset_minute",
)


class FillPolicy(str, Enum):
    """Which end of the implied range fills the fields a value leaves out."""

    FIRST = "first"
    LAST = "last"

    @classmethod
    def from_flag(cls, default_first: bool) -> FillPolicy:
        return cls.FIRST if default_first else cls.LAST


@dataclass(frozen=True)
class ParsedInstant:
    raw_value: str
    fill_policy: FillPolicy
    date_segment: str
    time_segment: str | None
    offset_segment: str | None

    year: int
    month: int | None
    day: int | None
    hour: int | None
    minute: int | None
    second: int | None
    offset_hour: int | None
    offset_minute: int | None

    month_normalized: int
    day_normalized: int
    hour_normalized: int
    minute_normalized: int
    second_normalized: int
    offset_hour_normalized: int
    offset_minute_normalized: int
    offset_normalized: str

    canonical_format: CanonicalFormat
    display_format: DisplayFormat
    instant: Instant

    @property
    def precision(self) -> Precision:
        return Precision[self.canonical_format.name]

    @property
    def timestamp(self) -> int:
        return self.instant.timestamp

    def raw_fields(self) -> dict[str, Any]:
        """Return only the fields spelled out in ``raw_value``."""
        values = {name: getattr(self, name) for name in RAW_FIELDS}
        return {name: value for name, value in values.items() if value is not None}
