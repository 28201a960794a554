"""Absolute points in time over the full 64-bit second range."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, datetime

from dateutil.tz import tzoffset

from partial_datetime.parsing.calendar import days_from_civil
from partial_datetime.parsing.errors import ConstructionError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

OFFSET_RE = re.compile(r"(?P<sign>[+-])(?P<hours>\d{2})(?::(?P<minutes>\d{2}))?", re.ASCII)


def offset_to_seconds(offset: str) -> int:
    match = OFFSET_RE.fullmatch(offset)
    if match is None:
        raise ConstructionError(f"Invalid UTC offset: {offset}")
    seconds = int(match["hours"]) * 3600 + int(match["minutes"] or 0) * 60
    return -seconds if match["sign"] == "-" else seconds


def format_offset(offset_seconds: int) -> str:
    sign = "-" if offset_seconds < 0 else "+"
    hours, remainder = divmod(abs(offset_seconds), 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


@dataclass(frozen=True, slots=True)
class Instant:
    """Wall-clock fields in a fixed UTC offset.

    The host timezone never takes part: the offset is always the one the value
    was written with (UTC when none was given).
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    offset_seconds: int

    @property
    def timestamp(self) -> int:
        days = days_from_civil(self.year, self.month, self.day)
        wall = days * 86400 + self.hour * 3600 + self.minute * 60 + self.second
        return wall - self.offset_seconds

    @property
    def utcoffset_text(self) -> str:
        return format_offset(self.offset_seconds)

    @property
    def fits_datetime(self) -> bool:
        return MINYEAR <= self.year <= MAXYEAR

    def to_datetime(self) -> datetime:
        if not self.fits_datetime:
            raise ConstructionError(f"Year {self.year} cannot be represented as a datetime")
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            tzinfo=tzoffset(None, self.offset_seconds),
        )


def build_instant(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    offset: str,
) -> Instant:
    instant = Instant(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        offset_seconds=offset_to_seconds(offset),
    )
    if not INT64_MIN <= instant.timestamp <= INT64_MAX:
        raise ConstructionError(
            f"Datetime {year}-{month:02d}-{day:02d} exceeds the 64-bit timestamp range"
        )
    return instant
