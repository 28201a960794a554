"""Format identifiers selected from the fields a value spells out.

Both the canonical and the display format derive from one ``Precision`` level,
chosen by walking ``PRECISION_LADDER`` from most to least specific.
"""

from __future__ import annotations

from collections.abc import Collection
from enum import Enum


class Precision(str, Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    HOUR_OFFSET = "hour_offset"
    MINUTE_OFFSET = "minute_offset"
    SECOND_OFFSET = "second_offset"


class CanonicalFormat(str, Enum):
    """ISO 8601 re-serialization templates (strftime-style directives)."""

    SECOND_OFFSET = "%Y-%m-%dT%H:%M:%S%:z"
    MINUTE_OFFSET = "%Y-%m-%dT%H:%M%:z"
    HOUR_OFFSET = "%Y-%m-%dT%H%:z"
    SECOND = "%Y-%m-%dT%H:%M:%S"
    MINUTE = "%Y-%m-%dT%H:%M"
    HOUR = "%Y-%m-%dT%H"
    DAY = "%Y-%m-%d"
    MONTH = "%Y-%m"
    YEAR = "%Y"


class DisplayFormat(str, Enum):
    """Fixed English rendering templates."""

    SECOND_OFFSET = "%B %-d, %Y %H:%M:%S %:z"
    MINUTE_OFFSET = "%B %-d, %Y %H:%M %:z"
    HOUR_OFFSET = "%B %-d, %Y %H %:z"
    SECOND = "%B %-d, %Y %H:%M:%S"
    MINUTE = "%B %-d, %Y %H:%M"
    HOUR = "%B %-d, %Y %H"
    DAY = "%B %-d, %Y"
    MONTH = "%B %Y"
    YEAR = "%Y"


PRECISION_LADDER: tuple[tuple[frozenset[str], Precision], ...] = (
    (frozenset({"month", "day", "hour", "minute", "second", "offset"}), Precision.SECOND_OFFSET),
    (frozenset({"month", "day", "hour", "minute", "offset"}), Precision.MINUTE_OFFSET),
    (frozenset({"month", "day", "hour", "offset"}), Precision.HOUR_OFFSET),
    (frozenset({"month", "day", "hour", "minute", "second"}), Precision.SECOND),
    (frozenset({"month", "day", "hour", "minute"}), Precision.MINUTE),
    (frozenset({"month", "day", "hour"}), Precision.HOUR),
    (frozenset({"month", "day"}), Precision.DAY),
    (frozenset({"month"}), Precision.MONTH),
)

CANONICAL_FORMATS: dict[Precision, CanonicalFormat] = {
    precision: CanonicalFormat[precision.name] for precision in Precision
}
DISPLAY_FORMATS: dict[Precision, DisplayFormat] = {
    precision: DisplayFormat[precision.name] for precision in Precision
}

# Unicode (CLDR/ICU) patterns for locale-aware rendering. Day comes before the
# month because English is the exception among languages in natural order.
UNICODE_DISPLAY_PATTERNS: dict[DisplayFormat, str] = {
    DisplayFormat.SECOND_OFFSET: "d LLLL yyyy G, HH:mm:ss xxx",
    DisplayFormat.MINUTE_OFFSET: "d LLLL yyyy G, HH:mm xxx",
    DisplayFormat.HOUR_OFFSET: "d LLLL yyyy G, HH xxx",
    DisplayFormat.SECOND: "d LLLL yyyy G, HH:mm:ss",
    DisplayFormat.MINUTE: "d LLLL yyyy G, HH:mm",
    DisplayFormat.HOUR: "d LLLL yyyy G, HH",
    DisplayFormat.DAY: "d LLLL yyyy G",
    DisplayFormat.MONTH: "LLLL yyyy G",
    DisplayFormat.YEAR: "yyyy G",
}


def select_precision(present: Collection[str]) -> Precision:
    """Return the most specific level whose fields are all in ``present``."""
    fields = frozenset(present)
    for required, precision in PRECISION_LADDER:
        if required <= fields:
            return precision
    return Precision.YEAR


def strip_era(pattern: str) -> str:
    return pattern.replace(" G", "")
