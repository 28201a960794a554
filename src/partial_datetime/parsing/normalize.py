"""Default filling and range validation of matched ISO 8601 segments.

Validation is a side effect of normalization: every field, explicit or filled
in, is range checked before a format is chosen.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from partial_datetime.parsing.calendar import last_day
from partial_datetime.parsing.errors import InvalidFormatError, OutOfRangeError
from partial_datetime.parsing.formats import CANONICAL_FORMATS, DISPLAY_FORMATS, select_precision
from partial_datetime.parsing.models import FillPolicy

# Bounds of years whose dates still convert to a signed 64-bit Unix timestamp.
YEAR_MIN = -292277022656
YEAR_MAX = 292277026595

UTC_OFFSET = "+00:00"

_FIRST_DEFAULTS = {"month": 1, "hour": 0, "minute": 0, "second": 0}
_LAST_DEFAULTS = {"month": 12, "hour": 23, "minute": 59, "second": 59}


def _optional_int(captures: Mapping[str, str], name: str) -> int | None:
    text = captures.get(name)
    return int(text) if text is not None else None


def _normalize_offset(offset: str | None) -> str:
    # Written offsets are kept verbatim, ``+05`` included.
    if offset is None or offset == "Z":
        return UTC_OFFSET
    return offset


def _check_range(field: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise OutOfRangeError(field, value)


def check_structure(value: str, captures: Mapping[str, str]) -> None:
    # An hour requires a day.
    if "hour" in captures and "day" not in captures:
        raise InvalidFormatError(value)
    # An offset requires a time.
    if "offset" in captures and "time" not in captures:
        raise InvalidFormatError(value)


def validate(fields: Mapping[str, Any]) -> None:
    _check_range("year", fields["year"], YEAR_MIN, YEAR_MAX)
    _check_range("month", fields["month_normalized"], 1, 12)
    _check_range(
        "day",
        fields["day_normalized"],
        1,
        last_day(fields["year"], fields["month_normalized"]),
    )
    _check_range("hour", fields["hour_normalized"], 0, 23)
    _check_range("minute", fields["minute_normalized"], 0, 59)
    _check_range("second", fields["second_normalized"], 0, 59)
    _check_range("hour offset", fields["offset_hour_normalized"], -23, 23)
    _check_range("minute offset", fields["offset_minute_normalized"], 0, 59)


def normalize_components(
    value: str, captures: Mapping[str, str], policy: FillPolicy
) -> dict[str, Any]:
    """Return raw, normalized and format fields for a matched value.

    ``captures`` is the output of ``match_iso8601``. The returned mapping has
    every ``ParsedInstant`` field except ``instant``.
    """
    check_structure(value, captures)

    fields: dict[str, Any] = {
        "raw_value": value,
        "fill_policy": policy,
        "date_segment": captures["date"],
        "time_segment": captures.get("time"),
        "offset_segment": captures.get("offset"),
        "year": int(captures["year"]),
    }
    for name in ("month", "day", "hour", "minute", "second", "offset_hour", "offset_minute"):
        fields[name] = _optional_int(captures, name)

    defaults = _FIRST_DEFAULTS if policy is FillPolicy.FIRST else _LAST_DEFAULTS
    month = fields["month"] if fields["month"] is not None else defaults["month"]
    fields["month_normalized"] = month
    if fields["day"] is not None:
        fields["day_normalized"] = fields["day"]
    elif policy is FillPolicy.FIRST:
        fields["day_normalized"] = 1
    else:
        # The last day depends on year and month; an invalid month is caught below.
        fields["day_normalized"] = last_day(fields["year"], month)
    for name in ("hour", "minute", "second"):
        raw = fields[name]
        fields[f"{name}_normalized"] = raw if raw is not None else defaults[name]
    # There is no "last possible" offset: it always falls back to UTC.
    fields["offset_hour_normalized"] = fields["offset_hour"] or 0
    fields["offset_minute_normalized"] = fields["offset_minute"] or 0
    fields["offset_normalized"] = _normalize_offset(fields["offset_segment"])

    validate(fields)

    present = [name for name in ("month", "day", "hour", "minute", "second") if fields[name] is not None]
    if fields["offset_segment"] is not None:
        present.append("offset")
    precision = select_precision(present)
    fields["canonical_format"] = CANONICAL_FORMATS[precision]
    fields["display_format"] = DISPLAY_FORMATS[precision]
    return fields
