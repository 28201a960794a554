"""Proleptic Gregorian calendar arithmetic on plain integers.

Nothing here goes through ``datetime``: the supported year range is far wider than
``datetime.MINYEAR``/``datetime.MAXYEAR``.
"""

from __future__ import annotations

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})

# Days between 0000-03-01 and 1970-01-01.
_EPOCH_SHIFT_DAYS = 719468


def is_leap_year(year: int) -> bool:
    if year % 4:
        return False
    if year % 100:
        return True
    return year % 400 == 0


def last_day(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def days_from_civil(year: int, month: int, day: int) -> int:
    """Return the day number of a calendar date, counted from 1970-01-01.

    Years are shifted to start in March so the leap day is the last day of the
    computational year; floor division keeps negative years exact.
    """
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    month_index = month - 3 if month > 2 else month + 9
    day_of_year = (153 * month_index + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - _EPOCH_SHIFT_DAYS
