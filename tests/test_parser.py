from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from partial_datetime.parsing.errors import InvalidFormatError, OutOfRangeError
from partial_datetime.parsing.formats import CanonicalFormat, DisplayFormat, Precision
from partial_datetime.parsing.models import FillPolicy
from partial_datetime.parsing.normalize import YEAR_MAX, YEAR_MIN
from partial_datetime.parsing.parser import DateTimeParser, parse_value


def _normalized(parsed):
    return (
        parsed.month_normalized,
        parsed.day_normalized,
        parsed.hour_normalized,
        parsed.minute_normalized,
        parsed.second_normalized,
    )


@pytest.mark.parametrize("value", ["0000", "1970", "2023", "-0044", "+9999", "123456789"])
def test_year_only_fills_first_and_last(value):
    first = parse_value(value, FillPolicy.FIRST)
    last = parse_value(value, FillPolicy.LAST)

    assert _normalized(first) == (1, 1, 0, 0, 0)
    assert _normalized(last) == (12, 31, 23, 59, 59)
    assert first.month is None and first.day is None and first.hour is None
    assert first.offset_normalized == last.offset_normalized == "+00:00"
    assert first.canonical_format is CanonicalFormat.YEAR
    assert last.display_format is DisplayFormat.YEAR


def test_last_fill_uses_last_day_of_month():
    assert parse_value("2023-02", FillPolicy.LAST).day_normalized == 28
    assert parse_value("2024-02", FillPolicy.LAST).day_normalized == 29
    assert parse_value("1900-02", FillPolicy.LAST).day_normalized == 28
    assert parse_value("2000-02", FillPolicy.LAST).day_normalized == 29
    assert parse_value("2023-04", FillPolicy.LAST).day_normalized == 30
    assert parse_value("2023-04", FillPolicy.FIRST).day_normalized == 1


def test_offset_defaults_to_utc_regardless_of_policy():
    last = parse_value("2023-07-04T09", FillPolicy.LAST)

    assert last.offset_hour_normalized == 0
    assert last.offset_minute_normalized == 0
    assert last.offset_normalized == "+00:00"
    assert last.offset_segment is None
    assert (last.minute_normalized, last.second_normalized) == (59, 59)


def test_full_datetime_with_offset():
    parsed = parse_value("2023-01-01T10:30:00+05:00")

    assert parsed.precision is Precision.SECOND_OFFSET
    assert parsed.canonical_format is CanonicalFormat.SECOND_OFFSET
    assert parsed.display_format is DisplayFormat.SECOND_OFFSET
    assert parsed.offset_normalized == "+05:00"
    assert parsed.offset_hour == 5 and parsed.offset_minute == 0
    assert parsed.date_segment == "2023-01-01"
    assert parsed.time_segment == "T10:30:00"
    assert parsed.offset_segment == "+05:00"
    assert parsed.timestamp == 1672551000


def test_offset_variants_are_normalized():
    zulu = parse_value("2023-01-01T10Z")
    assert zulu.offset_normalized == "+00:00"
    assert zulu.offset_hour is None
    assert zulu.precision is Precision.HOUR_OFFSET

    short = parse_value("2023-01-01T10:30+05")
    assert short.offset_normalized == "+05"
    assert short.offset_normalized == short.offset_segment
    assert short.offset_minute is None
    assert short.offset_minute_normalized == 0
    assert short.instant.offset_seconds == 5 * 3600
    assert short.precision is Precision.MINUTE_OFFSET

    west = parse_value("2023-01-01T10-05")
    assert west.offset_normalized == "-05"
    assert west.offset_hour_normalized == -5
    assert west.timestamp == 1672531200 + 15 * 3600

    negative = parse_value("2023-01-01T00:00:00-00:30")
    assert negative.offset_hour_normalized == 0
    assert negative.offset_minute_normalized == 30
    assert negative.instant.offset_seconds == -1800
    assert negative.timestamp == 1672531200 + 1800


@pytest.mark.parametrize(
    ("value", "precision"),
    [
        ("2023-07-04T09:15:30+02:00", Precision.SECOND_OFFSET),
        ("2023-07-04T09:15+02:00", Precision.MINUTE_OFFSET),
        ("2023-07-04T09+02:00", Precision.HOUR_OFFSET),
        ("2023-07-04T09:15:30", Precision.SECOND),
        ("2023-07-04T09:15", Precision.MINUTE),
        ("2023-07-04T09", Precision.HOUR),
        ("2023-07-04", Precision.DAY),
        ("2023-07", Precision.MONTH),
        ("2023", Precision.YEAR),
    ],
)
def test_precision_follows_explicit_fields(value, precision):
    parsed = parse_value(value, FillPolicy.LAST)

    assert parsed.precision is precision
    assert parsed.canonical_format.name == precision.name
    assert parsed.display_format.name == precision.name


@pytest.mark.parametrize(
    "value",
    ["2023T10", "2023-01T10", "2023-01T10:30", "2023-01-01Z", "2023-01-01+05:00", "2023Z"],
)
def test_structural_rules_raise_invalid_format(value):
    with pytest.raises(InvalidFormatError):
        parse_value(value)


def test_hour_with_day_is_valid():
    parsed = parse_value("2023-01-01T10")

    assert parsed.hour == 10
    assert parsed.minute is None
    assert parsed.minute_normalized == 0


@pytest.mark.parametrize(
    ("value", "field", "bad"),
    [
        ("-292277022657-01-01", "year", -292277022657),
        ("292277026596", "year", 292277026596),
        ("2023-13", "month", 13),
        ("2023-00", "month", 0),
        ("2023-02-30", "day", 30),
        ("2023-04-31", "day", 31),
        ("2023-01-00", "day", 0),
        ("2023-01-01T24", "hour", 24),
        ("2023-01-01T10:60", "minute", 60),
        ("2023-01-01T10:00:60", "second", 60),
        ("2023-01-01T10+24:00", "hour offset", 24),
        ("2023-01-01T10-24:00", "hour offset", -24),
        ("2023-01-01T10+05:60", "minute offset", 60),
    ],
)
def test_out_of_range_names_field_and_value(value, field, bad):
    with pytest.raises(OutOfRangeError) as exc_info:
        parse_value(value)

    assert exc_info.value.field == field
    assert exc_info.value.value == bad
    assert str(exc_info.value) == f"Invalid {field}: {bad}"


def test_out_of_range_month_is_reported_before_day_under_last_policy():
    with pytest.raises(OutOfRangeError) as exc_info:
        parse_value("2023-13", FillPolicy.LAST)

    assert exc_info.value.field == "month"


def test_leap_day_is_accepted_only_in_leap_years():
    assert parse_value("2024-02-29").day == 29
    assert parse_value("2000-02-29").day == 29
    with pytest.raises(OutOfRangeError):
        parse_value("1900-02-29")


def test_year_bounds_are_inclusive():
    lowest = parse_value(str(YEAR_MIN), FillPolicy.FIRST)
    highest = parse_value(str(YEAR_MAX), FillPolicy.LAST)

    assert lowest.year == YEAR_MIN
    assert highest.year == YEAR_MAX
    assert -(2**63) <= lowest.timestamp < highest.timestamp <= 2**63 - 1


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_value("2023-02-30")


def test_parse_is_idempotent_and_cached(parser):
    first_call = parser.parse("2023-05-06T07:08")
    second_call = parser.parse("2023-05-06T07:08")

    assert first_call is second_call
    assert first_call == parse_value("2023-05-06T07:08")
    assert parser.cache.hits == 1
    assert parser.cache.misses == 1


def test_first_and_last_results_are_cached_separately(parser):
    first = parser.parse("2023", FillPolicy.FIRST)
    last = parser.parse("2023", FillPolicy.LAST)

    assert first is not last
    assert len(parser.cache) == 2
    assert first.raw_fields() == last.raw_fields() == {"year": 2023}
    assert first.fill_policy is FillPolicy.FIRST
    assert last.fill_policy is FillPolicy.LAST
    assert _normalized(first) != _normalized(last)
    assert parser.parse("2023", FillPolicy.FIRST) is first
    assert parser.parse("2023", "last") is last


def test_failed_parses_are_not_cached(parser):
    for _ in range(2):
        with pytest.raises(OutOfRangeError):
            parser.parse("2023-02-30")

    assert len(parser.cache) == 0
    assert parser.cache.misses == 2


def test_concurrent_parses_share_one_result(parser):
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: parser.parse("1999-12-31T23:59:59Z"), range(64)))

    assert len(parser.cache) == 1
    assert all(result is results[0] for result in results)


def test_timestamp_bounds_span_the_whole_value(parser):
    assert parser.timestamp_bounds("2023") == (1672531200, 1704067199)
    assert parser.timestamp_bounds("2023-01-01") == (1672531200, 1672617599)
    assert parser.timestamp_bounds("2023-01-01T10:30:00+05:00") == (1672551000, 1672551000)

    first, last = parser.parse_range("2024-02")
    assert (first.day_normalized, last.day_normalized) == (1, 29)


def test_from_flag_maps_legacy_boolean():
    assert FillPolicy.from_flag(True) is FillPolicy.FIRST
    assert FillPolicy.from_flag(False) is FillPolicy.LAST


def test_parser_from_settings_bounds_cache(monkeypatch):
    monkeypatch.setenv("PARTIAL_DATETIME_CACHE_MAX_ENTRIES", "2")

    parser = DateTimeParser.from_settings()
    for value in ("2021", "2022", "2023"):
        parser.parse(value)

    assert len(parser.cache) == 2
    assert ("2021", FillPolicy.FIRST) not in parser.cache
