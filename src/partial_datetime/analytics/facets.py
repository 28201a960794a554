"""Value/count facets over stored numeric values.

Stored datetime values are the signed timestamps of their ``FIRST`` reading;
facets group identical values and report how often each occurs, ordered by
value.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pandas as pd

from partial_datetime.parsing.models import FillPolicy
from partial_datetime.parsing.parser import DateTimeParser


def _counts_to_rows(series: pd.Series) -> list[dict[str, int]]:
    if series.empty:
        return []
    counts = series.value_counts().sort_index()
    return [
        {"value": int(value), "value_count": int(count)}
        for value, count in counts.items()
    ]


def timestamp_value_counts(values: Iterable[int]) -> list[dict[str, int]]:
    # Timestamps can exceed float precision; keep them as Python ints.
    series = pd.Series([int(value) for value in values], dtype=object)
    return _counts_to_rows(series)


def integer_value_counts(values: Iterable[Any]) -> list[dict[str, int]]:
    """Count integer values that may be stored as text.

    Text is cast to a number before grouping so ``"10"`` sorts after ``"9"``;
    entries that are not integers are dropped.
    """
    items = list(values)
    if not items:
        return []
    numeric = pd.to_numeric(pd.Series(items, dtype=object), errors="coerce").astype("float64")
    numeric = numeric.dropna()
    integral = numeric[numeric == numeric.round()]
    return _counts_to_rows(integral.astype("int64"))


def timestamps_for_values(
    values: Iterable[str],
    parser: DateTimeParser,
    policy: FillPolicy = FillPolicy.FIRST,
) -> list[int]:
    """Timestamps of ISO 8601 values; invalid values raise as in ``parse``."""
    series = pd.Series(list(values), dtype=object)
    return [int(stamp) for stamp in series.map(lambda value: parser.parse(value, policy).timestamp)]
