"""Entry points for turning raw ISO 8601 strings into ``ParsedInstant`` values."""

from __future__ import annotations

from partial_datetime.config.settings import Settings, get_settings
from partial_datetime.parsing.cache import ResultCache
from partial_datetime.parsing.errors import DateTimeValueError
from partial_datetime.parsing.instant import build_instant
from partial_datetime.parsing.models import FillPolicy, ParsedInstant
from partial_datetime.parsing.normalize import normalize_components
from partial_datetime.parsing.patterns import match_iso8601
from partial_datetime.utils.logging import get_logger

logger = get_logger(__name__)


def parse_value(value: str, policy: FillPolicy = FillPolicy.FIRST) -> ParsedInstant:
    """Parse and validate ``value`` without any caching.

    Fields the value leaves out are filled with their earliest (``FIRST``) or
    latest (``LAST``) possible value. Raises a ``DateTimeValueError`` subclass
    naming the offending field when the value is rejected.
    """
    captures = match_iso8601(value)
    fields = normalize_components(value, captures, policy)
    instant = build_instant(
        fields["year"],
        fields["month_normalized"],
        fields["day_normalized"],
        fields["hour_normalized"],
        fields["minute_normalized"],
        fields["second_normalized"],
        fields["offset_normalized"],
    )
    return ParsedInstant(**fields, instant=instant)


class DateTimeParser:
    """Caching parser; owns (or is handed) the ``ResultCache`` it fills."""

    def __init__(self, cache: ResultCache | None = None) -> None:
        self.cache = cache if cache is not None else ResultCache()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> DateTimeParser:
        resolved = settings or get_settings()
        return cls(ResultCache(max_entries=resolved.cache_max_entries))

    @staticmethod
    def _compute(value: str, policy: FillPolicy) -> ParsedInstant:
        logger.debug("Parsing %r with %s fill policy", value, policy.value)
        try:
            return parse_value(value, policy)
        except DateTimeValueError as exc:
            logger.debug("Rejected %r: %s", value, exc)
            raise

    def parse(self, value: str, policy: FillPolicy = FillPolicy.FIRST) -> ParsedInstant:
        policy = FillPolicy(policy)
        return self.cache.get_or_compute((value, policy), lambda: self._compute(value, policy))

    def parse_range(self, value: str) -> tuple[ParsedInstant, ParsedInstant]:
        """Return the earliest and latest readings of ``value``."""
        return self.parse(value, FillPolicy.FIRST), self.parse(value, FillPolicy.LAST)

    def timestamp_bounds(self, value: str) -> tuple[int, int]:
        """Inclusive timestamp bounds covered by ``value``.

        ``2023`` spans 2023-01-01T00:00:00 through 2023-12-31T23:59:59 UTC, the
        bounds an "on or after" / "on or before" comparison needs.
        """
        first, last = self.parse_range(value)
        return first.timestamp, last.timestamp
