"""Extended-format ISO 8601 matching with reduced precision.

ISO 8601 only allows years beyond 0000-9999 by prior agreement between sender
and receiver. The supported range is unusually large, so years keep the
standard's four-digit zero padding but may grow past -9999 and 9999 without
being padded to twelve digits.

Only the extended format is accepted: hyphens between date fields and colons
between time and offset fields.
"""

from __future__ import annotations

import re

from partial_datetime.parsing.errors import InvalidFormatError

PATTERN_ISO8601 = re.compile(
    r"(?P<date>(?P<year>[+-]?\d{4,})(?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?)"
    r"(?P<time>T(?P<hour>\d{2})(?::(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?)?"
    r"(?P<offset>Z|(?P<offset_hour>[+-]\d{2})(?::(?P<offset_minute>\d{2}))?)?",
    re.ASCII,
)


def match_iso8601(value: str) -> dict[str, str]:
    """Decompose ``value`` into its named segments.

    Segments absent from the input are left out of the returned mapping.
    Raises ``InvalidFormatError`` when the whole string does not match.
    """
    if not isinstance(value, str):
        raise InvalidFormatError(str(value))
    match = PATTERN_ISO8601.fullmatch(value)
    if match is None:
        raise InvalidFormatError(value)
    return {name: text for name, text in match.groupdict().items() if text}
