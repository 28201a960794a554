"""strftime-style rendering that works for any year.

``datetime.strftime`` stops at year 9999, so the handful of directives the
format tables use are expanded here directly from ``Instant`` fields.
"""

from __future__ import annotations

import re

from partial_datetime.parsing.instant import Instant
from partial_datetime.parsing.models import ParsedInstant

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DIRECTIVE_RE = re.compile(r"%(:z|-d|[YmdHMSB%])")


def format_year(year: int) -> str:
    """At least four digits, with a leading ``-`` before year zero."""
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}"


def render_template(template: str, instant: Instant, offset_text: str | None = None) -> str:
    offset = offset_text if offset_text is not None else instant.utcoffset_text
    values = {
        "Y": format_year(instant.year),
        "m": f"{instant.month:02d}",
        "d": f"{instant.day:02d}",
        "-d": str(instant.day),
        "H": f"{instant.hour:02d}",
        "M": f"{instant.minute:02d}",
        "S": f"{instant.second:02d}",
        "B": MONTH_NAMES[instant.month - 1],
        ":z": offset,
        "%": "%",
    }
    return _DIRECTIVE_RE.sub(lambda match: values[match.group(1)], template)


def format_canonical(parsed: ParsedInstant) -> str:
    """Re-serialize to ISO 8601 at the precision the value was written with.

    The output parses back to the same explicit fields: a written offset
    (``Z``, ``+05`` or ``-03:30``) is repeated as it was written.
    """
    return render_template(parsed.canonical_format.value, parsed.instant, parsed.offset_segment)


def format_fixed(parsed: ParsedInstant) -> str:
    """English rendering, e.g. ``January 5, 2023 10:30 +05:00``."""
    return render_template(parsed.display_format.value, parsed.instant)
