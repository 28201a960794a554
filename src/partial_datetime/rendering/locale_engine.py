"""Locale-aware formatting capability used by the display formatter."""

from __future__ import annotations

from typing import Protocol

from babel import Locale
from babel.dates import format_datetime

from partial_datetime.parsing.instant import Instant


class LocaleEngine(Protocol):
    def format(self, pattern: str, instant: Instant) -> str:
        """Render ``instant`` with a Unicode (CLDR) date pattern."""
        ...


class BabelLocaleEngine:
    """``LocaleEngine`` backed by Babel's CLDR data.

    Raises ``babel.UnknownLocaleError`` (or ``ValueError`` for a malformed tag)
    when the locale cannot be loaded.
    """

    def __init__(self, lang: str) -> None:
        self.locale = Locale.parse(lang.replace("-", "_"))

    def format(self, pattern: str, instant: Instant) -> str:
        return format_datetime(instant.to_datetime(), format=pattern, locale=self.locale)
