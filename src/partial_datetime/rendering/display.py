"""Human-readable rendering of parsed values.

English (or no language at all) uses the fixed ``DisplayFormat`` templates.
Other languages go through a ``LocaleEngine`` with the matching Unicode
pattern.

Known limitation: values with a year of zero or below are always rendered with
the English templates. The proleptic Gregorian calendar has a year zero while
era-based calendars do not, so locale libraries shift such dates (15 March -44
would come out as 17 March 45 BC). Adding a year to compensate drifts with the
leap days, so no correction is attempted.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Callable

from babel import UnknownLocaleError

from partial_datetime.config.settings import LocaleEngineKind, Settings, get_settings
from partial_datetime.parsing.formats import UNICODE_DISPLAY_PATTERNS, strip_era
from partial_datetime.parsing.models import ParsedInstant
from partial_datetime.rendering.locale_engine import BabelLocaleEngine, LocaleEngine
from partial_datetime.rendering.templates import format_fixed
from partial_datetime.utils.logging import get_logger

logger = get_logger(__name__)

EngineFactory = Callable[[str], LocaleEngine]

MAX_CACHED_ENGINES = 32


def is_english(lang: str | None) -> bool:
    return not lang or lang[:2].lower() == "en"


def normalize_lang(lang: str) -> str:
    """Canonical cache key for a tag: ``fr-FR`` and ``fr_FR`` share one engine."""
    return lang.strip().replace("-", "_")


class DisplayFormatter:
    def __init__(
        self,
        engine_factory: EngineFactory | None = BabelLocaleEngine,
        default_lang: str | None = None,
        keep_era: bool = False,
    ) -> None:
        self.engine_factory = engine_factory
        self.default_lang = default_lang
        self.keep_era = keep_era
        self._engines: OrderedDict[str, LocaleEngine | None] = OrderedDict()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> DisplayFormatter:
        resolved = settings or get_settings()
        factory = BabelLocaleEngine if resolved.locale_engine is LocaleEngineKind.BABEL else None
        return cls(
            engine_factory=factory,
            default_lang=resolved.default_lang or None,
            keep_era=resolved.keep_era,
        )

    def pattern_for(self, parsed: ParsedInstant) -> str:
        pattern = UNICODE_DISPLAY_PATTERNS[parsed.display_format]
        return pattern if self.keep_era else strip_era(pattern)

    def _engine(self, lang: str) -> LocaleEngine | None:
        key = normalize_lang(lang)
        with self._lock:
            if key in self._engines:
                self._engines.move_to_end(key)
                return self._engines[key]

        try:
            engine = self.engine_factory(key)
        except (UnknownLocaleError, ValueError) as exc:
            logger.warning("Locale %r unavailable, rendering in English: %s", lang, exc)
            engine = None

        with self._lock:
            self._engines[key] = engine
            # Tags come from callers; keep only the most recently used engines.
            while len(self._engines) > MAX_CACHED_ENGINES:
                self._engines.popitem(last=False)
        return engine

    def render(self, parsed: ParsedInstant, lang: str | None = None) -> str:
        resolved = lang or self.default_lang
        if is_english(resolved) or self.engine_factory is None:
            return format_fixed(parsed)

        instant = parsed.instant
        if instant.year <= 0:
            logger.debug("Year %s has no era-consistent rendering, using English", instant.year)
            return format_fixed(parsed)
        if not instant.fits_datetime:
            logger.debug("Year %s is beyond the locale engine, using English", instant.year)
            return format_fixed(parsed)

        engine = self._engine(resolved)
        if engine is None:
            return format_fixed(parsed)
        return engine.format(self.pattern_for(parsed), instant)
