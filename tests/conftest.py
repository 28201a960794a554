from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from partial_datetime.parsing.cache import ResultCache
from partial_datetime.parsing.instant import Instant
from partial_datetime.parsing.parser import DateTimeParser


@dataclass
class RecordingEngine:
    lang: str
    calls: list[tuple[str, Instant]] = field(default_factory=list)

    def format(self, pattern: str, instant: Instant) -> str:
        self.calls.append((pattern, instant))
        return f"[{self.lang}] {pattern}"


@pytest.fixture
def parser() -> DateTimeParser:
    return DateTimeParser(ResultCache())


@pytest.fixture
def recording_engines() -> dict[str, RecordingEngine]:
    return {}


@pytest.fixture
def recording_factory(recording_engines: dict[str, RecordingEngine]):
    def factory(lang: str) -> RecordingEngine:
        engine = RecordingEngine(lang=lang)
        recording_engines[lang] = engine
        return engine

    return factory
