"""Memoization of successful parses keyed by (raw value, fill policy)."""

from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Callable

from partial_datetime.parsing.models import FillPolicy, ParsedInstant

CacheKey = tuple[str, FillPolicy]


class ResultCache:
    """Thread-safe store of ``ParsedInstant`` results.

    Parsing is pure, so two threads racing on the same key may both compute;
    the first stored result wins and is what every caller gets back. With
    ``max_entries`` set, the least recently used entry is evicted.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max_entries = max_entries
        self._entries: OrderedDict[CacheKey, ParsedInstant] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: CacheKey) -> ParsedInstant | None:
        with self._lock:
            parsed = self._entries.get(key)
            if parsed is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return parsed

    def store(self, key: CacheKey, parsed: ParsedInstant) -> ParsedInstant:
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing
            self._entries[key] = parsed
            if self._max_entries is not None and len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
            return parsed

    def get_or_compute(
        self, key: CacheKey, compute: Callable[[], ParsedInstant]
    ) -> ParsedInstant:
        cached = self.get(key)
        if cached is not None:
            return cached
        # Computed outside the lock; exceptions propagate and nothing is stored.
        return self.store(key, compute())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
