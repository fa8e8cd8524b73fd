"""Compile-once store for the regular expressions used by rules and parsers.

Every dynamically built pattern is looked up by a stable caller-supplied key
(usually a rule name), never by its source text.  The first pattern stored for
a ``(key, flags)`` pair is kept for the lifetime of the cache: a later call
with the same key and a different source still gets the original object back.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["CacheStats", "PatternCache"]


@dataclass(frozen=True)
class CacheStats:
    """Hit/miss counters for a :class:`PatternCache`."""

    hits: int
    misses: int
    size: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total * 100


class PatternCache:
    """Keyed store of compiled patterns.

    Not safe for concurrent mutation; each worker owns its own instance.
    """

    def __init__(self) -> None:
        self._patterns: dict[tuple[str, int], re.Pattern[str]] = {}
        self._hits = 0
        self._misses = 0

    def get_or_compile(
        self, key: str, source: str | re.Pattern[str], flags: int = 0
    ) -> re.Pattern[str]:
        """Return the pattern cached under *key* and *flags*, compiling on a miss.

        A precompiled pattern passed as *source* is stored and returned as-is.
        """
        cache_key = (key, int(flags))
        cached = self._patterns.get(cache_key)
        if cached is not None:
            self._hits += 1
            return cached
        self._misses += 1
        if isinstance(source, re.Pattern):
            compiled = source
        else:
            compiled = re.compile(source, flags)
        self._patterns[cache_key] = compiled
        return compiled

    def test(
        self, key: str, source: str | re.Pattern[str], text: str, flags: int = 0
    ) -> bool:
        """Return True if the cached pattern matches anywhere in *text*."""
        return self.get_or_compile(key, source, flags).search(text) is not None

    def extract(
        self, key: str, source: str | re.Pattern[str], text: str, flags: int = 0
    ) -> str | None:
        """Return the first capture group of the cached pattern, or None.

        None is returned when nothing matches or the pattern has no group.
        """
        pattern = self.get_or_compile(key, source, flags)
        match = pattern.search(text)
        if match is None or pattern.groups == 0:
            return None
        return match.group(1)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, tuple):
            return key in self._patterns
        return any(k == key for k, _ in self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def size(self) -> int:
        return len(self._patterns)

    def clear(self) -> None:
        """Drop every cached pattern and reset the counters."""
        self._patterns.clear()
        self._hits = 0
        self._misses = 0

    def stats(self) -> CacheStats:
        return CacheStats(hits=self._hits, misses=self._misses, size=len(self._patterns))
