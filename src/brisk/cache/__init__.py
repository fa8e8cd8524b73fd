from brisk.cache.patterns import CacheStats, PatternCache

__all__ = ["CacheStats", "PatternCache"]
