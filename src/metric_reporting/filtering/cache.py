"""
Time-expiring cache of compiled regular expressions
"""

import logging
import re
import threading
import time
from typing import Callable, Dict, Pattern, Tuple

from ..exceptions import FilterConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600.0


class PatternCache:
    """
    Maps pattern strings to compiled patterns, compiling lazily on first use.

    Entries expire ``ttl_seconds`` after they were written; reads do not
    refresh them. An expired entry is recompiled transparently on the next
    lookup. The lock only guards the mapping, compilation runs outside it,
    so concurrent misses on the same pattern may compile twice and the last
    write wins.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[Pattern[str], float]] = {}
        self._lock = threading.Lock()

    def get(self, pattern: str) -> Pattern[str]:
        """Return the compiled form of ``pattern``, compiling on miss or expiry"""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(pattern)

        if entry is not None:
            compiled, written_at = entry
            if now - written_at < self.ttl_seconds:
                return compiled
            logger.debug("Pattern cache entry expired, recompiling %r", pattern)

        compiled = self._compile(pattern)
        with self._lock:
            self._purge_expired(now)
            self._entries[pattern] = (compiled, now)
        return compiled

    def invalidate(self, pattern: str) -> None:
        with self._lock:
            self._entries.pop(pattern, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, pattern) -> bool:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(pattern)
        return entry is not None and now - entry[1] < self.ttl_seconds

    def _purge_expired(self, now: float) -> None:
        """Drop expired entries; caller must hold the lock"""
        expired = [
            key
            for key, (_, written_at) in self._entries.items()
            if now - written_at >= self.ttl_seconds
        ]
        for key in expired:
            del self._entries[key]

    @staticmethod
    def _compile(pattern: str) -> Pattern[str]:
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            logger.error("Invalid metric filter pattern %r: %s", pattern, e)
            raise FilterConfigurationError(
                f"Invalid metric filter pattern {pattern!r}: {e}", pattern=pattern
            ) from e
        logger.debug("Compiled metric filter pattern %r", pattern)
        return compiled
