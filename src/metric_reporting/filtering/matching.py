"""
Exact and regular-expression matching strategies for metric names
"""

from typing import Optional

from .base import MatchingStrategy, MatchMode, NameSet
from .cache import PatternCache


class ExactMatchingStrategy(MatchingStrategy):
    """Match by set membership, case-sensitive and without normalization"""

    mode = MatchMode.EXACT

    def contains_match(self, patterns: NameSet, candidate: str) -> bool:
        return candidate in patterns

    def __repr__(self) -> str:
        return "ExactMatchingStrategy()"


class RegexMatchingStrategy(MatchingStrategy):
    """Match by regular expressions anchored to the whole metric name"""

    mode = MatchMode.PATTERN

    def __init__(self, cache: Optional[PatternCache] = None):
        self.cache = cache if cache is not None else PatternCache()

    def contains_match(self, patterns: NameSet, candidate: str) -> bool:
        for pattern in patterns:
            if self.cache.get(pattern).fullmatch(candidate):
                return True
        return False

    def __repr__(self) -> str:
        return f"RegexMatchingStrategy(ttl_seconds={self.cache.ttl_seconds})"


# Stateless, so one instance serves every exact-mode filter
_EXACT_STRATEGY = ExactMatchingStrategy()


def get_matching_strategy(mode: MatchMode) -> MatchingStrategy:
    """Return a strategy for ``mode``; pattern mode gets its own cache"""
    if mode is MatchMode.PATTERN:
        return RegexMatchingStrategy()
    if mode is MatchMode.EXACT:
        return _EXACT_STRATEGY
    raise ValueError(f"Unknown match mode: {mode}")
