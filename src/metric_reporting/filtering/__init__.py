"""
Metric name filtering: include/exclude policy over exact or pattern matching
"""

from .base import FilterResult, MatchingStrategy, MatchMode
from .cache import PatternCache
from .engine import FilterEngine
from .matching import (
    ExactMatchingStrategy,
    RegexMatchingStrategy,
    get_matching_strategy,
)
from .policy import MetricFilter

__all__ = [
    "FilterResult",
    "MatchingStrategy",
    "MatchMode",
    "PatternCache",
    "ExactMatchingStrategy",
    "RegexMatchingStrategy",
    "get_matching_strategy",
    "MetricFilter",
    "FilterEngine",
]
