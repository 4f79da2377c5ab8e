"""
Metric Reporting Filters

Include/exclude filtering of metric names for scheduled reporters, with exact
or regular-expression matching.
"""

__version__ = "0.1.0"

from .config import (
    TimeUnit,
    ReporterConfig,
    get_default_config,
    set_default_config,
)
from .exceptions import FilterConfigurationError
from .filtering import (
    ExactMatchingStrategy,
    FilterEngine,
    FilterResult,
    MatchingStrategy,
    MatchMode,
    MetricFilter,
    PatternCache,
    RegexMatchingStrategy,
    get_matching_strategy,
)

__all__ = [
    # Configuration
    "ReporterConfig",
    "TimeUnit",
    "get_default_config",
    "set_default_config",
    # Errors
    "FilterConfigurationError",
    # Filtering
    "MetricFilter",
    "FilterEngine",
    "FilterResult",
    "MatchMode",
    "MatchingStrategy",
    "ExactMatchingStrategy",
    "RegexMatchingStrategy",
    "PatternCache",
    "get_matching_strategy",
]
