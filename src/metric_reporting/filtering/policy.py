"""
Include/exclude policy deciding whether a metric should be reported
"""

import logging
from typing import Any, Iterable, Optional

from ..exceptions import FilterConfigurationError
from .base import FilterResult, MatchingStrategy, MatchMode, NameSet
from .matching import get_matching_strategy

logger = logging.getLogger(__name__)


def to_name_set(names: Optional[Iterable[str]]) -> NameSet:
    """Normalize a name collection to a frozenset; None means empty"""
    if names is None:
        return frozenset()
    if isinstance(names, str):
        return frozenset([names])
    return frozenset(names)


class MetricFilter:
    """
    Decides per metric name whether it is reported.

    Filtering works in 3 ways:

    - excludes only: everything is reported except names matching excludes
    - includes only: nothing is reported except names matching includes
    - both: a name is reported if it matches includes or does not match
      excludes, so it is suppressed only when it matches excludes and
      fails includes

    With neither configured, every metric is reported.
    """

    def __init__(
        self,
        includes: Optional[Iterable[str]] = None,
        excludes: Optional[Iterable[str]] = None,
        mode: MatchMode = MatchMode.EXACT,
        strategy: Optional[MatchingStrategy] = None,
    ):
        self.includes = to_name_set(includes)
        self.excludes = to_name_set(excludes)
        self.mode = mode
        if strategy is None:
            strategy = get_matching_strategy(mode)
        elif strategy.mode is not mode:
            raise FilterConfigurationError(
                f"Strategy {strategy!r} matches in {strategy.mode.value} mode, "
                f"filter was configured for {mode.value} mode"
            )
        self.strategy = strategy
        logger.debug(
            "Built metric filter: mode=%s includes=%d excludes=%d",
            mode.value,
            len(self.includes),
            len(self.excludes),
        )

    def should_report(self, name: str) -> bool:
        use_includes = bool(self.includes)
        use_excludes = bool(self.excludes)

        if use_includes and use_excludes:
            return self.strategy.contains_match(
                self.includes, name
            ) or not self.strategy.contains_match(self.excludes, name)
        elif use_includes:
            return self.strategy.contains_match(self.includes, name)
        elif use_excludes:
            return not self.strategy.contains_match(self.excludes, name)
        else:
            return True

    def evaluate(self, name: str) -> FilterResult:
        """Same decision as should_report, with the reason it was reached"""
        if not self.includes and not self.excludes:
            return FilterResult(should_report=True, reason="no_filtering")

        if self.includes and self.strategy.contains_match(self.includes, name):
            return FilterResult(should_report=True, reason="included")

        if self.excludes:
            if self.strategy.contains_match(self.excludes, name):
                return FilterResult(should_report=False, reason="excluded")
            return FilterResult(should_report=True, reason="not_excluded")

        return FilterResult(should_report=False, reason="not_included")

    def __call__(self, name: str, metric: Any = None) -> bool:
        return self.should_report(name)

    def __repr__(self) -> str:
        return (
            f"MetricFilter(includes={sorted(self.includes)}, "
            f"excludes={sorted(self.excludes)}, mode={self.mode.value})"
        )
