"""
Base classes for metric name filtering
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

NameSet = FrozenSet[str]


class MatchMode(Enum):
    """How include/exclude entries are compared against metric names"""

    EXACT = "exact"
    PATTERN = "pattern"


@dataclass(frozen=True)
class FilterResult:
    """Result of evaluating a metric name against a filter"""

    should_report: bool
    reason: Optional[str] = None


class MatchingStrategy(ABC):
    """Abstract base class for name matching strategies"""

    mode: MatchMode

    @abstractmethod
    def contains_match(self, patterns: NameSet, candidate: str) -> bool:
        """Return True if any entry of ``patterns`` matches ``candidate``"""
        pass
