"""
Applies a metric filter to registry snapshots and counts decisions
"""

import threading
from collections import defaultdict
from typing import Any, Dict, Mapping

from .policy import MetricFilter


class FilterEngine:
    """Runs a MetricFilter over the metrics collected on a reporting tick"""

    def __init__(self, metric_filter: MetricFilter):
        self.metric_filter = metric_filter
        self.metrics: Dict[str, int] = defaultdict(int)
        self._lock = threading.Lock()

    def should_report(self, name: str) -> bool:
        """Evaluate a single metric name and record the outcome"""
        decision = self.metric_filter.should_report(name)

        with self._lock:
            self.metrics["total_evaluated"] += 1
            if decision:
                self.metrics["reported"] += 1
            else:
                self.metrics["suppressed"] += 1

        return decision

    def filter_metrics(self, metrics: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the subset of ``metrics`` whose names should be reported"""
        return {
            name: metric
            for name, metric in metrics.items()
            if self.should_report(name)
        }

    def get_metrics(self) -> Dict[str, Any]:
        """Get filtering metrics"""
        with self._lock:
            total_evaluated = self.metrics.get("total_evaluated", 0)
            reported = self.metrics.get("reported", 0)
            suppressed = self.metrics.get("suppressed", 0)

        return {
            "summary": {
                "total_evaluated": total_evaluated,
                "reported": reported,
                "suppressed": suppressed,
            },
            "report_rate": reported / max(1, total_evaluated),
        }

    def reset_metrics(self):
        """Reset all metrics"""
        with self._lock:
            self.metrics.clear()
