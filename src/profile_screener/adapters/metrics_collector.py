"""
In-Memory Metrics Collector.

Stores run metrics in memory; one collector per screening run.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "count", value, tags)

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "gauge", value, tags)

    def total(self, name: str, tags: Optional[Dict[str, str]] = None) -> float:
        """Sum of recorded values for a metric, optionally filtered by tags."""
        entries = self._metrics.get(name, [])
        if tags:
            entries = [
                e for e in entries
                if all(e["tags"].get(k) == v for k, v in tags.items())
            ]
        return sum(e["value"] for e in entries)

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric: number of samples, total and last value."""
        summary = {}
        for name, entries in self._metrics.items():
            if entries:
                values = [e["value"] for e in entries]
                summary[name] = {
                    "count": len(values),
                    "total": sum(values),
                    "last": values[-1],
                }
        return summary

    def clear(self) -> None:
        self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: Any,
        tags: Optional[Dict[str, str]],
    ) -> None:
        self._metrics.setdefault(name, []).append(
            {
                "type": metric_type,
                "value": value,
                "tags": tags or {},
                "timestamp": datetime.now().isoformat(),
            }
        )
