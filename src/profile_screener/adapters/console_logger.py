"""
Console Audit Logger.

Writes audit events as single lines tagged with time, the first eight
characters of the run's correlation id and a level:

    [14:02:11] [3f2a9c1b] [INFO ] rating: 30/120 (failed=1, batch=1)
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

NO_CORRELATION = "-" * 8


def _format_details(details: Optional[Dict[str, Any]]) -> str:
    if not details:
        return ""
    return ", ".join(f"{key}={value}" for key, value in details.items())


class ConsoleAuditLogger:
    """Audit logger printing to a text stream (stdout by default)."""

    def __init__(self, verbose: bool = True, stream: Optional[TextIO] = None) -> None:
        """
        Args:
            verbose: Also print stage starts and progress. Stage ends,
                     item failures and anomalies are always printed.
            stream: Destination; resolved to sys.stdout at write time if None
        """
        self._verbose = verbose
        self._stream = stream
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        self._correlation_id = correlation_id

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not self._verbose:
            return
        self._emit("INFO", f"{stage_name} started with {input_count} items")

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = _format_details(metadata)
        suffix = f" [{details}]" if details else ""
        self._emit(
            "INFO",
            f"{stage_name} done: {output_count} items in {duration_seconds:.3f}s{suffix}",
        )

    def log_progress(
        self,
        stage_name: str,
        completed: int,
        total: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not self._verbose:
            return
        details = _format_details(metadata)
        self._emit(
            "INFO",
            f"{stage_name}: {completed}/{total}" + (f" ({details})" if details else ""),
        )

    def log_item_failed(self, identifier: str, stage_name: str, reason: str) -> None:
        self._emit("WARN", f"{stage_name} failed for {identifier}: {reason}")

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = _format_details(context)
        self._emit(severity, f"anomaly: {message}" + (f" [{details}]" if details else ""))

    def _emit(self, level: str, text: str) -> None:
        tag = self._correlation_id[:8] if self._correlation_id else NO_CORRELATION
        stamp = datetime.now().strftime("%H:%M:%S")
        print(f"[{stamp}] [{tag}] [{level:<5}] {text}", file=self._stream or sys.stdout)
