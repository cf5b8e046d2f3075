"""
Audit Logger Protocol.

Defines the abstract interface for audit logging. The audit logger
tracks the stages of a screening run and surfaces progress signals.

Design Notes:
    - Correlation ID propagation for tracing
    - No side effects on pipeline behaviour
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...

    def log_progress(
        self,
        stage_name: str,
        completed: int,
        total: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log a progress checkpoint.

        Args:
            stage_name: Stage reporting progress
            completed: Items (or chunks) done so far
            total: Items (or chunks) in the stage
            metadata: Optional additional context
        """
        ...

    def log_item_failed(self, identifier: str, stage_name: str, reason: str) -> None:
        ...

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...
