"""
Error Taxonomy.

Every failure the pipeline knows about derives from ScreenerError.
Whether an error is fatal or recoverable is a property of its class:

    - InputError: bad source table, aborts before any external call
    - UpstreamError: enrichment failure, aborts the run
    - ItemScoringError: one oracle call failed, isolated to that item
    - OutputError: report could not be produced or written
    - ConfigurationError: pipeline cannot be assembled (missing URL or key)
"""

from __future__ import annotations

from typing import Optional


class ScreenerError(Exception):
    """Base class for all profile screener errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputError(ScreenerError):
    """Raised when the source table cannot yield any identifiers."""


class UpstreamError(ScreenerError):
    """Raised when the enrichment service fails for a chunk."""

    def __init__(
        self,
        message: str,
        chunk_index: Optional[int] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.chunk_index = chunk_index
        self.status_code = status_code


class ItemScoringError(ScreenerError):
    """Raised when a single scoring call fails."""

    def __init__(self, message: str, identifier: Optional[str] = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class OutputError(ScreenerError):
    """Raised when the ranked report cannot be serialized or written."""


class ConfigurationError(ScreenerError):
    """Raised when the pipeline cannot be assembled from configuration."""
