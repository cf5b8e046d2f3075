"""
Resilience Package - Error Taxonomy and Failure Policies.

This package decides what a failure means for the run:
    - Enrichment failures are fatal (UpstreamError)
    - Scoring failures are isolated to one item (ItemScoringError)
    - Input and output problems surface as InputError / OutputError

Design Principles:
    - Fail fast before any external call for bad input
    - One attempt per upstream call, no retries
    - A failing item never affects its neighbours
"""

from profile_screener.resilience.error_handler import (
    ErrorHandler,
    ItemOutcome,
    PartialResult,
    describe_error,
)
from profile_screener.resilience.errors import (
    ConfigurationError,
    InputError,
    ItemScoringError,
    OutputError,
    ScreenerError,
    UpstreamError,
)

__all__ = [
    "ErrorHandler",
    "ConfigurationError",
    "ItemOutcome",
    "PartialResult",
    "describe_error",
    "InputError",
    "ItemScoringError",
    "OutputError",
    "ScreenerError",
    "UpstreamError",
]
