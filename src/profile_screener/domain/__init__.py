"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for the Profile Screener.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - Scored / Failed: Tagged outcome of one scoring call
    - Rating: Flat report row (score 0 marks a failed item)
    - RankedReport: Ratings sorted by descending score
    - ScreeningResult: Complete result of a screening run

Value Objects:
    - OracleVerdict: Validated oracle response
    - ChunkTrace: Progress of one enrichment request
    - IngestionStats: Counts collected during ingestion
"""

from profile_screener.domain.entities import (
    FAILED_SCORE,
    Failed,
    RankedReport,
    Rating,
    Scored,
    ScoringOutcome,
    ScreeningRequest,
    ScreeningResult,
    StageResult,
)
from profile_screener.domain.value_objects import (
    ChunkTrace,
    EnrichedProfile,
    Identifier,
    IngestionStats,
    OracleVerdict,
)

__all__ = [
    "FAILED_SCORE",
    "Failed",
    "RankedReport",
    "Rating",
    "Scored",
    "ScoringOutcome",
    "ScreeningRequest",
    "ScreeningResult",
    "StageResult",
    "ChunkTrace",
    "EnrichedProfile",
    "Identifier",
    "IngestionStats",
    "OracleVerdict",
]
