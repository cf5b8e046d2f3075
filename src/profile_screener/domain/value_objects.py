"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe what crosses the
boundary to and from the upstream services.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field, StrictInt, StrictStr


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Normalized profile reference (trimmed, non-empty, unique within a run)
Identifier = str

# Opaque document returned by the enrichment service
EnrichedProfile = Any


class OracleVerdict(BaseModel):
    """Validated response of the scoring oracle."""

    score: StrictInt = Field(..., ge=1, le=10)
    reasoning: StrictStr

    model_config = {"frozen": True, "extra": "forbid"}


class ChunkTrace(BaseModel):
    """Progress record for one enrichment request."""

    batch_index: int = Field(..., ge=0)
    batch_count: int = Field(..., ge=1)
    requested: int = Field(..., ge=0)
    received: int = Field(..., ge=0)

    model_config = {"frozen": True}


class IngestionStats(BaseModel):
    """What the ingestor saw while extracting identifiers."""

    column: str
    row_count: int = Field(..., ge=0)
    empty_count: int = Field(default=0, ge=0)
    duplicate_count: int = Field(default=0, ge=0)
    identifiers: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}
