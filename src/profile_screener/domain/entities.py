"""
Core Domain Entities.

This module defines the fundamental entities of the Profile Screener domain.
Scoring results are kept as a tagged outcome (Scored | Failed) for as long
as possible; the flat Rating row with its sentinel score only exists at
the serialization boundary.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

# Sentinel score written for items whose scoring failed
FAILED_SCORE = 0

MIN_SCORE = 1
MAX_SCORE = 10


class Rating(BaseModel):
    """One row of the ranked report."""

    identifier: str = Field(..., min_length=1, description="Profile identifier")
    score: int = Field(..., ge=FAILED_SCORE, le=MAX_SCORE, description="0 = scoring failed")
    reasoning: str = Field(default="", description="Assessment or failure detail")

    model_config = {"frozen": True}

    @property
    def failed(self) -> bool:
        return self.score == FAILED_SCORE


class Scored(BaseModel):
    """A profile that the oracle scored successfully."""

    kind: Literal["scored"] = "scored"
    identifier: str
    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    reasoning: str

    model_config = {"frozen": True}

    @property
    def rank_score(self) -> int:
        return self.score

    def to_rating(self) -> Rating:
        return Rating(identifier=self.identifier, score=self.score, reasoning=self.reasoning)


class Failed(BaseModel):
    """A profile whose scoring call failed."""

    kind: Literal["failed"] = "failed"
    identifier: str
    reason: str

    model_config = {"frozen": True}

    @property
    def rank_score(self) -> int:
        return FAILED_SCORE

    def to_rating(self) -> Rating:
        return Rating(identifier=self.identifier, score=FAILED_SCORE, reasoning=self.reason)


ScoringOutcome = Union[Scored, Failed]


class RankedReport(BaseModel):
    """Ratings stably sorted by descending score."""

    entries: List[Rating] = Field(default_factory=list)

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.entries)

    def top(self, n: int) -> List[Rating]:
        """Return the first n entries (all of them if fewer exist)."""
        return self.entries[: max(n, 0)]

    @property
    def scored_count(self) -> int:
        return sum(1 for r in self.entries if not r.failed)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.entries if r.failed)


class ScreeningRequest(BaseModel):
    """Input for a screening run."""

    source_name: Optional[str] = Field(default=None, description="Where the table came from")
    correlation_id: str = Field(..., description="Unique run identifier")
    requested_at: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": True}


class StageResult(BaseModel):
    """Result of a single pipeline stage for audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    failures: Dict[str, str] = Field(
        default_factory=dict, description="Identifier -> failure reason"
    )

    @property
    def failure_count(self) -> int:
        return len(self.failures)


class ScreeningResult(BaseModel):
    """Complete result of a screening run."""

    request: ScreeningRequest
    identifiers: List[str]
    outcomes: List[Union[Scored, Failed]] = Field(default_factory=list)
    report: RankedReport
    summary: str
    audit_trail: List[StageResult] = Field(default_factory=list)
    metrics: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def attempted_count(self) -> int:
        return len(self.outcomes)
