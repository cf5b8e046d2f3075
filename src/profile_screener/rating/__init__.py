"""
Rating Package - Per-Profile Scoring.

Components:
    - RatingEngine: Sequential oracle calls with failure isolation
    - serialize_profile / build_instructions: What the oracle sees
"""

from profile_screener.rating.instructions import (
    TRUNCATION_MARKER,
    build_instructions,
    serialize_profile,
    verdict_schema,
)
from profile_screener.rating.rating_engine import RatingEngine

__all__ = [
    "RatingEngine",
    "TRUNCATION_MARKER",
    "build_instructions",
    "serialize_profile",
    "verdict_schema",
]
