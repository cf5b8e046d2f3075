"""
Validation Package - Upstream Response Validation.

Components:
    - normalize_enrichment_body: Accept list or wrapped list, else UpstreamError
    - validate_verdict: Strict two-field verdict, else ItemScoringError
"""

from profile_screener.validation.response_validator import (
    normalize_enrichment_body,
    validate_verdict,
)

__all__ = ["normalize_enrichment_body", "validate_verdict"]
