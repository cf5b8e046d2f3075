"""
Enrichment Package - Chunked Profile Lookup.

Components:
    - EnrichmentClient: Sequential chunked requests with alignment checks
"""

from profile_screener.enrichment.enrichment_client import EnrichmentClient

__all__ = ["EnrichmentClient"]
