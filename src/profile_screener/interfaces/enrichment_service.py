"""
Enrichment Service Protocol.

Defines the abstract interface for the external lookup service that
expands profile identifiers into structured profile documents.

The enrichment service is responsible for:
    - Accepting one bounded-size list of identifiers per call
    - Returning the decoded response body (list or wrapping object)
    - Raising UpstreamError for non-success responses and timeouts

Design Notes:
    - One call per chunk, the client never calls concurrently
    - Response shape normalization happens in the client, not here
    - Records are matched to identifiers by position only
"""

from __future__ import annotations

from typing import Any, List, Protocol, runtime_checkable


@runtime_checkable
class EnrichmentService(Protocol):
    """Abstract interface for the enrichment service."""

    def lookup(self, identifiers: List[str]) -> Any:
        """
        Enrich one chunk of identifiers.

        Args:
            identifiers: Identifiers of this chunk, in order

        Returns:
            Decoded response body

        Raises:
            UpstreamError: On non-success status, timeout or bad body
        """
        ...
