"""
Enrichment Client - Chunked, Sequential Profile Lookup.

Drives the enrichment service one chunk at a time and concatenates the
returned records positionally: record i belongs to identifier i.

Failure policy:
    - Any chunk failure aborts the run with UpstreamError
    - Accumulated records are discarded, later chunks are never issued
    - No retries
    - Record count must match the chunk size (strict alignment)
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from profile_screener.config.models import EnrichmentConfig
from profile_screener.domain.value_objects import ChunkTrace, EnrichedProfile, Identifier
from profile_screener.ingestion.chunker import chunked
from profile_screener.interfaces.audit_logger import AuditLogger
from profile_screener.interfaces.enrichment_service import EnrichmentService
from profile_screener.resilience.error_handler import ErrorHandler
from profile_screener.resilience.errors import UpstreamError
from profile_screener.validation.response_validator import normalize_enrichment_body

logger = logging.getLogger(__name__)


class EnrichmentClient:
    """Issue chunked enrichment requests and align the results."""

    STAGE_NAME = "enrichment"

    def __init__(
        self,
        service: EnrichmentService,
        config: Optional[EnrichmentConfig] = None,
        audit_logger: Optional[AuditLogger] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        Initialize enrichment client.

        Args:
            service: Transport to the enrichment service
            config: Chunk size, response fields, alignment policy
            audit_logger: Receives per-chunk progress (optional)
            error_handler: Applies the fatal failure policy
        """
        self.service = service
        self.config = config or EnrichmentConfig()
        self.audit_logger = audit_logger
        self.error_handler = error_handler or ErrorHandler()
        self.traces: List[ChunkTrace] = []

    def enrich(self, identifiers: List[Identifier]) -> List[EnrichedProfile]:
        """
        Enrich identifiers chunk by chunk.

        Args:
            identifiers: Ordered unique identifiers

        Returns:
            Enriched profiles, position-aligned with identifiers

        Raises:
            UpstreamError: On the first failing chunk
        """
        chunks = chunked(identifiers, self.config.chunk_size)
        self.traces = []
        profiles: List[EnrichedProfile] = []

        logger.info(
            f"Enriching {len(identifiers)} identifiers in {len(chunks)} chunks "
            f"of up to {self.config.chunk_size}"
        )

        for index, chunk in enumerate(chunks):
            records = self._enrich_chunk(index, len(chunks), chunk)
            profiles.extend(records)

        return profiles

    def _enrich_chunk(
        self, index: int, total: int, chunk: List[Identifier]
    ) -> List[EnrichedProfile]:
        """Issue one request and validate its records."""
        start = time.perf_counter()
        logger.info(f"Enrichment batch {index + 1}/{total}: requesting {len(chunk)} profiles")

        body = self.error_handler.guard_fatal(
            lambda: self.service.lookup(chunk),
            operation_name=f"enrichment batch {index + 1}/{total}",
            chunk_index=index,
        )

        try:
            records = normalize_enrichment_body(body, self.config.response_list_fields)
        except UpstreamError as e:
            e.chunk_index = index
            logger.error(f"Enrichment batch {index + 1}/{total}: {e}")
            raise

        self._check_alignment(index, total, chunk, records)

        trace = ChunkTrace(
            batch_index=index,
            batch_count=total,
            requested=len(chunk),
            received=len(records),
        )
        self.traces.append(trace)

        duration = time.perf_counter() - start
        logger.info(
            f"Enrichment batch {index + 1}/{total}: received {len(records)} records "
            f"({duration:.2f}s)"
        )
        if self.audit_logger:
            self.audit_logger.log_progress(
                self.STAGE_NAME,
                index + 1,
                total,
                {"requested": len(chunk), "received": len(records)},
            )

        return records

    def _check_alignment(
        self,
        index: int,
        total: int,
        chunk: List[Identifier],
        records: List[EnrichedProfile],
    ) -> None:
        """Fail loudly when positional pairing would drift."""
        if len(records) == len(chunk):
            return

        message = (
            f"enrichment batch {index + 1}/{total} returned {len(records)} records "
            f"for {len(chunk)} identifiers"
        )
        # A short chunk before the last one would shift every later pairing
        last_chunk = index == total - 1
        if self.config.strict_alignment or len(records) > len(chunk) or not last_chunk:
            logger.error(message)
            raise UpstreamError(message, chunk_index=index)

        logger.warning(f"{message}; keeping the records received")
        if self.audit_logger:
            self.audit_logger.log_anomaly(
                message,
                severity="WARNING",
                context={"chunk_index": index, "missing": len(chunk) - len(records)},
            )
