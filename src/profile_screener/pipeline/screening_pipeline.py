"""
Screening Pipeline - Main Orchestrator.

The ScreeningPipeline coordinates one screening run:
    ingest -> enrich -> rate -> rank/summarize

Every stage runs to completion before the next starts and every upstream
call blocks in turn. Results are built fresh by each call to screen().
Collaborators keep diagnostics of the latest run only (enrichment chunk
traces, the audit correlation id); screen() resets them when it starts.

The pipeline owns its upstream services: close() releases their
connections, and the pipeline can be used as a context manager.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Tuple, TypeVar, Union

from profile_screener import __version__
from profile_screener.domain.entities import (
    Failed,
    ScreeningRequest,
    ScreeningResult,
    StageResult,
)
from profile_screener.domain.value_objects import EnrichedProfile, Identifier
from profile_screener.enrichment.enrichment_client import EnrichmentClient
from profile_screener.ingestion.ingestor import Ingestor
from profile_screener.interfaces.audit_logger import AuditLogger
from profile_screener.interfaces.metrics_collector import MetricsCollector
from profile_screener.rating.rating_engine import RatingEngine
from profile_screener.reporting.aggregator import Aggregator
from profile_screener.resilience.errors import InputError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScreeningPipeline:
    """Main orchestrator for the screening workflow."""

    def __init__(
        self,
        ingestor: Ingestor,
        enrichment_client: EnrichmentClient,
        rating_engine: RatingEngine,
        aggregator: Aggregator,
        audit_logger: AuditLogger,
        metrics_collector: MetricsCollector,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            ingestor: Source table -> identifiers
            enrichment_client: Identifiers -> aligned profiles
            rating_engine: Profiles -> scoring outcomes
            aggregator: Outcomes -> ranked report and summary
            audit_logger: For audit trail
            metrics_collector: For performance metrics
        """
        self.ingestor = ingestor
        self.enrichment_client = enrichment_client
        self.rating_engine = rating_engine
        self.aggregator = aggregator
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector

    def screen(
        self,
        source_text: str,
        source_name: Optional[str] = None,
    ) -> ScreeningResult:
        """
        Execute the screening workflow.

        Args:
            source_text: Raw delimited table
            source_name: Optional label for logs (e.g. file name)

        Returns:
            ScreeningResult with ranked report, summary and audit trail

        Raises:
            InputError: If the table yields no identifiers
            UpstreamError: If any enrichment chunk fails
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        self.audit_logger.set_correlation_id(correlation_id)
        self.enrichment_client.traces = []

        request = ScreeningRequest(source_name=source_name, correlation_id=correlation_id)
        logger.info(f"Screening run {correlation_id} started ({source_name or 'inline source'})")

        audit_trail: List[StageResult] = []

        # 1. Ingest
        identifiers, stage = self._run_stage(
            "ingestion",
            len((source_text or "").splitlines()),
            lambda: self.ingestor.ingest(source_text),
        )
        audit_trail.append(stage)
        self.metrics_collector.record_count("identifiers_total", len(identifiers))

        # 2. Enrich (fatal on failure)
        profiles, stage = self._run_stage(
            EnrichmentClient.STAGE_NAME,
            len(identifiers),
            lambda: self.enrichment_client.enrich(identifiers),
        )
        audit_trail.append(stage)
        self.metrics_collector.record_count(
            "enrichment_requests_total", len(self.enrichment_client.traces)
        )
        attempted = self._attempted_identifiers(identifiers, profiles)

        # 3. Rate (per-item failures recovered)
        outcomes, stage = self._run_stage(
            RatingEngine.STAGE_NAME,
            len(attempted),
            lambda: self.rating_engine.rate(attempted, profiles),
        )
        stage.failures = {o.identifier: o.reason for o in outcomes if isinstance(o, Failed)}
        audit_trail.append(stage)
        self.metrics_collector.record_count("scoring_failures_total", stage.failure_count)

        # 4. Rank and summarize
        report, stage = self._run_stage(
            "aggregation", len(outcomes), lambda: self.aggregator.rank(outcomes)
        )
        audit_trail.append(stage)
        summary = self.aggregator.summarize(report)

        total_duration = time.perf_counter() - start_time
        self.metrics_collector.record_timing("screening_total_seconds", total_duration)
        logger.info(
            f"Screening run {correlation_id} finished: {len(report)} ratings, "
            f"{report.failed_count} failed ({total_duration:.2f}s)"
        )

        return ScreeningResult(
            request=request,
            identifiers=identifiers,
            outcomes=outcomes,
            report=report,
            summary=summary,
            audit_trail=audit_trail,
            metrics=self.metrics_collector.get_metrics(),
            metadata=self._build_metadata(correlation_id, total_duration),
        )

    def screen_file(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
    ) -> ScreeningResult:
        """
        Screen a table stored on disk and write the ranked report.

        Raises:
            InputError: If the file cannot be read or yields no identifiers
            UpstreamError: If any enrichment chunk fails
            OutputError: If the report cannot be written
        """
        path = Path(input_path)
        try:
            source_text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"could not read source table {path}: {e}") from e

        result = self.screen(source_text, source_name=path.name)
        self.aggregator.write(result.report, output_path)
        return result

    def close(self) -> None:
        """Close the upstream services that hold a transport."""
        for service in (self.enrichment_client.service, self.rating_engine.oracle):
            close = getattr(service, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> "ScreeningPipeline":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _run_stage(
        self,
        stage_name: str,
        input_count: int,
        func: Callable[[], T],
    ) -> Tuple[T, StageResult]:
        """Run one stage with audit and timing."""
        stage_start = time.perf_counter()
        self.audit_logger.log_stage_start(stage_name, input_count)

        output = func()

        stage_duration = time.perf_counter() - stage_start
        output_count = len(output)
        self.audit_logger.log_stage_end(stage_name, output_count, stage_duration)
        self.metrics_collector.record_timing(
            "stage_duration_seconds", stage_duration, {"stage": stage_name}
        )

        return output, StageResult(
            stage_name=stage_name,
            input_count=input_count,
            output_count=output_count,
            duration_seconds=stage_duration,
        )

    def _attempted_identifiers(
        self,
        identifiers: List[Identifier],
        profiles: List[EnrichedProfile],
    ) -> List[Identifier]:
        """Identifiers that have a profile to pair with."""
        if len(profiles) < len(identifiers):
            missing = len(identifiers) - len(profiles)
            self.audit_logger.log_anomaly(
                f"{missing} identifiers have no enriched profile and will not be rated",
                severity="WARNING",
                context={"identifiers": len(identifiers), "profiles": len(profiles)},
            )
        return identifiers[: len(profiles)]

    def _build_metadata(self, correlation_id: str, duration: float) -> dict:
        return {
            "correlation_id": correlation_id,
            "timestamp": datetime.now().isoformat(),
            "duration_seconds": duration,
            "version": __version__,
        }
