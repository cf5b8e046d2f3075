"""
Pipeline Factory.

Builds the default object graph from a ScreenerConfig. Service URLs and
API keys come from the environment variables named in the config unless
set explicitly. Any collaborator can be passed in to replace the default.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from profile_screener.adapters.console_logger import ConsoleAuditLogger
from profile_screener.adapters.http_enrichment import HttpEnrichmentService
from profile_screener.adapters.metrics_collector import InMemoryMetricsCollector
from profile_screener.adapters.openai_oracle import OpenAIScoringOracle
from profile_screener.config.models import ScreenerConfig
from profile_screener.enrichment.enrichment_client import EnrichmentClient
from profile_screener.ingestion.ingestor import Ingestor
from profile_screener.interfaces.audit_logger import AuditLogger
from profile_screener.interfaces.enrichment_service import EnrichmentService
from profile_screener.interfaces.metrics_collector import MetricsCollector
from profile_screener.interfaces.scoring_oracle import ScoringOracle
from profile_screener.pipeline.screening_pipeline import ScreeningPipeline
from profile_screener.rating.rating_engine import RatingEngine
from profile_screener.reporting.aggregator import Aggregator
from profile_screener.resilience.error_handler import ErrorHandler
from profile_screener.resilience.errors import ConfigurationError

logger = logging.getLogger(__name__)


def create_pipeline(
    config: Optional[ScreenerConfig] = None,
    enrichment_service: Optional[EnrichmentService] = None,
    scoring_oracle: Optional[ScoringOracle] = None,
    audit_logger: Optional[AuditLogger] = None,
    metrics_collector: Optional[MetricsCollector] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ScreeningPipeline:
    """
    Assemble a ScreeningPipeline.

    Args:
        config: Screener configuration (defaults if omitted)
        enrichment_service: Replaces the HTTP enrichment service
        scoring_oracle: Replaces the OpenAI scoring oracle
        audit_logger: Replaces the console audit logger
        metrics_collector: Replaces the in-memory metrics collector
        environ: Environment to read URLs and keys from (os.environ)

    Raises:
        ConfigurationError: If a default service lacks its URL or key
    """
    config = config or ScreenerConfig()
    environ = os.environ if environ is None else environ
    audit_logger = audit_logger or ConsoleAuditLogger(verbose=True)
    error_handler = ErrorHandler()

    if enrichment_service is None:
        enrichment_service = _build_enrichment_service(config, environ)
    if scoring_oracle is None:
        scoring_oracle = _build_scoring_oracle(config, environ)

    return ScreeningPipeline(
        ingestor=Ingestor(config.ingestion),
        enrichment_client=EnrichmentClient(
            enrichment_service, config.enrichment, audit_logger, error_handler
        ),
        rating_engine=RatingEngine(
            scoring_oracle, config.rating, audit_logger, error_handler
        ),
        aggregator=Aggregator(config.report),
        audit_logger=audit_logger,
        metrics_collector=metrics_collector or InMemoryMetricsCollector(),
    )


def _build_enrichment_service(
    config: ScreenerConfig, environ: Mapping[str, str]
) -> HttpEnrichmentService:
    settings = config.enrichment
    url = settings.url or environ.get(settings.url_env, "")
    if not url:
        raise ConfigurationError(
            f"enrichment service url missing: set enrichment.url or ${settings.url_env}"
        )
    api_key = environ.get(settings.api_key_env) if settings.api_key_env else None
    logger.debug(f"Using HTTP enrichment service at {url}")
    return HttpEnrichmentService(url, settings, api_key=api_key)


def _build_scoring_oracle(
    config: ScreenerConfig, environ: Mapping[str, str]
) -> OpenAIScoringOracle:
    settings = config.rating
    api_key = environ.get(settings.api_key_env, "")
    if not api_key:
        raise ConfigurationError(f"scoring oracle api key missing: set ${settings.api_key_env}")
    logger.debug(f"Using scoring oracle {settings.model} at {settings.api_base}")
    return OpenAIScoringOracle(api_key, settings)
