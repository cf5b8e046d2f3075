"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from typing import List

import pytest

from profile_screener.adapters.console_logger import ConsoleAuditLogger
from profile_screener.adapters.metrics_collector import InMemoryMetricsCollector
from profile_screener.adapters.stub_services import StubEnrichmentService, StubScoringOracle
from profile_screener.config.models import (
    EnrichmentConfig,
    IngestionConfig,
    RatingConfig,
    ReportConfig,
    ScreenerConfig,
)
from tests.fixtures import make_identifiers


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> ScreenerConfig:
    """Create default screener configuration."""
    return ScreenerConfig()


@pytest.fixture
def ingestion_config() -> IngestionConfig:
    return IngestionConfig()


@pytest.fixture
def enrichment_config() -> EnrichmentConfig:
    return EnrichmentConfig(url="https://enrich.test/lookup", chunk_size=50)


@pytest.fixture
def rating_config() -> RatingConfig:
    return RatingConfig(checkpoint_batch_size=30, max_profile_chars=2_000)


@pytest.fixture
def report_config() -> ReportConfig:
    return ReportConfig(top_n=5)


@pytest.fixture
def stub_enrichment() -> StubEnrichmentService:
    """Enrichment stub returning a bare list."""
    return StubEnrichmentService()


@pytest.fixture
def stub_oracle() -> StubScoringOracle:
    """Oracle stub with hash-derived scores."""
    return StubScoringOracle()


@pytest.fixture
def sample_identifiers() -> List[str]:
    return make_identifiers(3)
