"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package.

Upstream services:
    - HttpEnrichmentService: Enrichment endpoint over httpx
    - OpenAIScoringOracle: OpenAI-compatible chat API over httpx
    - StubEnrichmentService / StubScoringOracle: Deterministic fakes

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection
"""

from profile_screener.adapters.console_logger import ConsoleAuditLogger
from profile_screener.adapters.http_enrichment import HttpEnrichmentService
from profile_screener.adapters.metrics_collector import InMemoryMetricsCollector
from profile_screener.adapters.openai_oracle import OpenAIScoringOracle
from profile_screener.adapters.stub_services import (
    StubEnrichmentService,
    StubScoringOracle,
)

__all__ = [
    "ConsoleAuditLogger",
    "HttpEnrichmentService",
    "InMemoryMetricsCollector",
    "OpenAIScoringOracle",
    "StubEnrichmentService",
    "StubScoringOracle",
]
