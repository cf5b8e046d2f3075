"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
external dependencies. High-level modules depend on these abstractions, not
on concrete implementations.

Protocols:
    - EnrichmentService: Chunked profile lookup
    - ScoringOracle: Single-profile evaluation
    - AuditLogger: Stage and progress audit trail
    - MetricsCollector: Performance metrics abstraction
"""

from profile_screener.interfaces.audit_logger import AuditLogger
from profile_screener.interfaces.enrichment_service import EnrichmentService
from profile_screener.interfaces.metrics_collector import MetricsCollector
from profile_screener.interfaces.scoring_oracle import ScoringOracle

__all__ = ["AuditLogger", "EnrichmentService", "MetricsCollector", "ScoringOracle"]
