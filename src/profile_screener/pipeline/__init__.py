"""
Pipeline Package - Orchestration.

Components:
    - ScreeningPipeline: Main orchestrator coordinating all stages
    - create_pipeline: Builds the default object graph from config

The pipeline is responsible for:
    - Running ingestion, enrichment, rating and aggregation in order
    - Stopping on InputError / UpstreamError with no partial output
    - Collecting metrics and audit trail
    - Generating the final ScreeningResult

Design Principles:
    - All dependencies injected via constructor
    - No state kept between runs
"""

from profile_screener.pipeline.factory import create_pipeline
from profile_screener.pipeline.screening_pipeline import ScreeningPipeline

__all__ = ["ScreeningPipeline", "create_pipeline"]
