"""
Profile Screener - Batched Enrichment and Rating Pipeline.

Takes a table of candidate profile links, enriches every profile through
an external lookup service, scores each enriched profile with an LLM
evaluation oracle, and produces a ranked report with a short summary.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Strictly sequential calls to both upstream services
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Core entities (Rating, Scored, Failed, RankedReport, etc.)
    - interfaces: Abstract protocols for all dependencies
    - ingestion: Table parsing, identifier detection, chunking
    - enrichment: Chunked enrichment client
    - rating: Per-profile scoring with failure isolation
    - reporting: Ranking, serialization and summary
    - pipeline: Orchestration
    - adapters: Infrastructure implementations (HTTP clients, stubs, loggers)
    - config: Configuration models and loaders

Example:
    >>> from profile_screener.config.models import ScreenerConfig
    >>> from profile_screener.pipeline import create_pipeline
    >>> pipeline = create_pipeline(ScreenerConfig())
    >>> result = pipeline.screen(open("candidates.csv").read())
    >>> print(result.summary)

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Profile Screener.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import profile_screener
        >>> profile_screener.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("profile_screener").setLevel(level)
