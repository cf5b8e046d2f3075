"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Profile Screener:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - ScreenerConfig: Root configuration object
    - IngestionConfig: Delimiter and identifier markers
    - EnrichmentConfig: Enrichment service endpoint, chunking, timeout
    - RatingConfig: Oracle endpoint, model, limits, checkpoints
    - ReportConfig: Summary size and output delimiter

Secrets (API keys, service URLs) are read from environment variables
named in the config, never stored in YAML.
"""

from profile_screener.config.loader import ConfigLoader, load_config
from profile_screener.config.models import (
    EnrichmentConfig,
    IngestionConfig,
    RatingConfig,
    ReportConfig,
    ScreenerConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "EnrichmentConfig",
    "IngestionConfig",
    "RatingConfig",
    "ReportConfig",
    "ScreenerConfig",
]
