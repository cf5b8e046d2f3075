"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class IngestionConfig(BaseModel):
    """Configuration for source table parsing."""

    delimiter: str = Field(default=",", min_length=1, max_length=1)
    identifier_markers: List[str] = Field(
        default_factory=lambda: ["linkedin.com/in/", "/in/"],
        min_length=1,
    )

    @field_validator("identifier_markers")
    @classmethod
    def _markers_not_blank(cls, value: List[str]) -> List[str]:
        markers = [m.strip() for m in value if m.strip()]
        if not markers:
            raise ValueError("identifier_markers must contain a non-blank marker")
        return markers


class EnrichmentConfig(BaseModel):
    """Configuration for the enrichment service client."""

    url: Optional[str] = Field(default=None)
    url_env: str = Field(default="RELEVANCE_API_URL")
    api_key_env: Optional[str] = Field(default=None)
    request_field: str = Field(default="profile_urls", min_length=1)
    response_list_fields: List[str] = Field(
        default_factory=lambda: ["results", "data", "output"]
    )
    chunk_size: int = Field(default=50, ge=1, le=500)
    timeout_seconds: float = Field(default=60.0, gt=0)
    strict_alignment: bool = True


class RatingConfig(BaseModel):
    """Configuration for the scoring oracle and rating engine."""

    api_base: str = Field(default="https://api.openai.com/v1")
    api_key_env: str = Field(default="OPENAI_API_KEY")
    model: str = Field(default="gpt-4o-mini")
    temperature: float = Field(default=0.2, ge=0, le=2)
    max_profile_chars: int = Field(default=12_000, ge=100)
    max_reasoning_chars: int = Field(default=500, ge=10)
    timeout_seconds: float = Field(default=60.0, gt=0)
    checkpoint_batch_size: int = Field(default=30, ge=1)


class ReportConfig(BaseModel):
    """Configuration for the ranked report."""

    top_n: int = Field(default=5, ge=1)
    delimiter: str = Field(default=",", min_length=1, max_length=1)


class ScreenerConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)
    rating: RatingConfig = Field(default_factory=RatingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    model_config = {"populate_by_name": True}
