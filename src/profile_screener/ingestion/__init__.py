"""
Ingestion Package - Source Parsing and Chunking.

Components:
    - Ingestor: Source table -> ordered unique identifiers
    - chunked: Order-preserving fixed-size chunking
"""

from profile_screener.ingestion.chunker import chunked
from profile_screener.ingestion.ingestor import Ingestor

__all__ = ["Ingestor", "chunked"]
