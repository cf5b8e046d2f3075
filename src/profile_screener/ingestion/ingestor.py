"""
Ingestor - Source Table to Identifiers.

Parses a header-plus-rows delimited table and extracts the ordered,
deduplicated list of profile identifiers:
    1. Parse rows (blank rows ignored, short rows padded)
    2. Pick the leftmost column holding at least one identifier marker
    3. Trim values, drop empty ones
    4. Deduplicate, keeping first occurrence order
"""

from __future__ import annotations

import csv
import io
import logging
from typing import List, Optional, Tuple

from profile_screener.config.models import IngestionConfig
from profile_screener.domain.value_objects import Identifier, IngestionStats
from profile_screener.resilience.errors import InputError

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


class Ingestor:
    """Extract unique identifiers from a source table."""

    def __init__(self, config: Optional[IngestionConfig] = None) -> None:
        """
        Initialize with configuration.

        Args:
            config: Ingestion configuration (delimiter, markers)
        """
        self.config = config or IngestionConfig()
        self._markers = [m.lower() for m in self.config.identifier_markers]

    @property
    def name(self) -> str:
        return "ingestion"

    def ingest(self, source_text: str) -> List[Identifier]:
        """
        Parse the source table and return identifiers.

        Args:
            source_text: Raw delimited text with a header row

        Returns:
            Unique identifiers in first-seen order

        Raises:
            InputError: empty source, no rows, no identifier column,
                        or no valid identifiers
        """
        return self.ingest_with_stats(source_text).identifiers

    def ingest_with_stats(self, source_text: str) -> IngestionStats:
        """Like ingest(), but also report the column and counts."""
        header, rows = self.parse_table(source_text)

        column_index = self.detect_identifier_column(header, rows)
        column_name = header[column_index]

        seen = set()
        identifiers: List[Identifier] = []
        empty_count = 0
        duplicate_count = 0

        for row in rows:
            value = row[column_index].strip()
            if not value:
                empty_count += 1
                continue
            if value in seen:
                duplicate_count += 1
                continue
            seen.add(value)
            identifiers.append(value)

        if not identifiers:
            raise InputError("no valid identifiers")

        logger.info(
            f"Ingested {len(identifiers)} identifiers from column '{column_name}' "
            f"({len(rows)} rows, {empty_count} empty, {duplicate_count} duplicates)"
        )

        return IngestionStats(
            column=column_name,
            row_count=len(rows),
            empty_count=empty_count,
            duplicate_count=duplicate_count,
            identifiers=identifiers,
        )

    def parse_table(self, source_text: str) -> Tuple[List[str], List[List[str]]]:
        """
        Split delimited text into header and data rows.

        Every returned row has exactly len(header) cells.

        Raises:
            InputError: If the source is blank or has no data rows
        """
        if source_text is None or not source_text.strip():
            raise InputError("empty source")

        text = source_text.lstrip(_BOM)
        reader = csv.reader(io.StringIO(text), delimiter=self.config.delimiter)

        header: Optional[List[str]] = None
        rows: List[List[str]] = []
        try:
            for record in reader:
                if not any(cell.strip() for cell in record):
                    continue
                if header is None:
                    header = [cell.strip() for cell in record]
                    continue
                rows.append(self._fit_row(record, len(header)))
        except csv.Error as e:
            raise InputError(f"unreadable source table: {e}") from e

        if header is None:
            raise InputError("empty source")
        if not rows:
            raise InputError("no rows")

        return header, rows

    def detect_identifier_column(
        self, header: List[str], rows: List[List[str]]
    ) -> int:
        """
        Return the index of the leftmost column holding an identifier.

        Raises:
            InputError: If no column contains a marker
        """
        for index, column_name in enumerate(header):
            if any(self._has_marker(row[index]) for row in rows):
                logger.debug(f"Identifier column detected: '{column_name}' (#{index})")
                return index
        raise InputError("no identifier column")

    def _has_marker(self, value: str) -> bool:
        lowered = value.lower()
        return any(marker in lowered for marker in self._markers)

    @staticmethod
    def _fit_row(record: List[str], width: int) -> List[str]:
        if len(record) >= width:
            return record[:width]
        return record + [""] * (width - len(record))
