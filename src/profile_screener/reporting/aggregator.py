"""
Aggregator - Ranking, Serialization and Summary.

Turns ordered scoring outcomes into the final report:
    - Stable sort by descending score (ties keep arrival order)
    - CSV table with columns identifier, score, reasoning
    - Short summary naming the top N entries

Failed outcomes become rows with the sentinel score 0 here, at the
serialization boundary. Serialization and write failures raise
OutputError and are never recovered internally.
"""

from __future__ import annotations

import csv
import io
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import ValidationError

from profile_screener.config.models import ReportConfig
from profile_screener.domain.entities import RankedReport, Rating, ScoringOutcome
from profile_screener.resilience.errors import OutputError

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ("identifier", "score", "reasoning")

SUMMARY_REASON_CHARS = 160


class Aggregator:
    """Rank outcomes and render the report."""

    def __init__(self, config: Optional[ReportConfig] = None) -> None:
        self.config = config or ReportConfig()

    def rank(self, outcomes: Sequence[ScoringOutcome]) -> RankedReport:
        """Stable-sort outcomes by descending score."""
        ordered = sorted(outcomes, key=lambda o: o.rank_score, reverse=True)
        return RankedReport(entries=[o.to_rating() for o in ordered])

    def to_table(self, report: RankedReport) -> str:
        """
        Serialize the report as delimited text.

        Rows end with \r\n, so any field holding \r or \n is quoted.

        Raises:
            OutputError: If a row cannot be written
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=self.config.delimiter, lineterminator="\r\n")
        try:
            writer.writerow(REPORT_COLUMNS)
            for rating in report.entries:
                writer.writerow([rating.identifier, rating.score, rating.reasoning])
        except csv.Error as e:
            raise OutputError(f"could not serialize report: {e}") from e
        return buffer.getvalue()

    def parse_table(self, text: str) -> List[Rating]:
        """
        Parse a table produced by to_table().

        Raises:
            OutputError: If the header or a row is not a valid rating
        """
        reader = csv.reader(io.StringIO(text), delimiter=self.config.delimiter)
        try:
            header = next(reader, None)
            if header is None or tuple(header) != REPORT_COLUMNS:
                raise OutputError(f"unexpected report header: {header}")

            ratings: List[Rating] = []
            for line_number, row in enumerate(reader, start=2):
                if len(row) != len(REPORT_COLUMNS):
                    raise OutputError(f"line {line_number}: expected 3 columns, got {len(row)}")
                identifier, score, reasoning = row
                ratings.append(
                    Rating(identifier=identifier, score=int(score), reasoning=reasoning)
                )
        except csv.Error as e:
            raise OutputError(f"unreadable report: {e}") from e
        except (ValueError, ValidationError) as e:
            raise OutputError(f"invalid report row: {e}") from e
        return ratings

    def summarize(self, report: RankedReport) -> str:
        """Short human-readable summary of the top N entries."""
        if not report.entries:
            return "No profiles were rated."

        top = report.top(self.config.top_n)
        lines = [
            f"Rated {len(report)} profiles: {report.scored_count} scored, "
            f"{report.failed_count} failed.",
            f"Top {len(top)} by score:",
        ]
        for position, rating in enumerate(top, start=1):
            score = "failed" if rating.failed else f"{rating.score}/10"
            lines.append(
                f"{position}. {rating.identifier} ({score}) - "
                f"{_shorten(rating.reasoning, SUMMARY_REASON_CHARS)}"
            )
        return "\n".join(lines)

    def write(self, report: RankedReport, path: Union[str, Path]) -> Path:
        """
        Write the report table to path.

        The table is written to a temporary file in the same directory and
        moved into place, so a failed write never leaves a partial artifact.

        Raises:
            OutputError: If serialization or the write fails
        """
        target = Path(path)
        content = self.to_table(report)
        tmp_name: Optional[str] = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp_name, target)
            tmp_name = None
        except (OSError, UnicodeError, ValueError) as e:
            raise OutputError(f"could not write report to {target}: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)

        logger.info(f"Wrote {len(report)} ratings to {target}")
        return target


def _shorten(text: str, limit: int) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."
