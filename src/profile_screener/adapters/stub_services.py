"""
Stub Upstream Services.

Deterministic in-memory stand-ins for the enrichment service and the
scoring oracle. Used for development dry runs and tests; both record
every call they receive.
"""

from __future__ import annotations

import zlib
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from profile_screener.resilience.errors import ItemScoringError, UpstreamError


class StubEnrichmentService:
    """Fake enrichment service returning one synthetic record per identifier."""

    SHAPES = ("list", "results", "data", "output")

    def __init__(
        self,
        shape: str = "list",
        fail_chunks: Iterable[int] = (),
        drop_records: int = 0,
        status_code: int = 503,
    ) -> None:
        """
        Initialize stub service.

        Args:
            shape: "list" for a bare list, otherwise the wrapping field name
            fail_chunks: Call indices (0-based) that raise UpstreamError
            drop_records: Records removed from the end of every response
            status_code: Status attached to simulated failures
        """
        if shape not in self.SHAPES:
            raise ValueError(f"shape must be one of {self.SHAPES}")
        self.shape = shape
        self.fail_chunks = set(fail_chunks)
        self.drop_records = drop_records
        self.status_code = status_code
        self.requests: List[List[str]] = []

    def lookup(self, identifiers: List[str]) -> Any:
        index = len(self.requests)
        self.requests.append(list(identifiers))

        if index in self.fail_chunks:
            raise UpstreamError(
                f"enrichment service returned HTTP {self.status_code}",
                status_code=self.status_code,
            )

        records = [self.make_profile(identifier) for identifier in identifiers]
        if self.drop_records:
            records = records[: max(len(records) - self.drop_records, 0)]

        if self.shape == "list":
            return records
        return {self.shape: records}

    @staticmethod
    def make_profile(identifier: str) -> Dict[str, Any]:
        handle = identifier.rstrip("/").rsplit("/", 1)[-1]
        return {
            "profile_url": identifier,
            "full_name": handle.replace("-", " ").title(),
            "headline": f"Builder at {handle.title()} Labs",
            "experiences": [{"title": "Founder", "company": f"{handle.title()} Labs"}],
        }


class StubScoringOracle:
    """Fake oracle with scripted or hash-derived verdicts."""

    def __init__(
        self,
        verdicts: Optional[Sequence[Any]] = None,
        fail_calls: Iterable[int] = (),
    ) -> None:
        """
        Initialize stub oracle.

        Args:
            verdicts: Raw verdicts returned by call index; an Exception
                      instance in this list is raised instead
            fail_calls: Call indices (0-based) that raise ItemScoringError
        """
        self.verdicts = list(verdicts or [])
        self.fail_calls = set(fail_calls)
        self.calls: List[Tuple[str, str]] = []

    def evaluate(self, instructions: str, document: str) -> Any:
        index = len(self.calls)
        self.calls.append((instructions, document))

        if index in self.fail_calls:
            raise ItemScoringError(f"scoring oracle unavailable (call {index})")

        if index < len(self.verdicts):
            verdict = self.verdicts[index]
            if isinstance(verdict, Exception):
                raise verdict
            return verdict

        score = zlib.crc32(document.encode("utf-8")) % 10 + 1
        return {"score": score, "reasoning": f"Stub assessment ({score}/10)."}
