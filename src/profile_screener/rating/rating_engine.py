"""
Rating Engine - Sequential Per-Profile Scoring.

Scores every (identifier, profile) pair with one oracle call, strictly in
order. A failing call only affects its own item: it becomes a Failed
outcome and the engine moves on to the next pair.

Checkpoints are emitted every `checkpoint_batch_size` items. Batches are
a progress signal only; they do not change order or failure handling.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

from profile_screener.config.models import RatingConfig
from profile_screener.domain.entities import Failed, Scored, ScoringOutcome
from profile_screener.domain.value_objects import EnrichedProfile, Identifier
from profile_screener.interfaces.audit_logger import AuditLogger
from profile_screener.interfaces.scoring_oracle import ScoringOracle
from profile_screener.rating.instructions import build_instructions, serialize_profile
from profile_screener.resilience.error_handler import ErrorHandler
from profile_screener.validation.response_validator import validate_verdict

logger = logging.getLogger(__name__)


class RatingEngine:
    """Score enriched profiles one at a time."""

    STAGE_NAME = "rating"

    def __init__(
        self,
        oracle: ScoringOracle,
        config: Optional[RatingConfig] = None,
        audit_logger: Optional[AuditLogger] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        Initialize rating engine.

        Args:
            oracle: Scoring oracle transport
            config: Limits and checkpoint size
            audit_logger: Receives checkpoints and item failures (optional)
            error_handler: Applies the per-item isolation policy
        """
        self.oracle = oracle
        self.config = config or RatingConfig()
        self.audit_logger = audit_logger
        self.error_handler = error_handler or ErrorHandler()
        self.instructions = build_instructions(self.config.max_reasoning_chars)

    def rate(
        self,
        identifiers: Sequence[Identifier],
        profiles: Sequence[EnrichedProfile],
    ) -> List[ScoringOutcome]:
        """
        Score each aligned pair.

        Args:
            identifiers: Identifiers, position-aligned with profiles
            profiles: Enriched profiles

        Returns:
            One outcome per attempted pair, in input order
        """
        pairs = list(zip(identifiers, profiles))
        total = len(pairs)
        batch_size = self.config.checkpoint_batch_size
        outcomes: List[ScoringOutcome] = []

        logger.info(f"Rating {total} profiles (checkpoint every {batch_size})")
        batch_start = time.perf_counter()

        for position, (identifier, profile) in enumerate(pairs, start=1):
            outcomes.append(self.rate_one(identifier, profile))

            if position % batch_size == 0 or position == total:
                self._checkpoint(position, total, outcomes, time.perf_counter() - batch_start)
                batch_start = time.perf_counter()

        return outcomes

    def rate_one(self, identifier: Identifier, profile: EnrichedProfile) -> ScoringOutcome:
        """Score a single profile; never raises for a recoverable failure."""
        outcome = self.error_handler.isolate(
            lambda: self._score(identifier, profile),
            item=identifier,
            operation_name="scoring",
        )
        if outcome.ok:
            verdict = outcome.value
            return Scored(
                identifier=identifier,
                score=verdict.score,
                reasoning=verdict.reasoning,
            )

        if self.audit_logger:
            self.audit_logger.log_item_failed(identifier, self.STAGE_NAME, outcome.reason)
        return Failed(identifier=identifier, reason=outcome.reason)

    def _score(self, identifier: Identifier, profile: EnrichedProfile):
        document = serialize_profile(profile, self.config.max_profile_chars)
        raw = self.oracle.evaluate(self.instructions, document)
        return validate_verdict(
            raw,
            max_reasoning_chars=self.config.max_reasoning_chars,
            identifier=identifier,
        )

    def _checkpoint(
        self,
        completed: int,
        total: int,
        outcomes: List[ScoringOutcome],
        batch_duration: float,
    ) -> None:
        failed = sum(1 for o in outcomes if isinstance(o, Failed))
        batch_number = (completed - 1) // self.config.checkpoint_batch_size + 1
        logger.info(
            f"Rating checkpoint {batch_number}: {completed}/{total} profiles "
            f"({failed} failed, batch {batch_duration:.2f}s)"
        )
        if self.audit_logger:
            self.audit_logger.log_progress(
                self.STAGE_NAME, completed, total, {"failed": failed, "batch": batch_number}
            )
