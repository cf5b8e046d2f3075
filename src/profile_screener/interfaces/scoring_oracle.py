"""
Scoring Oracle Protocol.

Defines the abstract interface for the evaluation oracle that scores
one serialized profile against fixed instructions.

Design Notes:
    - One profile per call, never batched
    - Returns raw output (JSON text or mapping); validation is done
      by the rating engine so every oracle is held to the same contract
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ScoringOracle(Protocol):
    """Abstract interface for the scoring oracle."""

    def evaluate(self, instructions: str, document: str) -> Any:
        """
        Score a single serialized profile.

        Args:
            instructions: Fixed evaluation instructions
            document: Serialized, length-bounded profile document

        Returns:
            Raw verdict, expected to hold exactly `score` and `reasoning`

        Raises:
            ItemScoringError: On transport failure or timeout
        """
        ...
