"""
OpenAI Scoring Oracle.

Calls the chat completions endpoint with the evaluation instructions as
the system message and the profile document as the user message. The
response is constrained to a strict JSON schema; the returned content is
handed back as text for the rating engine to validate.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from profile_screener.config.models import RatingConfig
from profile_screener.rating.instructions import verdict_schema
from profile_screener.resilience.errors import ItemScoringError

logger = logging.getLogger(__name__)


class OpenAIScoringOracle:
    """Scoring oracle backed by an OpenAI-compatible chat API."""

    def __init__(
        self,
        api_key: str,
        config: Optional[RatingConfig] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if not api_key:
            raise ValueError("scoring oracle api key is required")
        self.config = config or RatingConfig()
        self._api_key = api_key
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(self.config.timeout_seconds)
        )
        self._url = self.config.api_base.rstrip("/") + "/chat/completions"

    def evaluate(self, instructions: str, document: str) -> Any:
        try:
            response = self._client.post(
                self._url,
                json=self._payload(instructions, document),
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.config.timeout_seconds,
            )
        except httpx.TimeoutException as e:
            raise ItemScoringError(
                f"scoring request timed out after {self.config.timeout_seconds}s"
            ) from e
        except httpx.HTTPError as e:
            raise ItemScoringError(f"scoring request failed: {e}") from e

        if not response.is_success:
            raise ItemScoringError(
                f"scoring oracle returned HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ItemScoringError(f"malformed scoring response: {e!r}") from e

        if not content:
            raise ItemScoringError("scoring oracle returned no content")
        return content

    def close(self) -> None:
        self._client.close()

    def _payload(self, instructions: str, document: str) -> Dict[str, Any]:
        return {
            "model": self.config.model,
            "temperature": self.config.temperature,
            "messages": [
                {"role": "system", "content": instructions},
                {"role": "user", "content": document},
            ],
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": "profile_rating",
                    "strict": True,
                    "schema": verdict_schema(self.config.max_reasoning_chars),
                },
            },
        }
