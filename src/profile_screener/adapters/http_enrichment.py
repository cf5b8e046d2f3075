"""
HTTP Enrichment Service.

Posts one chunk of identifiers per request to the enrichment endpoint
and returns the decoded JSON body. Every failure is an UpstreamError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from profile_screener.config.models import EnrichmentConfig
from profile_screener.resilience.errors import UpstreamError

logger = logging.getLogger(__name__)


class HttpEnrichmentService:
    """Enrichment service reached over HTTP."""

    def __init__(
        self,
        url: str,
        config: Optional[EnrichmentConfig] = None,
        api_key: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            url: Endpoint receiving POST {request_field: [...]}
            config: Request field name and timeout
            api_key: Optional bearer token
            client: Pre-built httpx client (tests inject a MockTransport)
        """
        if not url:
            raise ValueError("enrichment service url is required")
        self.url = url
        self.config = config or EnrichmentConfig()
        self._api_key = api_key
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(self.config.timeout_seconds)
        )

    def lookup(self, identifiers: List[str]) -> Any:
        payload = {self.config.request_field: list(identifiers)}
        try:
            response = self._client.post(
                self.url,
                json=payload,
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
            )
        except httpx.TimeoutException as e:
            raise UpstreamError(
                f"enrichment request timed out after {self.config.timeout_seconds}s"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"enrichment request failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(
                f"enrichment service returned HTTP {response.status_code}: "
                f"{response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.debug(f"Unparsable enrichment body: {response.text[:500]}")
            raise UpstreamError(f"unparsable enrichment response: {e}") from e

    def close(self) -> None:
        self._client.close()

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers
