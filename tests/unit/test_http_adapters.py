"""
Unit Tests for the HTTP adapters.

Test Aspects Covered:
    ✅ Business Logic: Request payloads, headers, content extraction
    ✅ Error Handling: Status codes, timeouts, transport errors, bad bodies
"""

from __future__ import annotations

import json
from typing import Callable, List

import httpx
import pytest

from profile_screener.adapters.http_enrichment import HttpEnrichmentService
from profile_screener.adapters.openai_oracle import OpenAIScoringOracle
from profile_screener.config.models import EnrichmentConfig, RatingConfig
from profile_screener.resilience.errors import ItemScoringError, UpstreamError

ENRICH_URL = "https://enrich.test/lookup"


def mock_client(
    handler: Callable[[httpx.Request], httpx.Response],
    seen: List[httpx.Request],
) -> httpx.Client:
    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    return httpx.Client(transport=httpx.MockTransport(recording))


def completion(content) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})


class TestHttpEnrichmentService:
    """Test cases for HttpEnrichmentService."""

    def test_posts_identifiers_under_request_field(self) -> None:
        """
        SCENARIO: Lookup of two identifiers
        EXPECTED: One POST with {"profile_urls": [...]}, JSON body returned
        """
        # Arrange
        seen: List[httpx.Request] = []
        body = {"results": [{"name": "a"}, {"name": "b"}]}
        client = mock_client(lambda r: httpx.Response(200, json=body), seen)
        service = HttpEnrichmentService(ENRICH_URL, client=client)

        # Act
        result = service.lookup(["u1", "u2"])

        # Assert
        assert result == body
        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert str(seen[0].url) == ENRICH_URL
        assert json.loads(seen[0].content) == {"profile_urls": ["u1", "u2"]}
        assert "authorization" not in seen[0].headers

    def test_custom_field_and_bearer_token(self) -> None:
        seen: List[httpx.Request] = []
        client = mock_client(lambda r: httpx.Response(200, json=[]), seen)
        config = EnrichmentConfig(request_field="urls")
        service = HttpEnrichmentService(ENRICH_URL, config, api_key="secret", client=client)

        service.lookup(["u1"])

        assert json.loads(seen[0].content) == {"urls": ["u1"]}
        assert seen[0].headers["authorization"] == "Bearer secret"

    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    def test_error_status_raises(self, status: int) -> None:
        """
        SCENARIO: Endpoint answers with a non-success status
        EXPECTED: UpstreamError carrying the status code
        """
        client = mock_client(lambda r: httpx.Response(status, text="boom"), [])
        service = HttpEnrichmentService(ENRICH_URL, client=client)

        with pytest.raises(UpstreamError) as exc_info:
            service.lookup(["u1"])

        assert exc_info.value.status_code == status
        assert f"HTTP {status}" in str(exc_info.value)

    def test_timeout_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        service = HttpEnrichmentService(ENRICH_URL, client=mock_client(handler, []))

        with pytest.raises(UpstreamError, match="timed out"):
            service.lookup(["u1"])

    def test_transport_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        service = HttpEnrichmentService(ENRICH_URL, client=mock_client(handler, []))

        with pytest.raises(UpstreamError, match="connection refused"):
            service.lookup(["u1"])

    def test_unparsable_body_raises(self) -> None:
        client = mock_client(lambda r: httpx.Response(200, text="<html>"), [])
        service = HttpEnrichmentService(ENRICH_URL, client=client)

        with pytest.raises(UpstreamError, match="unparsable"):
            service.lookup(["u1"])

    def test_requires_url(self) -> None:
        with pytest.raises(ValueError):
            HttpEnrichmentService("")

    def test_close_releases_client(self) -> None:
        client = mock_client(lambda r: httpx.Response(200, json=[]), [])
        service = HttpEnrichmentService(ENRICH_URL, client=client)

        service.close()

        assert client.is_closed


class TestOpenAIScoringOracle:
    """Test cases for OpenAIScoringOracle."""

    def test_returns_message_content(self) -> None:
        """
        SCENARIO: Chat completion with JSON content
        EXPECTED: Content string returned, payload carries instructions and schema
        """
        # Arrange
        seen: List[httpx.Request] = []
        content = '{"score": 8, "reasoning": "Strong founder signal."}'
        client = mock_client(lambda r: completion(content), seen)
        config = RatingConfig(api_base="https://llm.test/v1/", model="test-model")
        oracle = OpenAIScoringOracle("key", config, client=client)

        # Act
        result = oracle.evaluate("rate this", "profile text")

        # Assert
        assert result == content
        request = seen[0]
        assert str(request.url) == "https://llm.test/v1/chat/completions"
        assert request.headers["authorization"] == "Bearer key"
        payload = json.loads(request.content)
        assert payload["model"] == "test-model"
        assert payload["messages"] == [
            {"role": "system", "content": "rate this"},
            {"role": "user", "content": "profile text"},
        ]
        schema = payload["response_format"]["json_schema"]
        assert schema["strict"] is True
        assert schema["schema"]["required"] == ["score", "reasoning"]

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(429, text="rate limited"),
            httpx.Response(500, text="error"),
            httpx.Response(200, text="not json"),
            httpx.Response(200, json={"choices": []}),
            httpx.Response(200, json={"unexpected": True}),
            httpx.Response(200, json={"choices": [{"message": {"content": ""}}]}),
        ],
    )
    def test_failures_are_item_errors(self, response: httpx.Response) -> None:
        """
        SCENARIO: Oracle answers with an error or an unusable body
        EXPECTED: ItemScoringError raised
        """
        oracle = OpenAIScoringOracle("key", client=mock_client(lambda r: response, []))

        with pytest.raises(ItemScoringError):
            oracle.evaluate("rate this", "profile text")

    def test_timeout_is_item_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        oracle = OpenAIScoringOracle("key", client=mock_client(handler, []))

        with pytest.raises(ItemScoringError, match="timed out"):
            oracle.evaluate("rate this", "profile text")

    def test_requires_api_key(self) -> None:
        with pytest.raises(ValueError):
            OpenAIScoringOracle("")

    def test_close_releases_client(self) -> None:
        client = mock_client(lambda r: completion("{}"), [])
        oracle = OpenAIScoringOracle("key", client=client)

        oracle.close()

        assert client.is_closed
