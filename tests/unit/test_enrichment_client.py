"""
Unit Tests for EnrichmentClient.

Test Aspects Covered:
    ✅ Business Logic: Chunking, positional concatenation, response shapes
    ✅ Error Handling: Failing chunk aborts, count mismatch, malformed body
    ✅ Edge Cases: Short final chunk in lenient mode
"""

from __future__ import annotations

from typing import Any, List
from unittest.mock import Mock

import pytest

from profile_screener.adapters.stub_services import StubEnrichmentService
from profile_screener.config.models import EnrichmentConfig
from profile_screener.enrichment.enrichment_client import EnrichmentClient
from profile_screener.resilience.errors import UpstreamError
from tests.fixtures import make_identifiers


class ScriptedService:
    """Returns scripted bodies per call."""

    def __init__(self, bodies: List[Any]) -> None:
        self.bodies = list(bodies)
        self.requests: List[List[str]] = []

    def lookup(self, identifiers: List[str]) -> Any:
        self.requests.append(list(identifiers))
        body = self.bodies[len(self.requests) - 1]
        if isinstance(body, Exception):
            raise body
        return body


class TestChunkedRequests:
    """Test cases for chunked, sequential requests."""

    def test_sixty_identifiers_two_requests(self) -> None:
        """
        SCENARIO: 60 identifiers, chunk size 50
        EXPECTED: Exactly two requests of 50 and 10, in order
        """
        # Arrange
        identifiers = make_identifiers(60)
        service = StubEnrichmentService()
        client = EnrichmentClient(service, EnrichmentConfig(chunk_size=50))

        # Act
        profiles = client.enrich(identifiers)

        # Assert
        assert [len(r) for r in service.requests] == [50, 10]
        assert service.requests[0] + service.requests[1] == identifiers
        assert len(profiles) == 60

    def test_records_concatenated_positionally(self) -> None:
        """
        SCENARIO: Records come back in request order across chunks
        EXPECTED: profile i belongs to identifier i
        """
        identifiers = make_identifiers(7)
        client = EnrichmentClient(StubEnrichmentService(), EnrichmentConfig(chunk_size=3))

        profiles = client.enrich(identifiers)

        assert [p["profile_url"] for p in profiles] == identifiers

    def test_first_chunk_failure_stops_run(self) -> None:
        """
        SCENARIO: First of two requests fails
        EXPECTED: UpstreamError, second request never issued
        """
        # Arrange
        service = StubEnrichmentService(fail_chunks=[0])
        client = EnrichmentClient(service, EnrichmentConfig(chunk_size=50))

        # Act & Assert
        with pytest.raises(UpstreamError) as exc_info:
            client.enrich(make_identifiers(60))

        assert len(service.requests) == 1
        assert exc_info.value.chunk_index == 0
        assert exc_info.value.status_code == 503

    def test_later_chunk_failure_discards_results(self) -> None:
        """
        SCENARIO: Third of four requests fails
        EXPECTED: UpstreamError, fourth request never issued
        """
        service = StubEnrichmentService(fail_chunks=[2])
        client = EnrichmentClient(service, EnrichmentConfig(chunk_size=5))

        with pytest.raises(UpstreamError) as exc_info:
            client.enrich(make_identifiers(20))

        assert len(service.requests) == 3
        assert exc_info.value.chunk_index == 2

    def test_unexpected_exception_wrapped(self) -> None:
        """
        SCENARIO: Service raises a non-screener exception
        EXPECTED: UpstreamError chained from the original
        """
        service = Mock()
        service.lookup.side_effect = ConnectionError("reset by peer")
        client = EnrichmentClient(service, EnrichmentConfig())

        with pytest.raises(UpstreamError) as exc_info:
            client.enrich(make_identifiers(2))

        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert "reset by peer" in str(exc_info.value)
        assert service.lookup.call_count == 1

    def test_progress_reported_per_chunk(self) -> None:
        """
        SCENARIO: Three chunks with an audit logger attached
        EXPECTED: One progress signal per chunk, traces recorded
        """
        audit = Mock()
        client = EnrichmentClient(
            StubEnrichmentService(), EnrichmentConfig(chunk_size=2), audit_logger=audit
        )

        client.enrich(make_identifiers(5))

        assert audit.log_progress.call_count == 3
        assert [t.requested for t in client.traces] == [2, 2, 1]
        assert all(t.requested == t.received for t in client.traces)


class TestResponseShapes:
    """Test cases for response body normalization."""

    @pytest.mark.parametrize("shape", ["list", "results", "data", "output"])
    def test_accepted_shapes(self, shape: str) -> None:
        """
        SCENARIO: Bare list or list wrapped under a known field
        EXPECTED: Records extracted
        """
        client = EnrichmentClient(StubEnrichmentService(shape=shape), EnrichmentConfig())

        profiles = client.enrich(make_identifiers(4))

        assert len(profiles) == 4

    @pytest.mark.parametrize("body", [{"profiles": []}, "oops", 42, None])
    def test_malformed_body_is_fatal(self, body: Any) -> None:
        """
        SCENARIO: Body without a record list
        EXPECTED: UpstreamError with the chunk index
        """
        client = EnrichmentClient(ScriptedService([body]), EnrichmentConfig())

        with pytest.raises(UpstreamError, match="malformed") as exc_info:
            client.enrich(make_identifiers(1))

        assert exc_info.value.chunk_index == 0


class TestAlignment:
    """Test cases for per-chunk record count checks."""

    def test_shortfall_is_fatal_in_strict_mode(self) -> None:
        """
        SCENARIO: Service returns one record fewer than requested
        EXPECTED: UpstreamError (silent misalignment is never accepted)
        """
        client = EnrichmentClient(
            StubEnrichmentService(drop_records=1), EnrichmentConfig(strict_alignment=True)
        )

        with pytest.raises(UpstreamError, match="returned 2 records for 3"):
            client.enrich(make_identifiers(3))

    def test_surplus_is_always_fatal(self) -> None:
        """
        SCENARIO: Service returns more records than requested, lenient mode
        EXPECTED: UpstreamError
        """
        service = ScriptedService([[{"n": 1}, {"n": 2}, {"n": 3}]])
        client = EnrichmentClient(service, EnrichmentConfig(strict_alignment=False))

        with pytest.raises(UpstreamError):
            client.enrich(make_identifiers(2))

    def test_short_last_chunk_kept_in_lenient_mode(self) -> None:
        """
        SCENARIO: Final chunk comes back one record short, lenient mode
        EXPECTED: Records kept, anomaly logged
        """
        audit = Mock()
        service = ScriptedService([[{"n": 1}, {"n": 2}], [{"n": 3}]])
        client = EnrichmentClient(
            service,
            EnrichmentConfig(chunk_size=2, strict_alignment=False),
            audit_logger=audit,
        )

        profiles = client.enrich(make_identifiers(4))

        assert profiles == [{"n": 1}, {"n": 2}, {"n": 3}]
        audit.log_anomaly.assert_called_once()

    def test_short_middle_chunk_fatal_in_lenient_mode(self) -> None:
        """
        SCENARIO: A non-final chunk comes back short, lenient mode
        EXPECTED: UpstreamError, later chunks not issued
        """
        service = ScriptedService([[{"n": 1}], [{"n": 3}, {"n": 4}]])
        client = EnrichmentClient(
            service, EnrichmentConfig(chunk_size=2, strict_alignment=False)
        )

        with pytest.raises(UpstreamError):
            client.enrich(make_identifiers(4))

        assert len(service.requests) == 1
