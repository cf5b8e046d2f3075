"""
Unit Tests for chunked().

Test Aspects Covered:
    ✅ Business Logic: Contiguous, order-preserving chunks
    ✅ Edge Cases: Empty input, exact multiples, invalid size
"""

from __future__ import annotations

import pytest

from profile_screener.ingestion.chunker import chunked


class TestChunked:
    """Test cases for chunking."""

    def test_last_chunk_holds_remainder(self) -> None:
        """
        SCENARIO: 60 items, size 50
        EXPECTED: Two chunks of 50 and 10, order preserved
        """
        # Arrange
        items = list(range(60))

        # Act
        chunks = chunked(items, 50)

        # Assert
        assert [len(c) for c in chunks] == [50, 10]
        assert [x for c in chunks for x in c] == items

    def test_exact_multiple(self) -> None:
        """
        SCENARIO: Length is a multiple of the size
        EXPECTED: All chunks full
        """
        chunks = chunked(["a", "b", "c", "d"], 2)

        assert chunks == [["a", "b"], ["c", "d"]]

    def test_size_larger_than_input(self) -> None:
        """
        SCENARIO: Fewer items than the chunk size
        EXPECTED: One chunk with everything
        """
        assert chunked(["a", "b"], 50) == [["a", "b"]]

    def test_empty_input(self) -> None:
        """
        SCENARIO: No items
        EXPECTED: No chunks
        """
        assert chunked([], 3) == []

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size_rejected(self, size: int) -> None:
        """
        SCENARIO: Non-positive size
        EXPECTED: ValueError raised
        """
        with pytest.raises(ValueError):
            chunked([1, 2, 3], size)

    def test_input_not_modified(self) -> None:
        """
        SCENARIO: Chunks are mutated after chunking
        EXPECTED: Source list unchanged
        """
        items = [1, 2, 3]

        chunks = chunked(items, 2)
        chunks[0].append(99)

        assert items == [1, 2, 3]
