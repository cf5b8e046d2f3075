"""Order-preserving chunking of sequences."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def chunked(items: Sequence[T], size: int) -> List[List[T]]:
    """
    Split items into contiguous chunks of `size`.

    Every chunk has exactly `size` elements except possibly the last.

    Raises:
        ValueError: If size is not positive
    """
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]
