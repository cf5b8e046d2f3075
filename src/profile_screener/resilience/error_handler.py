"""
Error Handler - Failure Policies for Upstream Calls.

Provides:
    - Fatal guard (single attempt, any failure becomes UpstreamError)
    - Per-item isolation (single attempt, failure captured, never raised)
    - Partial failure handling over an ordered batch of items

Design Notes:
    - No retries: every call is attempted exactly once
    - Isolation keeps results in input order
    - ScreenerError subclasses pass through the fatal guard unchanged
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Tuple, Type, TypeVar

from profile_screener.resilience.errors import ScreenerError, UpstreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def describe_error(error: BaseException) -> str:
    """Render an exception as a one-line reason string."""
    message = str(error).strip()
    if isinstance(error, ScreenerError):
        return message or type(error).__name__
    if not message:
        return type(error).__name__
    return f"{type(error).__name__}: {message}"


@dataclass
class ItemOutcome(Generic[T]):
    """Result of one isolated call."""
    item: Any
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> str:
        return describe_error(self.error) if self.error is not None else ""


@dataclass
class PartialResult(Generic[T]):
    """Ordered outcomes of a batch where single items may fail."""
    outcomes: List[ItemOutcome[T]] = field(default_factory=list)

    @property
    def successful(self) -> List[T]:
        return [o.value for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[Tuple[Any, Exception]]:
        return [(o.item, o.error) for o in self.outcomes if not o.ok]

    @property
    def success_rate(self) -> float:
        """Calculate success rate (0.0 to 1.0)."""
        if not self.outcomes:
            return 1.0
        return len(self.successful) / len(self.outcomes)

    @property
    def has_failures(self) -> bool:
        """Check if any failures occurred."""
        return any(not o.ok for o in self.outcomes)

    @property
    def all_failed(self) -> bool:
        """Check if all operations failed."""
        return bool(self.outcomes) and all(not o.ok for o in self.outcomes)


class ErrorHandler:
    """
    Applies the pipeline's failure policies.

    Features:
        - guard_fatal: one attempt, failures abort the caller
        - isolate: one attempt, failures are captured
        - handle_partial_failure: isolate over an ordered batch
    """

    def __init__(
        self,
        recoverable_exceptions: Tuple[Type[Exception], ...] = (Exception,),
    ) -> None:
        """
        Initialize error handler.

        Args:
            recoverable_exceptions: Exception types that isolate() captures.
                                    Anything else propagates.
        """
        self.recoverable_exceptions = recoverable_exceptions

    def guard_fatal(
        self,
        func: Callable[[], T],
        operation_name: str = "operation",
        chunk_index: Optional[int] = None,
    ) -> T:
        """
        Execute function once, converting failures into UpstreamError.

        Args:
            func: Function to execute
            operation_name: Name for logging
            chunk_index: Chunk position attached to the raised error

        Returns:
            Result of the call

        Raises:
            UpstreamError: When the call fails for any reason
        """
        try:
            return func()
        except UpstreamError as e:
            if e.chunk_index is None:
                e.chunk_index = chunk_index
            logger.error(f"{operation_name} failed: {e}")
            raise
        except ScreenerError:
            raise
        except Exception as e:
            logger.error(f"{operation_name} failed: {describe_error(e)}")
            raise UpstreamError(
                f"{operation_name} failed: {describe_error(e)}",
                chunk_index=chunk_index,
            ) from e

    def isolate(
        self,
        func: Callable[[], T],
        item: Any = None,
        operation_name: str = "operation",
    ) -> ItemOutcome[T]:
        """
        Execute function once, capturing a recoverable failure.

        Args:
            func: Function to execute
            item: The item being processed, kept on the outcome
            operation_name: Name for logging

        Returns:
            ItemOutcome holding either the value or the error
        """
        try:
            return ItemOutcome(item=item, value=func())
        except self.recoverable_exceptions as e:
            logger.warning(f"{operation_name} failed for {item}: {describe_error(e)}")
            return ItemOutcome(item=item, error=e)

    def handle_partial_failure(
        self,
        items: List[Any],
        processor: Callable[[Any], T],
        operation_name: str = "batch operation",
    ) -> PartialResult[T]:
        """
        Process items in order, allowing single items to fail.

        Args:
            items: Items to process
            processor: Function to process each item
            operation_name: Name for logging

        Returns:
            PartialResult with one outcome per item, in input order
        """
        result: PartialResult[T] = PartialResult()

        for item in items:
            result.outcomes.append(
                self.isolate(lambda: processor(item), item, operation_name)
            )

        if result.has_failures:
            logger.warning(
                f"{operation_name} completed with {len(result.failed)} failures "
                f"({result.success_rate:.1%} success rate)"
            )

        return result
