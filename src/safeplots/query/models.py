"""Query and mutation state records, plus retry configuration.

State records are immutable snapshots. Every transition replaces the whole
record at once, so observers never see a half-applied update.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class QueryState(Generic[T]):
    """Lifecycle state of one ResourceQuery.

    Attributes:
        data: Last successful result. Stays visible while a refetch runs.
        is_loading: An initial (non-refetch) execution is in flight.
        is_refetching: A refetch is in flight.
        error: Terminal failure of the last execution, cleared on every new attempt.
        retry_count: Retries consumed by the current execution.
    """

    data: T | None = None
    is_loading: bool = False
    is_refetching: bool = False
    error: Exception | None = None
    retry_count: int = 0


@dataclass(frozen=True, slots=True)
class MutationState(Generic[T]):
    """Lifecycle state of one Mutation. ``MutationState()`` is the reset state."""

    data: T | None = None
    is_loading: bool = False
    error: Exception | None = None


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Automatic retry configuration for queries.

    Backoff is linear: the wait before retry n (1-based) is ``n * delay``.
    Mutations never retry.
    """

    retry_count: int = 0
    """Re-attempts after the first failure (0 = no retry)."""

    delay: float = 1.0
    """Backoff unit in seconds."""

    def __post_init__(self) -> None:
        if self.retry_count < 0:
            raise ValueError(f"retry_count must be >= 0, got {self.retry_count}")
        if self.delay < 0:
            raise ValueError(f"delay must be >= 0, got {self.delay}")

    @property
    def max_attempts(self) -> int:
        return self.retry_count + 1
