"""Resource queries: read operations with loading, error and retry state.

Usage:
    async def load_properties() -> list[Property]:
        response = await client.get("/properties", params=paginator.get_query_params())
        return response.unwrap()

    query = ResourceQuery(load_properties, retry_count=2)
    await query.start()          # initial execution
    query.data, query.error      # inspect the outcome
    await query.refetch()        # re-run after parameters changed
    query.dispose()              # late results are discarded from now on

    # Or scope it
    async with ResourceQuery(load_properties) as query:
        ...
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

import tenacity

from safeplots.config import QuerySettings
from safeplots.notifications import Notification, Notifier
from safeplots.query.base import StatefulResource
from safeplots.query.errors import error_message, normalize_error
from safeplots.query.models import QueryState, RetryPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryFn = Callable[[], Awaitable[T]]
SleepFn = Callable[[float], Awaitable[None]]

FETCH_FAILED_MESSAGE = "Failed to fetch data"


class ResourceQuery(StatefulResource[QueryState[T]], Generic[T]):
    """Runs a zero-argument async query function and tracks its lifecycle.

    Failures never escape ``execute``/``refetch``: the terminal error lands
    in ``state.error``, optionally as a notification, and in ``on_error``.
    Failed attempts are retried up to ``retry_count`` times with linear
    backoff (``retry_delay``, ``2 * retry_delay``, ...).

    The query only re-runs on its own when ``enabled`` flips from False to
    True. Parameter changes need an explicit ``refetch()``. Overlapping
    refetches are not de-duplicated; the last one to resolve wins.

    Args:
        query_fn: The read operation. Assumed idempotent since it may be retried.
        enabled: When False, nothing runs and ``is_loading`` stays False.
        on_success: Called with the result after state is updated.
        on_error: Called with the terminal error after state is updated.
        retry_count: Automatic re-attempts after the first failure.
        show_error_toast: Notify on terminal failure.
        notifier: Notification sink. Defaults to the process-wide bus.
        retry_delay: Backoff unit in seconds.
        sleep: Awaitable sleep used between attempts.
    """

    def __init__(
        self,
        query_fn: QueryFn[T],
        *,
        enabled: bool = True,
        on_success: Callable[[T], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
        retry_count: int = 0,
        show_error_toast: bool = True,
        notifier: Notifier | None = None,
        retry_delay: float = 1.0,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        super().__init__(QueryState(), notifier)
        self._query_fn = query_fn
        self._enabled = enabled
        self._on_success = on_success
        self._on_error = on_error
        self._show_error_toast = show_error_toast
        self._policy = RetryPolicy(retry_count=retry_count, delay=retry_delay)
        self._sleep = sleep
        self._name = getattr(query_fn, "__qualname__", repr(query_fn))

    @classmethod
    def from_settings(
        cls,
        query_fn: QueryFn[T],
        settings: QuerySettings | None = None,
        **kwargs: Any,
    ) -> ResourceQuery[T]:
        """Create a query whose retry and toast defaults come from QuerySettings."""
        settings = settings or QuerySettings()
        options: dict[str, Any] = {
            "retry_count": settings.retry_count,
            "retry_delay": settings.retry_delay,
            "show_error_toast": settings.show_error_toast,
        }
        options.update(kwargs)
        return cls(query_fn, **options)

    @property
    def data(self) -> T | None:
        return self._state.data

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def is_refetching(self) -> bool:
        return self._state.is_refetching

    @property
    def error(self) -> Exception | None:
        return self._state.error

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._policy

    async def start(self) -> None:
        """Initial execution, the equivalent of mounting the query."""
        await self.execute()

    async def __aenter__(self) -> ResourceQuery[T]:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.dispose()

    async def set_enabled(self, enabled: bool) -> None:
        """Toggle execution. Flipping to True runs the query once."""
        if enabled == self._enabled:
            return
        self._enabled = enabled
        await self.execute()

    async def refetch(self) -> None:
        """Re-run the query with a fresh retry budget. Stale data stays visible meanwhile."""
        if self._warn_if_disposed("refetch"):
            return
        self._apply(retry_count=0)
        await self.execute(is_refetch=True)

    async def execute(self, is_refetch: bool = False) -> None:
        """Run the query function, retrying per policy, and record the outcome."""
        if self._warn_if_disposed("execute"):
            return
        if not self._enabled:
            self._apply(is_loading=False)
            return

        retryer = self._build_retryer()
        try:
            async for attempt in retryer:
                # Listener errors raised here are not query failures.
                retry = attempt.retry_state.attempt_number - 1
                if not self._begin_attempt(is_refetch, retry):
                    return
                with attempt:
                    result = await self._query_fn()
        except tenacity.RetryError as e:
            self._finish_failure(normalize_error(e.last_attempt.exception()), e.last_attempt)
            return
        except asyncio.CancelledError:
            self._apply(is_loading=False, is_refetching=False)
            raise

        self._finish_success(result)

    def _build_retryer(self) -> tenacity.AsyncRetrying:
        """Build a tenacity retryer with linear backoff from the retry policy."""
        policy = self._policy
        return tenacity.AsyncRetrying(
            sleep=self._sleep,
            stop=tenacity.stop_any(
                tenacity.stop_after_attempt(policy.max_attempts),
                self._stop_when_disposed,
            ),
            wait=tenacity.wait_incrementing(start=policy.delay, increment=policy.delay),
            retry=tenacity.retry_if_exception_type(Exception),
            before_sleep=self._log_retry,
            reraise=False,
        )

    def _stop_when_disposed(self, retry_state: tenacity.RetryCallState) -> bool:
        return self._disposed

    def _log_retry(self, retry_state: tenacity.RetryCallState) -> None:
        outcome = retry_state.outcome
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.debug(
            "Query %s attempt %d failed (%r); retrying in %.1fs",
            self._name,
            retry_state.attempt_number,
            outcome.exception() if outcome else None,
            delay,
        )

    def _begin_attempt(self, is_refetch: bool, retry: int) -> bool:
        if is_refetch:
            return self._apply(is_refetching=True, error=None, retry_count=retry)
        return self._apply(is_loading=True, error=None, retry_count=retry)

    def _finish_success(self, result: T) -> None:
        if not self._apply(data=result, is_loading=False, is_refetching=False):
            return
        if self._on_success is not None:
            self._on_success(result)

    def _finish_failure(self, error: Exception, last_attempt: Any) -> None:
        if not self._apply(error=error, is_loading=False, is_refetching=False):
            return
        logger.warning(
            "Query %s failed after %d attempt(s): %s",
            self._name,
            last_attempt.attempt_number,
            error,
        )
        if self._show_error_toast:
            self._notifier.notify(Notification.error(error_message(error, FETCH_FAILED_MESSAGE)))
        if self._on_error is not None:
            self._on_error(error)
