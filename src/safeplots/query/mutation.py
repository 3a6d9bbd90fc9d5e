"""Mutations: on-demand write operations with loading and error state.

Usage:
    save = Mutation(
        lambda property_id: client.post(f"/users/saved-properties/{property_id}"),
        show_success_toast=True,
        success_message="Property saved",
    )
    result = await save.mutate("p-42")   # None on failure, never raises
    save.reset()                         # back to the initial state
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from safeplots.notifications import Notification, Notifier
from safeplots.query.base import StatefulResource
from safeplots.query.errors import error_message, normalize_error
from safeplots.query.models import MutationState

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")

MutationFn = Callable[[V], Awaitable[T]]

DEFAULT_SUCCESS_MESSAGE = "Operation completed successfully"
OPERATION_FAILED_MESSAGE = "Operation failed"


class Mutation(StatefulResource[MutationState[T]], Generic[T, V]):
    """Runs a single-argument async mutation function on demand.

    Each ``mutate`` call is exactly one attempt. Side effects are never
    replayed automatically; calling ``mutate`` again is a new, unrelated call.

    Args:
        mutation_fn: The write operation.
        on_success: Called with the result after state is updated.
        on_error: Called with the error after state is updated.
        show_success_toast: Notify on success.
        success_message: Description of the success notification.
        show_error_toast: Notify on failure.
        notifier: Notification sink. Defaults to the process-wide bus.
    """

    def __init__(
        self,
        mutation_fn: MutationFn[V, T],
        *,
        on_success: Callable[[T], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
        show_success_toast: bool = False,
        success_message: str = DEFAULT_SUCCESS_MESSAGE,
        show_error_toast: bool = True,
        notifier: Notifier | None = None,
    ) -> None:
        super().__init__(MutationState(), notifier)
        self._mutation_fn = mutation_fn
        self._on_success = on_success
        self._on_error = on_error
        self._show_success_toast = show_success_toast
        self._success_message = success_message
        self._show_error_toast = show_error_toast
        self._name = getattr(mutation_fn, "__qualname__", repr(mutation_fn))

    @property
    def data(self) -> T | None:
        return self._state.data

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error(self) -> Exception | None:
        return self._state.error

    async def mutate(self, variables: V | None = None) -> T | None:
        """Run the mutation once. Returns the result, or None on failure."""
        if self._warn_if_disposed("mutate"):
            return None

        self._apply(is_loading=True, error=None)
        try:
            result = await self._mutation_fn(variables)  # type: ignore[arg-type]
        except asyncio.CancelledError:
            self._apply(is_loading=False)
            raise
        except Exception as exc:
            self._finish_failure(normalize_error(exc))
            return None

        self._finish_success(result)
        return result

    def reset(self) -> None:
        """Clear data, error and loading flag."""
        self._apply(data=None, error=None, is_loading=False)

    def _finish_success(self, result: T) -> None:
        if not self._apply(data=result, is_loading=False):
            return
        if self._show_success_toast:
            self._notifier.notify(Notification.success(self._success_message))
        if self._on_success is not None:
            self._on_success(result)

    def _finish_failure(self, error: Exception) -> None:
        if not self._apply(error=error, is_loading=False):
            return
        logger.warning("Mutation %s failed: %s", self._name, error)
        if self._show_error_toast:
            self._notifier.notify(Notification.error(error_message(error, OPERATION_FAILED_MESSAGE)))
        if self._on_error is not None:
            self._on_error(error)
