"""Shared state holder for queries and mutations."""

from __future__ import annotations

import warnings
from collections.abc import Callable
from dataclasses import replace
from typing import Any, Generic, TypeVar

from safeplots.notifications import NotificationBus, Notifier

S = TypeVar("S")

StateListener = Callable[[S], None]


class StatefulResource(Generic[S]):
    """Owns one immutable state record and applies transitions atomically.

    After ``dispose()`` every transition is discarded, so late continuations
    of in-flight calls cannot touch state, callbacks or notifications.
    """

    def __init__(self, initial: S, notifier: Notifier | None = None) -> None:
        self._state = initial
        self._notifier: Notifier = notifier if notifier is not None else NotificationBus.default()
        self._listeners: list[StateListener[S]] = []
        self._disposed = False

    @property
    def state(self) -> S:
        return self._state

    @property
    def disposed(self) -> bool:
        return self._disposed

    def subscribe(self, listener: StateListener[S]) -> Callable[[], None]:
        """Call listener with the new state after every transition."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispose(self) -> None:
        """Detach this instance. Pending work finishes without side effects."""
        self._disposed = True
        self._listeners.clear()

    def _apply(self, **changes: Any) -> bool:
        """Replace state with changes applied. Returns False if disposed."""
        if self._disposed:
            return False
        self._state = replace(self._state, **changes)  # type: ignore[type-var]
        for listener in list(self._listeners):
            listener(self._state)
        return True

    def _warn_if_disposed(self, operation: str) -> bool:
        if self._disposed:
            warnings.warn(
                f"{operation}() called on a disposed {type(self).__name__}; ignoring.",
                RuntimeWarning,
                stacklevel=3,
            )
        return self._disposed
