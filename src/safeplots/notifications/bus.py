"""Notifier implementations.

Usage:
    from safeplots.notifications import Notification, NotificationBus

    bus = NotificationBus.default()
    unsubscribe = bus.subscribe(lambda n: print(n.title, n.description))
    bus.notify(Notification.error("Failed to fetch data"))
    unsubscribe()
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from safeplots.notifications.models import Notification, Variant

logger = logging.getLogger(__name__)

Subscriber = Callable[[Notification], None]


class NotificationBus:
    """Fan-out notifier shared by every query and mutation in the process.

    Subscribers are called synchronously in subscription order. A subscriber
    that raises is logged and skipped; the remaining subscribers still run.
    """

    _instance: NotificationBus | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    @classmethod
    def default(cls) -> NotificationBus:
        """Get the process-wide bus, creating it if necessary."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a subscriber. Returns a callable that removes it again."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def notify(self, notification: Notification) -> None:
        """Deliver notification to all current subscribers."""
        logger.debug("Notification %r: %s", notification.title, notification.description)
        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception:
                logger.exception("Notification subscriber %r failed", callback)


class LoggingNotifier:
    """Notifier that writes to a logger. Destructive notifications log at WARNING."""

    def __init__(self, logger_name: str = "safeplots.notifications") -> None:
        self._logger = logging.getLogger(logger_name)

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.variant is Variant.DESTRUCTIVE else logging.INFO
        self._logger.log(level, "%s: %s", notification.title, notification.description)


class RecordingNotifier:
    """Notifier that keeps every notification it receives, in order."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def clear(self) -> None:
        self.notifications.clear()
