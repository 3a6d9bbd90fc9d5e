"""Notifier protocol.

Anything with a ``notify(notification)`` method can receive notifications
from queries, mutations and the API error handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from safeplots.notifications.models import Notification


@runtime_checkable
class Notifier(Protocol):
    """Write-only sink for user notifications.

    Implementations must not raise for delivery problems and must not block:
    callers never read anything back and never wait on delivery.

    Built-in implementations:
    - NotificationBus: process-wide fan-out to subscribers (default)
    - LoggingNotifier: writes to the logging module
    - RecordingNotifier: keeps notifications in a list
    """

    def notify(self, notification: Notification) -> None:
        """Deliver a notification."""
        ...
