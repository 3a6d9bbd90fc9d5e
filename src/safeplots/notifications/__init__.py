"""User notifications (toasts) emitted by queries, mutations and API errors."""

from safeplots.notifications.bus import LoggingNotifier, NotificationBus, RecordingNotifier
from safeplots.notifications.models import Notification, Variant
from safeplots.notifications.protocol import Notifier

__all__ = [
    # Models
    "Notification",
    "Variant",
    # Protocol
    "Notifier",
    # Implementations
    "NotificationBus",
    "LoggingNotifier",
    "RecordingNotifier",
]
