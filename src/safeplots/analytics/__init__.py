"""Local analytics event queue and tracking helpers."""

from safeplots.analytics.models import AnalyticsEvent, EventRecord
from safeplots.analytics.queue import AnalyticsQueue
from safeplots.analytics.tracker import AnalyticsTracker

__all__ = [
    "AnalyticsEvent",
    "EventRecord",
    "AnalyticsQueue",
    "AnalyticsTracker",
]
