"""Analytics tracking helpers.

Usage:
    tracker = AnalyticsTracker(AnalyticsQueue(store), user_id="u-1")
    tracker.track_property_view("p-42", "3BHK villa in Pune")
    tracker.track_search("villa", filters={"city": "Pune"})
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from safeplots.analytics.models import AnalyticsEvent, EventRecord
from safeplots.analytics.queue import AnalyticsQueue
from safeplots.config import AnalyticsSettings

logger = logging.getLogger(__name__)


class AnalyticsTracker:
    """Records events for the current user into an AnalyticsQueue.

    Args:
        queue: Destination queue.
        user_id: Signed-in user, attached to every event as ``userId``.
        debug: Also log each event at INFO.
    """

    def __init__(self, queue: AnalyticsQueue, user_id: str | None = None, debug: bool = False) -> None:
        self._queue = queue
        self.user_id = user_id
        self._debug = debug

    @classmethod
    def from_settings(
        cls,
        queue: AnalyticsQueue,
        settings: AnalyticsSettings | None = None,
        user_id: str | None = None,
    ) -> AnalyticsTracker:
        settings = settings or AnalyticsSettings()
        return cls(queue, user_id=user_id, debug=settings.debug)

    def track(self, event: AnalyticsEvent | str, **data: Any) -> EventRecord:
        name = AnalyticsEvent(event).value
        if self._debug:
            logger.info("[Analytics] %s %r", name, {"userId": self.user_id, **data})

        record = EventRecord(
            event=name,
            data={**data, "userId": self.user_id},
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        self._queue.append(record)
        return record

    def track_property_view(self, property_id: str, property_title: str | None = None) -> EventRecord:
        return self.track(
            AnalyticsEvent.PROPERTY_VIEW, propertyId=property_id, propertyTitle=property_title
        )

    def track_inquiry_sent(self, property_id: str, seller_id: str) -> EventRecord:
        return self.track(AnalyticsEvent.INQUIRY_SENT, propertyId=property_id, sellerId=seller_id)

    def track_property_saved(self, property_id: str) -> EventRecord:
        return self.track(AnalyticsEvent.PROPERTY_SAVED, propertyId=property_id)

    def track_property_unsaved(self, property_id: str) -> EventRecord:
        return self.track(AnalyticsEvent.PROPERTY_UNSAVED, propertyId=property_id)

    def track_property_reported(self, property_id: str, reason: str) -> EventRecord:
        return self.track(AnalyticsEvent.PROPERTY_REPORTED, propertyId=property_id, reason=reason)

    def track_search(self, query: str, filters: dict[str, Any] | None = None) -> EventRecord:
        return self.track(AnalyticsEvent.SEARCH_PERFORMED, searchQuery=query, filters=filters)

    def track_seller_contacted(self, seller_id: str, property_id: str) -> EventRecord:
        return self.track(AnalyticsEvent.SELLER_CONTACTED, sellerId=seller_id, propertyId=property_id)

    def track_property_shared(self, property_id: str, platform: str | None = None) -> EventRecord:
        return self.track(AnalyticsEvent.PROPERTY_SHARED, propertyId=property_id, platform=platform)
