"""Analytics event models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AnalyticsEvent(str, Enum):
    """Tracked user actions."""

    PROPERTY_VIEW = "property_view"
    PROPERTY_SAVED = "property_saved"
    PROPERTY_UNSAVED = "property_unsaved"
    INQUIRY_SENT = "inquiry_sent"
    PROPERTY_REPORTED = "property_reported"
    SELLER_CONTACTED = "seller_contacted"
    SEARCH_PERFORMED = "search_performed"
    FILTER_APPLIED = "filter_applied"
    PROPERTY_SHARED = "property_shared"
    LOGIN = "login"
    LOGOUT = "logout"
    REGISTER = "register"


@dataclass(slots=True)
class EventRecord:
    """One queued analytics event.

    Attributes:
        event: Event name (an AnalyticsEvent value).
        data: Event properties, including ``userId`` when known.
        timestamp: ISO-8601 UTC time the event was tracked.
    """

    event: str
    timestamp: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"event": self.event, "data": self.data, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EventRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            event=data["event"],
            timestamp=data["timestamp"],
            data=data.get("data", {}),
        )
