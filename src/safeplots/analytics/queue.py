"""Bounded analytics event queue persisted in a KeyValueStore."""

from __future__ import annotations

import json
import logging

from safeplots.analytics.models import EventRecord
from safeplots.config import AnalyticsSettings
from safeplots.storage.protocol import KeyValueStore

logger = logging.getLogger(__name__)

ANALYTICS_QUEUE_KEY = "safeplots_analytics_queue"


class AnalyticsQueue:
    """FIFO of EventRecords capped at ``capacity``; the oldest are evicted first.

    The whole queue is stored as one JSON array under ``key``, so it survives
    restarts when backed by a persistent store. Unreadable data reads as an
    empty queue.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = ANALYTICS_QUEUE_KEY,
        capacity: int = 100,
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        self._store = store
        self._key = key
        self._capacity = capacity

    @classmethod
    def from_settings(
        cls, store: KeyValueStore, settings: AnalyticsSettings | None = None
    ) -> AnalyticsQueue:
        settings = settings or AnalyticsSettings()
        return cls(store, capacity=settings.capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def events(self) -> list[EventRecord]:
        raw = self._store.get(self._key)
        if raw is None:
            return []
        try:
            items = json.loads(raw)
            return [EventRecord.from_dict(item) for item in items]
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError):
            logger.warning("Discarding unreadable analytics queue")
            return []

    def append(self, record: EventRecord) -> None:
        records = self.events()
        records.append(record)
        trimmed = records[-self._capacity :]
        self._store.set(self._key, json.dumps([r.to_dict() for r in trimmed]))

    def clear(self) -> None:
        self._store.remove(self._key)

    def __len__(self) -> int:
        return len(self.events())
