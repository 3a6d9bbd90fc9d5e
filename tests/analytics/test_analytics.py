"""Tests for the analytics queue and tracker.

Critical Invariants:
- Queue never exceeds capacity; oldest events are evicted first
- Queue contents survive re-instantiation over the same store
"""

import logging

import pytest

from safeplots.analytics import AnalyticsEvent, AnalyticsQueue, AnalyticsTracker, EventRecord
from safeplots.config import AnalyticsSettings


def make_record(i: int) -> EventRecord:
    return EventRecord(event="property_view", timestamp=f"t{i}", data={"i": i})


def test_bounded_fifo_evicts_oldest(kv_store):
    queue = AnalyticsQueue(kv_store, capacity=3)

    for i in range(5):
        queue.append(make_record(i))

    assert [r.data["i"] for r in queue.events()] == [2, 3, 4]
    assert len(queue) == 3


def test_queue_persists_through_store(kv_store):
    AnalyticsQueue(kv_store).append(make_record(1))

    events = AnalyticsQueue(kv_store).events()
    assert events == [make_record(1)]


def test_clear(kv_store):
    queue = AnalyticsQueue(kv_store)
    queue.append(make_record(1))

    queue.clear()

    assert queue.events() == []


@pytest.mark.parametrize("raw", ["not json", '{"event": "x"}', '[{"data": {}}]'])
def test_unreadable_queue_reads_empty(kv_store, raw):
    kv_store.set("safeplots_analytics_queue", raw)
    assert AnalyticsQueue(kv_store).events() == []


def test_capacity_validation(kv_store):
    with pytest.raises(ValueError):
        AnalyticsQueue(kv_store, capacity=0)


def test_from_settings(kv_store):
    queue = AnalyticsQueue.from_settings(kv_store, AnalyticsSettings(capacity=7))
    assert queue.capacity == 7


def test_track_attaches_user_and_timestamp(kv_store):
    queue = AnalyticsQueue(kv_store)
    tracker = AnalyticsTracker(queue, user_id="u-1")

    record = tracker.track(AnalyticsEvent.LOGIN, method="google")

    assert record.event == "login"
    assert record.data == {"method": "google", "userId": "u-1"}
    assert "T" in record.timestamp
    assert queue.events() == [record]


def test_track_accepts_event_names(kv_store):
    tracker = AnalyticsTracker(AnalyticsQueue(kv_store))

    assert tracker.track("filter_applied").event == "filter_applied"
    with pytest.raises(ValueError):
        tracker.track("unknown_event")


@pytest.mark.parametrize(
    ("call", "event", "data"),
    [
        (lambda t: t.track_property_view("p-1", "Villa"), "property_view",
         {"propertyId": "p-1", "propertyTitle": "Villa"}),
        (lambda t: t.track_inquiry_sent("p-1", "s-1"), "inquiry_sent",
         {"propertyId": "p-1", "sellerId": "s-1"}),
        (lambda t: t.track_property_saved("p-1"), "property_saved", {"propertyId": "p-1"}),
        (lambda t: t.track_property_unsaved("p-1"), "property_unsaved", {"propertyId": "p-1"}),
        (lambda t: t.track_property_reported("p-1", "spam"), "property_reported",
         {"propertyId": "p-1", "reason": "spam"}),
        (lambda t: t.track_search("villa", {"city": "Pune"}), "search_performed",
         {"searchQuery": "villa", "filters": {"city": "Pune"}}),
        (lambda t: t.track_seller_contacted("s-1", "p-1"), "seller_contacted",
         {"sellerId": "s-1", "propertyId": "p-1"}),
        (lambda t: t.track_property_shared("p-1", "whatsapp"), "property_shared",
         {"propertyId": "p-1", "platform": "whatsapp"}),
    ],
)
def test_tracking_helpers(kv_store, call, event, data):
    tracker = AnalyticsTracker(AnalyticsQueue(kv_store), user_id=None)

    record = call(tracker)

    assert record.event == event
    assert record.data == {**data, "userId": None}


def test_debug_mode_logs_events(kv_store, caplog):
    tracker = AnalyticsTracker(AnalyticsQueue(kv_store), user_id="u-9", debug=True)

    with caplog.at_level(logging.INFO, logger="safeplots.analytics.tracker"):
        tracker.track_property_saved("p-1")

    assert "[Analytics] property_saved" in caplog.text


def test_tracker_from_settings_uses_debug_flag(kv_store, caplog):
    queue = AnalyticsQueue(kv_store)
    tracker = AnalyticsTracker.from_settings(queue, AnalyticsSettings(debug=True), user_id="u-3")

    with caplog.at_level(logging.INFO, logger="safeplots.analytics.tracker"):
        record = tracker.track_property_view("p-7")

    assert "[Analytics] property_view" in caplog.text
    assert record.data["userId"] == "u-3"
    assert len(queue) == 1


def test_tracker_from_settings_quiet_by_default(kv_store, caplog, monkeypatch):
    monkeypatch.delenv("SAFEPLOTS_ANALYTICS_DEBUG", raising=False)
    tracker = AnalyticsTracker.from_settings(AnalyticsQueue(kv_store))

    with caplog.at_level(logging.INFO, logger="safeplots.analytics.tracker"):
        tracker.track_property_saved("p-1")

    assert "[Analytics]" not in caplog.text
