"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from safeplots.notifications import RecordingNotifier
from safeplots.storage import InMemoryKeyValueStore, SessionStore


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays and returns immediately."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Fresh RecordingNotifier."""
    return RecordingNotifier()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def session(kv_store: InMemoryKeyValueStore) -> SessionStore:
    """Session signed in as a test user."""
    store = SessionStore(kv_store)
    store.save({"id": "u-1", "email": "buyer@example.com", "token": "secret-token"})
    return store
