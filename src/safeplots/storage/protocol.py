"""Key-value storage protocol for swappable backends.

The session and the analytics queue persist small JSON documents by key,
the way a browser app uses localStorage. Backends:
- InMemoryKeyValueStore: process-local (default, tests)
- JsonFileKeyValueStore: one JSON file on disk

Usage:
    store = JsonFileKeyValueStore("~/.safeplots/state.json")
    session = SessionStore(store)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """String-keyed storage of string values."""

    def get(self, key: str) -> str | None:
        """Get value for key, None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Remove key. No-op if absent."""
        ...
