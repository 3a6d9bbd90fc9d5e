"""Key-value persistence for session and analytics state."""

from safeplots.storage.local import InMemoryKeyValueStore, JsonFileKeyValueStore
from safeplots.storage.protocol import KeyValueStore
from safeplots.storage.session import SessionStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "SessionStore",
]
