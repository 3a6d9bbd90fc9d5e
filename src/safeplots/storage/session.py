"""Signed-in user session persisted in a KeyValueStore."""

from __future__ import annotations

import json
import logging
from typing import Any

from safeplots.storage.protocol import KeyValueStore

logger = logging.getLogger(__name__)

SESSION_KEY = "safeplots_user"


class SessionStore:
    """Reads and writes the current user record.

    The record is a JSON object; its ``token`` field is sent as the bearer
    token by ApiClient. Corrupt records read as signed out.
    """

    def __init__(self, store: KeyValueStore, key: str = SESSION_KEY) -> None:
        self._store = store
        self._key = key

    def current_user(self) -> dict[str, Any] | None:
        raw = self._store.get(self._key)
        if raw is None:
            return None
        try:
            user = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable session record")
            return None
        return user if isinstance(user, dict) else None

    def token(self) -> str | None:
        user = self.current_user()
        if user is None:
            return None
        return user.get("token") or None

    def is_authenticated(self) -> bool:
        return self._store.get(self._key) is not None

    def save(self, user: dict[str, Any]) -> None:
        self._store.set(self._key, json.dumps(user))

    def clear(self) -> None:
        self._store.remove(self._key)
