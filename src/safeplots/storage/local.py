"""Local key-value storage implementations.

Usage:
    store = InMemoryKeyValueStore()
    store.set("safeplots_user", '{"id": "u1", "token": "abc"}')

    store = JsonFileKeyValueStore("state.json")
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore:
    """Dict-backed store for single-process use and testing."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._values)


class JsonFileKeyValueStore:
    """Store all keys in one JSON object on disk.

    Every write rewrites the file through a temporary file and
    ``os.replace``, so readers never see a partially written document.
    An unreadable or malformed file reads as empty.

    Args:
        path: File location. Parent directories are created on first write.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path).expanduser()
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed key-value file %s", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring non-object key-value file %s", self._path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _dump(self, values: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(values, fh, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            values = self._load()
            values[key] = value
            self._dump(values)

    def remove(self, key: str) -> None:
        with self._lock:
            values = self._load()
            if key in values:
                del values[key]
                self._dump(values)
