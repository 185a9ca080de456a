"""Synchronous key-value backends used by :class:`~aervix_club.core.storage.ClubStorage`.

A backend behaves like browser local storage: string keys map to string
values, every call completes immediately and there is a single writer.
"""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

log = logging.getLogger("aervix.backend")


class KeyValueBackend(ABC):
    """Abstract string-to-string store."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored at ``key`` or ``None``."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` at ``key``, replacing any previous value."""

    @abstractmethod
    def keys(self) -> Iterator[str]:
        """Iterate over every key currently present."""


class MemoryBackend(KeyValueBackend):
    """Process-local backend, mainly useful for tests."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def keys(self) -> Iterator[str]:
        return iter(list(self._items))


class JSONFileBackend(KeyValueBackend):
    """Persist all keys to a single JSON file.

    The file holds one object mapping each key to its string value. Values
    are kept in memory and the whole file is rewritten atomically on every
    :meth:`set_item`, which keeps the implementation simple while providing
    durability across process restarts.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialise the backend using the JSON file at ``path``."""
        self.path = Path(path)
        self._items: dict[str, str] = {}
        if self.path.exists():
            self._load()
        else:
            self._save()

    # ------------------------------------------------------------------
    # Internal helpers
    def _load(self) -> None:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            log.warning("Could not read %s; starting with an empty store", self.path)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring %s: top-level value is not an object", self.path)
            return
        self._items = {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._items, f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)

    # ------------------------------------------------------------------
    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._save()

    def keys(self) -> Iterator[str]:
        return iter(list(self._items))
