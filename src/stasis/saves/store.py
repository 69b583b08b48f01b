"""Persistence stores for the saved snapshot.

A store is a flat string key-value namespace. The state system only ever uses one
key (settings.SAVE_KEY), but the store itself attaches no meaning to keys.

Two backends are provided:
- JsonFileStore: keeps every key in one JSON file, written atomically on flush()
- MemoryStore: process-local dictionary, used by tests and headless tools

Backend failures raise StoreUnavailableError. Callers decide how to recover.

Example usage:
    store = JsonFileStore(Path("saves/prefs.json"))
    store.set("SavedGameData", blob)
    store.flush()

    if store.has("SavedGameData"):
        blob = store.get("SavedGameData")
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from stasis.exceptions import StoreUnavailableError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class BaseStore(ABC):
    """Abstract key-value store."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key. Durable only after flush()."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Write pending changes to durable storage."""
        ...

    def has(self, key: str) -> bool:
        """Check if a value is stored under key."""
        return self.get(key) is not None


class MemoryStore(BaseStore):
    """In-memory store.

    Attributes:
        data: The stored key-value pairs.
        flush_count: Number of flush() calls, for inspection in tests.
    """

    def __init__(self, data: dict[str, str] | None = None) -> None:
        """Initialize the store, optionally pre-populated."""
        self.data: dict[str, str] = dict(data or {})
        self.flush_count = 0

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        """Store value under key."""
        self.data[key] = value

    def delete(self, key: str) -> None:
        """Remove key if present."""
        self.data.pop(key, None)

    def flush(self) -> None:
        """Count the flush; memory needs no write."""
        self.flush_count += 1


class JsonFileStore(BaseStore):
    """Store backed by a single JSON object file.

    The file is read lazily on first access. Writes stay in memory until flush(),
    which replaces the file atomically through a temporary sibling file. A file that
    is not a JSON string mapping is logged, treated as empty and replaced on the
    next flush().

    Attributes:
        path: Location of the JSON file.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: JSON file to use. Parent directories are created on flush().
        """
        self.path = path
        self._data: dict[str, str] | None = None
        self._dirty = False

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent.

        Raises:
            StoreUnavailableError: If the backing file cannot be read.
        """
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """Store value under key until the next flush().

        Raises:
            StoreUnavailableError: If the backing file cannot be read.
        """
        self._load()[key] = value
        self._dirty = True

    def delete(self, key: str) -> None:
        """Remove key until the next flush().

        Raises:
            StoreUnavailableError: If the backing file cannot be read.
        """
        data = self._load()
        if key in data:
            del data[key]
            self._dirty = True

    def flush(self) -> None:
        """Write the current contents to disk if anything changed.

        Raises:
            StoreUnavailableError: If the file cannot be written.
        """
        if not self._dirty or self._data is None:
            return

        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
            tmp_path.replace(self.path)
        except OSError as e:
            msg = f"Could not write store file {self.path}: {e}"
            raise StoreUnavailableError(msg) from e

        self._dirty = False
        logger.debug("Flushed %d keys to %s", len(self._data), self.path)

    def _load(self) -> dict[str, str]:
        if self._data is not None:
            return self._data

        if not self.path.exists():
            self._data = {}
            return self._data

        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            msg = f"Could not read store file {self.path}: {e}"
            raise StoreUnavailableError(msg) from e
        except ValueError as e:
            logger.warning("Discarding unparsable store file %s: %s", self.path, e)
            return self._reset()

        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            logger.warning("Discarding store file %s: not a string mapping", self.path)
            return self._reset()

        self._data = data
        logger.debug("Loaded %d keys from %s", len(data), self.path)
        return self._data

    def _reset(self) -> dict[str, str]:
        # Dirty so the next flush() replaces the unreadable file.
        self._data = {}
        self._dirty = True
        return self._data
