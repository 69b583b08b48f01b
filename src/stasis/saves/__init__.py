"""Snapshot model, codec and persistence stores."""

from stasis.saves import codec
from stasis.saves.snapshot import Snapshot
from stasis.saves.store import BaseStore, JsonFileStore, MemoryStore

__all__ = ["BaseStore", "JsonFileStore", "MemoryStore", "Snapshot", "codec"]
