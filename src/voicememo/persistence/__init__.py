"""Transcript snapshot persistence."""

from .autosave import AutoSaver, restore_session
from .snapshots import InMemorySnapshotStore, JsonFileSnapshotStore, SnapshotStore

__all__ = [
    "AutoSaver",
    "InMemorySnapshotStore",
    "JsonFileSnapshotStore",
    "SnapshotStore",
    "restore_session",
]
