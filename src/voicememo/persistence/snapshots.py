"""Key/value snapshot stores.

A snapshot store behaves like browser local storage: string keys map to
string values and each save overwrites the previous value for its key.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from voicememo.core.exceptions import SnapshotError

logger = logging.getLogger(__name__)


class SnapshotStore(ABC):
    @abstractmethod
    def load(self, key: str) -> str | None:
        """Return the stored value, or None when the key was never saved."""

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Overwrite the value stored under ``key``."""


class InMemorySnapshotStore(SnapshotStore):
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileSnapshotStore(SnapshotStore):
    """All keys live in one JSON object on disk.

    Writes go to a sibling temp file first and are then renamed over the
    target, so a crash mid-write leaves the previous snapshot intact.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise SnapshotError(details={"path": str(self.path), "error": str(exc)}) from exc
        if not isinstance(data, dict):
            raise SnapshotError(details={"path": str(self.path), "error": "not a JSON object"})
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def load(self, key: str) -> str | None:
        return self._read_all().get(key)

    def save(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except SnapshotError as exc:
            logger.warning(
                "Discarding unreadable snapshot file",
                extra={"error_code": exc.error_code, "details": exc.details},
            )
            data = {}
        data[key] = value
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as handle:
                json.dump(data, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise SnapshotError(details={"path": str(self.path), "error": str(exc)}) from exc
