"""Periodic transcript snapshotting.

The auto-saver runs as an asyncio task next to the capture callbacks. It
only reads the session's transcript cell; it never coordinates with the
capture or editing producers, so each snapshot is whatever the cell held
at that tick.
"""

import asyncio
import logging

from voicememo.config import Settings
from voicememo.core.exceptions import SnapshotError
from voicememo.persistence.snapshots import JsonFileSnapshotStore, SnapshotStore
from voicememo.session import MemoSession

logger = logging.getLogger(__name__)

DEFAULT_KEY = "autoSavedTranscript"
DEFAULT_INTERVAL_SECONDS = 30.0


class AutoSaver:
    """Save the session transcript under a fixed key every ``interval`` seconds.

    Usable as an async context manager::

        async with AutoSaver(session, store):
            ...
    """

    def __init__(
        self,
        session: MemoSession,
        store: SnapshotStore,
        key: str = DEFAULT_KEY,
        interval: float = DEFAULT_INTERVAL_SECONDS,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.session = session
        self.store = store
        self.key = key
        self.interval = interval
        self._task: asyncio.Task | None = None

    @classmethod
    def from_settings(cls, session: MemoSession, settings: Settings) -> "AutoSaver":
        """Auto-saver writing to the JSON snapshot file named in the settings."""
        return cls(
            session,
            JsonFileSnapshotStore(settings.snapshot_path),
            key=settings.autosave_key,
            interval=settings.autosave_interval_seconds,
        )

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def save_now(self) -> bool:
        """Persist the current transcript if it is non-empty.

        Returns:
            True when a snapshot was written. Store failures are logged and
            reported as False; they never propagate.
        """
        text = self.session.text
        if not text:
            return False
        try:
            self.store.save(self.key, text)
        except SnapshotError as exc:
            logger.error(
                "Transcript auto-save failed",
                extra={"error_code": exc.error_code, "details": exc.details},
            )
            return False
        logger.info("Transcript auto-saved", extra={"chars": len(text)})
        return True

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.save_now()
            except Exception:
                # A broken custom store must not end the loop
                logger.exception("Unexpected error during transcript auto-save")

    def start(self) -> None:
        """Schedule the save loop on the running event loop."""
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def __aenter__(self) -> "AutoSaver":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()


def restore_session(session: MemoSession, store: SnapshotStore, key: str = DEFAULT_KEY) -> bool:
    """Load a previously persisted transcript into a fresh session.

    Returns True when a snapshot was applied. An unreadable store is logged
    and treated as no snapshot.
    """
    try:
        snapshot = store.load(key)
    except SnapshotError as exc:
        logger.warning(
            "Could not read transcript snapshot",
            extra={"error_code": exc.error_code, "details": exc.details},
        )
        return False
    return session.restore(snapshot)
