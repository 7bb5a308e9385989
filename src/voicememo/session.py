"""Memo session state.

A session owns one transcript cell plus the editing and recording flags and
the last generated summary. The UI layer (or a test) creates and owns the
session explicitly; nothing here is module-global.

Live capture appends to the cell, manual editing overwrites it, and the
auto-saver reads it. All of them run on one event loop without locking, so
the cell has last-write-wins semantics: a capture append that lands after
an edit is applied on top of the edited text, and an edit that lands after
an append replaces it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from voicememo.categorization.rules import KeyPoint
from voicememo.services.summary import SummaryService

logger = logging.getLogger(__name__)

WRITER_CAPTURE = "capture"
WRITER_EDIT = "edit"
WRITER_RESTORE = "restore"


class TranscriptCell:
    """Single shared transcript value.

    Every write bumps ``revision`` and records which producer wrote last.
    """

    def __init__(self, value: str = ""):
        self._value = value
        self.revision = 0
        self.last_writer: str | None = None

    @property
    def value(self) -> str:
        return self._value

    def set(self, text: str, writer: str) -> None:
        self._value = text
        self._record(writer)

    def append(self, text: str, writer: str) -> None:
        self._value += text
        self._record(writer)

    def _record(self, writer: str) -> None:
        self.revision += 1
        self.last_writer = writer
        logger.debug(
            "Transcript updated",
            extra={"writer": writer, "revision": self.revision, "chars": len(self._value)},
        )

    def __bool__(self) -> bool:
        return bool(self._value)


@dataclass
class MemoSession:
    transcript: TranscriptCell = field(default_factory=TranscriptCell)
    is_editing: bool = False
    is_recording: bool = False
    key_points: list[KeyPoint] = field(default_factory=list)
    summary: str = ""

    @property
    def text(self) -> str:
        return self.transcript.value

    def append_capture(self, text: str) -> None:
        if text:
            self.transcript.append(text, WRITER_CAPTURE)

    def edit(self, text: str) -> None:
        self.transcript.set(text, WRITER_EDIT)

    def toggle_editing(self) -> bool:
        self.is_editing = not self.is_editing
        return self.is_editing

    def restore(self, snapshot: str | None) -> bool:
        """Accept a previously persisted transcript as the initial text.

        Returns True when the snapshot was applied. Missing or empty
        snapshots leave the session untouched.
        """
        if not snapshot:
            return False
        self.transcript.set(snapshot, WRITER_RESTORE)
        logger.info("Transcript restored from snapshot", extra={"chars": len(snapshot)})
        return True

    def generate_summary(self, service: SummaryService | None = None) -> str:
        """Recompute KeyPoints and the summary from the current transcript.

        The previous summary is discarded, never diffed.
        """
        result = (service or SummaryService()).generate(self.text)
        self.key_points = result.key_points
        self.summary = result.summary
        return self.summary
