"""Capture source capability interface.

Speech recognition is a host-platform capability. Each platform provides an
adapter implementing ``CaptureSource``; the rest of the system only sees
recognition events and errors delivered through callbacks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True)
class RecognitionResult:
    transcript: str
    is_final: bool = True


@dataclass(frozen=True)
class RecognitionEvent:
    """One recognizer callback payload.

    ``results`` is the recognizer's running result list; ``result_index`` is
    the first entry that changed with this event. Entries before it were
    already delivered by earlier events.
    """

    results: list[RecognitionResult] = field(default_factory=list)
    result_index: int = 0


ResultCallback = Callable[[RecognitionEvent], None]
ErrorCallback = Callable[[Exception], None]


def final_text(event: RecognitionEvent) -> str:
    """Concatenate the newly final results, each followed by one space.

    Interim results are skipped; they will be delivered again once final.
    """
    return "".join(
        f"{result.transcript} "
        for result in event.results[event.result_index:]
        if result.is_final
    )


class CaptureSource(ABC):
    """A start/stop speech source that reports through callbacks."""

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """True between a successful ``start`` and ``stop``."""

    @abstractmethod
    def start(self, on_result: ResultCallback, on_error: ErrorCallback) -> None:
        """Begin capturing.

        Raises:
            CaptureError: If the platform capability is unavailable
        """

    @abstractmethod
    def stop(self) -> None:
        """Stop capturing; later audio produces no events."""
