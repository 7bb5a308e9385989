"""Start/stop wiring between a capture source and a memo session."""

import logging

from voicememo.capture.base import CaptureSource, RecognitionEvent, final_text
from voicememo.core.exceptions import CaptureError
from voicememo.session import MemoSession

logger = logging.getLogger(__name__)


class CaptureController:
    """Binary recording toggle for one session.

    Final recognition text is appended to the session transcript. A source
    error is logged and stops capture; whatever was already transcribed
    stays in the session.
    """

    def __init__(self, session: MemoSession, source: CaptureSource):
        self.session = session
        self.source = source

    @property
    def is_recording(self) -> bool:
        return self.session.is_recording

    def start(self) -> bool:
        """Start capture; returns whether the session is now recording."""
        if self.session.is_recording:
            return True
        try:
            self.source.start(self._on_result, self._on_error)
        except CaptureError as exc:
            logger.error(
                "Could not start speech capture",
                extra={"error_code": exc.error_code, "details": exc.details},
            )
            return False
        self.session.is_recording = True
        logger.info("Speech capture started")
        return True

    def stop(self) -> None:
        if not self.session.is_recording:
            return
        self.source.stop()
        self.session.is_recording = False
        logger.info("Speech capture stopped")

    def toggle(self) -> bool:
        if self.session.is_recording:
            self.stop()
        else:
            self.start()
        return self.session.is_recording

    def _on_result(self, event: RecognitionEvent) -> None:
        text = final_text(event)
        if text:
            self.session.append_capture(text)

    def _on_error(self, exc: Exception) -> None:
        logger.error(
            "Speech capture error",
            extra={"error_code": "CAPTURE_001", "error_type": type(exc).__name__},
        )
        self.stop()
