"""Capture adapter backed by the hosted transcription model.

Used where no live recognizer exists: recorded clips are submitted one at a
time and each transcription arrives as a single final result.
"""

import logging

from voicememo.capture.base import (
    CaptureSource,
    ErrorCallback,
    RecognitionEvent,
    RecognitionResult,
    ResultCallback,
)
from voicememo.core.exceptions import CaptureError, VoiceMemoError
from voicememo.services.transcription import TranscriptionService

logger = logging.getLogger(__name__)


class TranscriptionCaptureSource(CaptureSource):
    def __init__(self, service: TranscriptionService):
        self.service = service
        self._on_result: ResultCallback | None = None
        self._on_error: ErrorCallback | None = None
        self._results: list[RecognitionResult] = []

    @property
    def is_active(self) -> bool:
        return self._on_result is not None

    def start(self, on_result: ResultCallback, on_error: ErrorCallback) -> None:
        self._on_result = on_result
        self._on_error = on_error
        self._results = []

    def stop(self) -> None:
        self._on_result = None
        self._on_error = None

    async def submit(
        self,
        audio: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> None:
        """Transcribe one clip and deliver it as a final result.

        Raises:
            CaptureError: If the source is not started
        """
        if not self.is_active:
            raise CaptureError(details={"reason": "capture source is not started"})

        try:
            text = await self.service.transcribe(audio, filename=filename, content_type=content_type)
        except VoiceMemoError as exc:
            # stop() may have run while the request was in flight
            if self._on_error is not None:
                self._on_error(exc)
            return

        if self._on_result is None:
            logger.debug("Dropping transcription that finished after stop")
            return
        if not text.strip():
            return

        self._results.append(RecognitionResult(transcript=text.strip(), is_final=True))
        self._on_result(
            RecognitionEvent(results=list(self._results), result_index=len(self._results) - 1)
        )
