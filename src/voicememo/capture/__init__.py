"""Speech capture: source interface, adapters and the recording toggle."""

from .base import CaptureSource, RecognitionEvent, RecognitionResult, final_text
from .controller import CaptureController
from .transcription import TranscriptionCaptureSource

__all__ = [
    "CaptureController",
    "CaptureSource",
    "RecognitionEvent",
    "RecognitionResult",
    "TranscriptionCaptureSource",
    "final_text",
]
