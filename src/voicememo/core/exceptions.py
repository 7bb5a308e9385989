"""Custom exception classes for the voice memo service.

Each exception maps to an error code defined in errors.py.
"""

from typing import Any


class VoiceMemoError(Exception):
    """Base exception for all voice memo errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "TRANSCRIBE_001")
        details: Additional context about the error (for logging only)
        http_status: HTTP status code to return (default: 500)
    """

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int = 500,
    ):
        """Initialize the exception.

        Args:
            error_code: Error code from errors.py
            details: Additional error context (not shown to users)
            http_status: HTTP status code (default: 500)
        """
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status
        super().__init__(error_code)


class TranscriptionError(VoiceMemoError):
    """Raised when the upstream transcription call fails.

    Covers a missing API credential as well as any SDK or network error.
    Maps to TRANSCRIBE_001; no partial result is ever returned.
    """

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("TRANSCRIBE_001", details=details, http_status=500)


class InvalidAudioError(VoiceMemoError):
    """Raised when an audio payload is rejected before reaching upstream.

    - Missing or empty payload (AUDIO_001)
    - Payload over the configured size limit (AUDIO_002)

    Callers see the same 500 and message as an upstream failure; the
    code only distinguishes the cause in the logs.
    """

    def __init__(self, error_code: str, details: dict[str, Any] | None = None):
        super().__init__(error_code, details=details, http_status=500)


class CaptureError(VoiceMemoError):
    """Raised or reported when a capture source fails."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("CAPTURE_001", details=details)


class ExportError(VoiceMemoError):
    """Raised when an exporter cannot write its file.

    Includes the user cancelling the destination picker.
    """

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("EXPORT_001", details=details)


class SnapshotError(VoiceMemoError):
    """Raised when a snapshot store cannot be read or written."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("SNAPSHOT_001", details=details)
