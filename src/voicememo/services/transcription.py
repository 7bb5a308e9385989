"""Transcription proxy service.

Forwards an audio payload to OpenAI's hosted Whisper model and returns the
transcribed text. There is no retry and no partial result: any failure
becomes a single TranscriptionError.
"""

import logging

from openai import AsyncOpenAI, OpenAIError

from voicememo.config import Settings
from voicememo.core.exceptions import InvalidAudioError, TranscriptionError

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "audio.webm"


class TranscriptionService:
    """Pass-through client for the hosted transcription model.

    The OpenAI client is created on first use, so the service can be built
    (and the app started) without a credential; only transcription needs it.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "whisper-1",
        language: str | None = None,
        max_size_bytes: int | None = None,
        client: AsyncOpenAI | None = None,
    ):
        """Initialize the service.

        Args:
            api_key: Upstream API credential (OPENAI_API_KEY)
            model: Transcription model name
            language: Optional ISO-639-1 hint passed upstream
            max_size_bytes: Reject larger payloads before calling upstream
            client: Preconfigured client (tests, custom base URLs)
        """
        self.api_key = api_key
        self.model = model
        self.language = language
        self.max_size_bytes = max_size_bytes
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "TranscriptionService":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.transcription_model,
            language=settings.transcription_language,
            max_size_bytes=settings.audio_max_size_mb * 1024 * 1024,
        )

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise TranscriptionError(details={"reason": "OPENAI_API_KEY is not configured"})
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    def _validate(self, audio: bytes) -> None:
        if not audio:
            raise InvalidAudioError("AUDIO_001")
        if self.max_size_bytes is not None and len(audio) > self.max_size_bytes:
            raise InvalidAudioError(
                "AUDIO_002",
                details={"size_bytes": len(audio), "max_size_bytes": self.max_size_bytes},
            )

    async def transcribe(
        self,
        audio: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> str:
        """Transcribe one audio payload.

        Args:
            audio: Raw audio bytes (any format the upstream model accepts)
            filename: Original file name; its extension tells upstream the format
            content_type: MIME type of the payload

        Returns:
            Transcribed text

        Raises:
            InvalidAudioError: If the payload is empty or too large
            TranscriptionError: If the credential is missing or upstream fails
        """
        self._validate(audio)
        client = self._get_client()

        kwargs = {}
        if self.language:
            kwargs["language"] = self.language

        upload = (filename or DEFAULT_FILENAME, audio, content_type or "application/octet-stream")
        try:
            transcription = await client.audio.transcriptions.create(
                file=upload,
                model=self.model,
                **kwargs,
            )
        except OpenAIError as exc:
            logger.error(
                "Upstream transcription failed",
                extra={"error_code": "TRANSCRIBE_001", "error_type": type(exc).__name__},
            )
            raise TranscriptionError(details={"error_type": type(exc).__name__}) from exc

        text = transcription.text or ""
        logger.info("Transcription completed", extra={"chars": len(text), "size_bytes": len(audio)})
        return text
