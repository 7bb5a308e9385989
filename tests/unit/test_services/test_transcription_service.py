"""Unit tests for TranscriptionService."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import OpenAIError

from voicememo.config import Settings
from voicememo.core.exceptions import InvalidAudioError, TranscriptionError
from voicememo.services.transcription import TranscriptionService


@pytest.fixture
def mock_client():
    """Mimic AsyncOpenAI's client.audio.transcriptions.create shape."""
    client = MagicMock()
    client.audio.transcriptions.create = AsyncMock(
        return_value=SimpleNamespace(text="Ciao dal modello")
    )
    return client


async def test_transcribe_returns_text(mock_client):
    service = TranscriptionService(model="whisper-1", client=mock_client)

    text = await service.transcribe(b"RIFF....", filename="memo.wav", content_type="audio/wav")

    assert text == "Ciao dal modello"
    mock_client.audio.transcriptions.create.assert_awaited_once_with(
        file=("memo.wav", b"RIFF....", "audio/wav"),
        model="whisper-1",
    )


async def test_transcribe_passes_language_when_configured(mock_client):
    service = TranscriptionService(language="it", client=mock_client)

    await service.transcribe(b"audio")

    kwargs = mock_client.audio.transcriptions.create.await_args.kwargs
    assert kwargs["language"] == "it"
    assert kwargs["file"][0] == "audio.webm"


async def test_upstream_error_becomes_transcription_error(mock_client):
    mock_client.audio.transcriptions.create.side_effect = OpenAIError("boom")
    service = TranscriptionService(client=mock_client)

    with pytest.raises(TranscriptionError) as exc_info:
        await service.transcribe(b"audio")

    assert exc_info.value.error_code == "TRANSCRIBE_001"
    assert exc_info.value.http_status == 500


async def test_missing_api_key_raises_transcription_error():
    service = TranscriptionService(api_key=None)

    with pytest.raises(TranscriptionError) as exc_info:
        await service.transcribe(b"audio")

    assert "OPENAI_API_KEY" in exc_info.value.details["reason"]


async def test_empty_audio_rejected_before_upstream(mock_client):
    service = TranscriptionService(client=mock_client)

    with pytest.raises(InvalidAudioError) as exc_info:
        await service.transcribe(b"")

    assert exc_info.value.error_code == "AUDIO_001"
    assert exc_info.value.http_status == 500
    mock_client.audio.transcriptions.create.assert_not_awaited()


async def test_oversized_audio_rejected(mock_client):
    service = TranscriptionService(max_size_bytes=4, client=mock_client)

    with pytest.raises(InvalidAudioError) as exc_info:
        await service.transcribe(b"12345")

    assert exc_info.value.error_code == "AUDIO_002"


def test_from_settings():
    settings = Settings(
        openai_api_key="sk-test",
        transcription_model="whisper-large",
        transcription_language="it",
        audio_max_size_mb=2,
    )

    service = TranscriptionService.from_settings(settings)

    assert service.api_key == "sk-test"
    assert service.model == "whisper-large"
    assert service.language == "it"
    assert service.max_size_bytes == 2 * 1024 * 1024
