import sys
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

sys.path.append(str(Path(__file__).parents[1] / "src"))

from voicememo.api.deps import get_transcription_service
from voicememo.core.exceptions import TranscriptionError
from voicememo.main import app
from voicememo.services.transcription import TranscriptionService


class FakeTranscriptionService(TranscriptionService):
    """Records calls and returns canned text instead of calling upstream."""

    def __init__(self, text: str = "Testo trascritto", fail: bool = False):
        super().__init__(api_key="sk-test", max_size_bytes=1024)
        self.text = text
        self.fail = fail
        self.calls: list[dict] = []

    async def transcribe(self, audio, filename=None, content_type=None):
        self._validate(audio)
        self.calls.append({"audio": audio, "filename": filename, "content_type": content_type})
        if self.fail:
            raise TranscriptionError(details={"error_type": "APIConnectionError"})
        return self.text


@pytest.fixture
def fake_transcriber() -> FakeTranscriptionService:
    return FakeTranscriptionService()


@pytest.fixture
async def client(fake_transcriber: FakeTranscriptionService):
    """Provide test client with the transcription service overridden."""
    app.dependency_overrides[get_transcription_service] = lambda: fake_transcriber

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


ITALIAN_MEMO = (
    "Questo è molto importante per il progetto. "
    "Dobbiamo finire entro venerdì prossimo. "
    "Va tutto bene oggi qui."
)


@pytest.fixture
def italian_memo() -> str:
    return ITALIAN_MEMO
