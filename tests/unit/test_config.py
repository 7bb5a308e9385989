import logging

from voicememo.config import Settings
from voicememo.core.logger import setup_logging


def test_defaults(monkeypatch):
    for name in ("PORT", "OPENAI_API_KEY", "MIN_SENTENCE_LENGTH", "AUTOSAVE_KEY"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.openai_api_key is None
    assert settings.transcription_model == "whisper-1"
    assert settings.min_sentence_length == 20
    assert settings.important_keywords == ["importante", "fondamentale"]
    assert settings.autosave_key == "autoSavedTranscript"
    assert settings.autosave_interval_seconds == 30.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
    monkeypatch.setenv("ACTION_KEYWORDS", '["dobbiamo", "occorre"]')

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.openai_api_key == "sk-from-env"
    assert settings.action_keywords == ["dobbiamo", "occorre"]


def test_setup_logging_does_not_duplicate_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    before_level = root.level
    try:
        setup_logging("DEBUG")
        setup_logging("INFO", json_format=True)
        ours = [h for h in root.handlers if getattr(h, "_voicememo", False)]
        assert len(ours) == 1
        assert root.level == logging.INFO
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(before_level)
