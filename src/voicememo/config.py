"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Transcription proxy (the API key is consumed only by the proxy endpoint)
    openai_api_key: str | None = None
    transcription_model: str = "whisper-1"
    transcription_language: str | None = None
    audio_max_size_mb: int = 25

    # Categorization
    min_sentence_length: int = 20
    important_keywords: list[str] = ["importante", "fondamentale"]
    action_keywords: list[str] = ["dobbiamo", "bisogna"]
    decision_keywords: list[str] = ["deciso", "stabilito"]

    # Persistence
    autosave_key: str = "autoSavedTranscript"
    autosave_interval_seconds: float = 30.0
    snapshot_path: str = ".voicememo/snapshots.json"

    # Export
    export_dir: str = "exports"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
