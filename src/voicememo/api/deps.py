"""FastAPI dependency injection for services."""

from functools import lru_cache

from voicememo.config import get_settings
from voicememo.services.summary import SummaryService
from voicememo.services.transcription import TranscriptionService


@lru_cache
def get_transcription_service() -> TranscriptionService:
    """
    Get the shared transcription service.

    Returns:
        TranscriptionService configured from settings
    """
    return TranscriptionService.from_settings(get_settings())


@lru_cache
def get_summary_service() -> SummaryService:
    """
    Get the shared summary service.

    Returns:
        SummaryService using the configured threshold and keywords
    """
    return SummaryService.from_settings(get_settings())
