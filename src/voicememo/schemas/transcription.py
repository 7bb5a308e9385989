"""Pydantic schemas for the transcription proxy."""

from pydantic import BaseModel, Field


class TranscriptionResponse(BaseModel):
    """Successful transcription."""

    text: str = Field(description="Transcribed text")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(description="Human-readable error message")
