"""Transcription proxy endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile, status

from voicememo.api.deps import get_transcription_service
from voicememo.core.exceptions import InvalidAudioError
from voicememo.schemas.transcription import ErrorResponse, TranscriptionResponse
from voicememo.services.transcription import TranscriptionService

router = APIRouter(tags=["transcription"])


@router.post(
    "/transcribe",
    response_model=TranscriptionResponse,
    status_code=status.HTTP_200_OK,
    summary="Transcribe an audio clip",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def transcribe(
    audio: Annotated[UploadFile | None, File(description="Audio payload")] = None,
    service: TranscriptionService = Depends(get_transcription_service),
) -> TranscriptionResponse:
    """Forward the uploaded audio to the hosted model and return its text.

    A missing ``audio`` part fails like any other transcription error.
    """
    if audio is None:
        raise InvalidAudioError("AUDIO_001", details={"reason": "missing audio field"})
    payload = await audio.read()
    text = await service.transcribe(
        payload,
        filename=audio.filename,
        content_type=audio.content_type,
    )
    return TranscriptionResponse(text=text)
