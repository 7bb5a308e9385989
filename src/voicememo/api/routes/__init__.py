"""API routes."""

from fastapi import APIRouter

from voicememo.api.routes import summary, transcribe

router = APIRouter(prefix="/api")

router.include_router(transcribe.router)
router.include_router(summary.router)
