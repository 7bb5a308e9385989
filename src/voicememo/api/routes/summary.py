"""Summary generation and export endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from voicememo.api.deps import get_summary_service
from voicememo.export.exporter import export_filename
from voicememo.schemas.summary import (
    ExportRequest,
    KeyPointResponse,
    SummaryRequest,
    SummaryResponse,
)
from voicememo.services.summary import SummaryService

router = APIRouter(tags=["summary"])


@router.post("/summary", response_model=SummaryResponse)
async def generate_summary(
    body: SummaryRequest,
    service: SummaryService = Depends(get_summary_service),
) -> SummaryResponse:
    """Categorize the transcript and return the KeyPoints with the report."""
    result = service.generate(body.text)
    return SummaryResponse(
        key_points=[KeyPointResponse.model_validate(p) for p in result.key_points],
        summary=result.summary,
    )


@router.post("/export", response_class=PlainTextResponse)
async def export_text(body: ExportRequest) -> PlainTextResponse:
    """Return the content as a downloadable, auto-named text file."""
    filename = export_filename(body.kind)
    return PlainTextResponse(
        body.content,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
