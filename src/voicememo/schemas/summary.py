"""Pydantic schemas for summary generation and export."""

from pydantic import BaseModel, ConfigDict, Field

from voicememo.categorization.rules import Category
from voicememo.export.exporter import ExportKind


class SummaryRequest(BaseModel):
    """Transcript snapshot to summarize."""

    text: str = Field("", description="Current transcript text")


class KeyPointResponse(BaseModel):
    text: str
    category: Category

    model_config = ConfigDict(from_attributes=True)


class SummaryResponse(BaseModel):
    """Categorized sentences and the grouped report built from them."""

    key_points: list[KeyPointResponse]
    summary: str = Field(description="Formatted report, four numbered sections")


class ExportRequest(BaseModel):
    """Text to download as a file."""

    content: str
    kind: ExportKind = Field(description="Names the file: transcript or summary")
