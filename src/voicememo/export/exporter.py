"""Plain-text export of transcripts and summaries.

The primary exporter asks the user where to save (the save-dialog
analogue). When that fails for any reason, including the user cancelling,
the fallback writes an auto-named file instead. Callers cannot tell which
path was taken.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Callable

from voicememo.config import Settings
from voicememo.core.exceptions import ExportError

logger = logging.getLogger(__name__)


class ExportKind(str, Enum):
    TRANSCRIPT = "transcript"
    SUMMARY = "summary"


def export_filename(kind: ExportKind | str, now: datetime | None = None) -> str:
    """Build ``{kind}-{YYYY-MM-DDTHH-MM-SS}.txt`` from a UTC timestamp."""
    kind = ExportKind(kind)
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    stamp = moment.strftime("%Y-%m-%dT%H:%M:%S").replace(":", "-")
    return f"{kind.value}-{stamp}.txt"


def _write_text(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ExportError(details={"path": str(path), "error": str(exc)}) from exc


class FileExporter(ABC):
    @abstractmethod
    def export(self, content: str, kind: ExportKind | str) -> Path:
        """Write ``content`` and return the file's path.

        Raises:
            ExportError: If the file could not be written
        """


class ChosenPathExporter(FileExporter):
    """Save to a destination picked by the user.

    ``choose_path`` receives the suggested file name and returns the chosen
    path, or None when the user cancels.
    """

    def __init__(self, choose_path: Callable[[str], str | Path | None]):
        self.choose_path = choose_path

    def export(self, content: str, kind: ExportKind | str) -> Path:
        suggested = export_filename(kind)
        chosen = self.choose_path(suggested)
        if chosen is None:
            raise ExportError(details={"reason": "cancelled", "suggested_name": suggested})
        path = Path(chosen)
        _write_text(path, content)
        return path


class DownloadExporter(FileExporter):
    """Write an auto-named file into a downloads directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def export(self, content: str, kind: ExportKind | str) -> Path:
        path = self.directory / export_filename(kind)
        _write_text(path, content)
        return path


class FallbackExporter(FileExporter):
    def __init__(self, primary: FileExporter, fallback: FileExporter):
        self.primary = primary
        self.fallback = fallback

    def export(self, content: str, kind: ExportKind | str) -> Path:
        try:
            path = self.primary.export(content, kind)
        except Exception as exc:
            # Save dialogs fail in arbitrary ways (abort, unsupported API)
            logger.error(
                "Primary export failed, using fallback",
                extra={
                    "error_code": getattr(exc, "error_code", "EXPORT_001"),
                    "error_type": type(exc).__name__,
                },
            )
            path = self.fallback.export(content, kind)
        logger.info("Exported %s", ExportKind(kind).value, extra={"path": str(path)})
        return path


def build_exporter(
    settings: Settings,
    choose_path: Callable[[str], str | Path | None] | None = None,
) -> FileExporter:
    """Exporter for the configured export directory.

    Without a ``choose_path`` callback there is no save dialog, so files
    always go straight to ``settings.export_dir``.
    """
    downloads = DownloadExporter(settings.export_dir)
    if choose_path is None:
        return downloads
    return FallbackExporter(ChosenPathExporter(choose_path), downloads)
