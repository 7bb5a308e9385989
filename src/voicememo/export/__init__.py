"""Transcript and summary export."""

from .exporter import (
    ChosenPathExporter,
    DownloadExporter,
    ExportKind,
    FallbackExporter,
    FileExporter,
    build_exporter,
    export_filename,
)

__all__ = [
    "ChosenPathExporter",
    "DownloadExporter",
    "ExportKind",
    "FallbackExporter",
    "FileExporter",
    "build_exporter",
    "export_filename",
]
