"""Voice memo transcription and keyword summaries."""

__version__ = "0.1.0"
