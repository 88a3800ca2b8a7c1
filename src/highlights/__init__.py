"""Convert Kindle Notes & Highlights exports into Markdown notes."""

from .errors import (
    DestinationFileExists,
    DestinationFolderInvalid,
    DocumentWriteError,
    ExportReadError,
    HighlightsError,
    ParseError,
)
from .extraction import extract
from .models import BookMetadata, HighlightRecord, ImportResult

__all__ = [
    "BookMetadata",
    "DestinationFileExists",
    "DestinationFolderInvalid",
    "DocumentWriteError",
    "ExportReadError",
    "HighlightRecord",
    "HighlightsError",
    "ImportResult",
    "ParseError",
    "extract",
]
