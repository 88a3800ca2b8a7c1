"""Exceptions raised while importing a highlights export."""


class HighlightsError(Exception):
    """Base class for import failures reported to the user."""


class ParseError(HighlightsError):
    """The export could not be read as markup at all."""


class DocumentWriteError(HighlightsError):
    """The rendered note could not be written to the vault."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DestinationFolderInvalid(DocumentWriteError):
    """The configured destination folder does not exist."""


class DestinationFileExists(DocumentWriteError):
    """A note with the same title already exists in the destination folder."""


class ExportReadError(HighlightsError):
    """The export file could not be read."""
