"""Data models for a Kindle highlights import."""

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    """Structural role of an element in the export, from its marker class."""

    HEADING = "noteHeading"  # "Highlight(yellow) - Page 12 · Location 150"
    TEXT = "noteText"  # The highlighted passage or the note body
    SECTION_HEADING = "sectionHeading"  # Chapter or part title
    OTHER = "other"


@dataclass(frozen=True)
class MarkerNode:
    """One element of the flattened sibling sequence the grouping pass scans."""

    kind: NodeKind
    text: str
    span_count: int  # Direct <span> children, e.g. the highlight colour label
    parent: int  # Index of the containing element, lookahead stays within it
    position: int = 0  # Document order among note headings, -1 for other elements


@dataclass(frozen=True)
class BookMetadata:
    """Sanitized book fields from the export header."""

    title: str = ""
    author: str = ""
    publisher: str = ""


@dataclass(frozen=True)
class HighlightRecord:
    """A single highlight with its location and optional standalone note."""

    location_label: str  # "Page", "Location" or "" when the heading is malformed
    location_number: str
    text: str
    note: str | None = None


@dataclass
class ImportResult:
    """Finished note, ready to hand to the document writer."""

    document: str
    highlight_count: int
    path: str  # "{folder}/{title}.md", relative to the vault root
    metadata: BookMetadata = field(default_factory=BookMetadata)
    highlights: list[HighlightRecord] = field(default_factory=list)
