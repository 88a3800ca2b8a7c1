"""
Extract book metadata and highlights from a Kindle "Notes & Highlights" export.

The export is a flat run of sibling elements:

    <div class="sectionHeading">Chapter 1</div>
    <div class="noteHeading">Highlight(<span>yellow</span>) - Page 12 · Location 150</div>
    <div class="noteText">It was a bright cold day in April.</div>
    <div class="noteHeading">Note - Page 12 · Location 151</div>
    <div class="noteText">Opening line.</div>

A highlight heading carries exactly one <span> (its colour). A note heading
carries none, and its text is attached to the highlight right before it.
"""

from datetime import date

from bs4 import BeautifulSoup
from rich.markup import escape

from common.constants import (
    AUTHORS_CLASS,
    BOOK_TITLE_CLASS,
    LOCATION_PATTERN,
    PUBLISHER_CLASS,
    UNSAFE_FILENAME_CHARS,
)
from common.logger import get_logger, warning

from .models import BookMetadata, HighlightRecord, ImportResult, MarkerNode, NodeKind
from .parsing import find_marker, flatten_siblings, parse_document
from .rendering import destination_path, render_document

logger = get_logger(__name__)


def sanitize_field(value: str) -> str:
    """Strip characters that are unsafe in file names, then surrounding whitespace."""
    return UNSAFE_FILENAME_CHARS.sub("", value).strip()


def extract_metadata(soup: BeautifulSoup) -> BookMetadata:
    """
    Read title, authors and publisher from the export header.

    A missing element yields an empty field.
    """
    fields = {}
    for name, marker in (
        ("title", BOOK_TITLE_CLASS),
        ("author", AUTHORS_CLASS),
        ("publisher", PUBLISHER_CLASS),
    ):
        element = find_marker(soup, marker)
        if element is None:
            logger.debug(f"No .{marker} element in export")
            fields[name] = ""
        else:
            fields[name] = sanitize_field(element.get_text())

    return BookMetadata(**fields)


def parse_location(heading_text: str) -> tuple[str, str]:
    """
    Find the location reference in a heading.

    e.g., 'Highlight(yellow) - Page 12 · Location 150' -> ('Page', '12')
    e.g., 'Highlight(yellow) - Location 150' -> ('Location', '150')

    Returns:
        tuple[str, str]: (label, number), both empty when nothing matches
    """
    match = LOCATION_PATTERN.search(heading_text)
    if match is None:
        return ("", "")
    return (match.group(1), match.group(2))


def _node_at(nodes: list[MarkerNode], index: int, parent: int) -> MarkerNode | None:
    """Return nodes[index] if it exists and shares the given container."""
    if index >= len(nodes):
        return None
    node = nodes[index]
    if node.parent != parent:
        return None
    return node


def _standalone_note(nodes: list[MarkerNode], index: int) -> str | None:
    """Return the note text following the highlight heading at nodes[index], if any."""
    parent = nodes[index].parent

    note_heading = _node_at(nodes, index + 2, parent)
    if note_heading is None:
        return None
    if note_heading.span_count != 0 or note_heading.kind == NodeKind.SECTION_HEADING:
        return None

    note_text = _node_at(nodes, index + 3, parent)
    if note_text is None or note_text.kind != NodeKind.TEXT:
        return None
    return note_text.text.strip()


def group_highlights(nodes: list[MarkerNode]) -> tuple[list[HighlightRecord], int]:
    """
    Group heading/text pairs into highlight records.

    Args:
        nodes: Flattened export elements from flatten_siblings()

    Returns:
        tuple: (records in document order, number of headings accepted)
    """
    positioned: list[tuple[int, HighlightRecord]] = []
    highlight_count = 0

    for index, node in enumerate(nodes):
        if node.kind != NodeKind.HEADING:
            continue

        # Note headings and unsupported annotation kinds have no single colour span
        if node.span_count != 1:
            logger.debug(
                f"Skipping heading with {node.span_count} inline span(s): {node.text.strip()!r}"
            )
            continue

        label, number = parse_location(node.text)
        if not label:
            logger.debug(f"No page or location in heading: {node.text.strip()!r}")

        text_node = _node_at(nodes, index + 1, node.parent)
        text = ""
        if text_node is not None and text_node.kind == NodeKind.TEXT:
            text = text_node.text.strip()

        record = HighlightRecord(
            location_label=label,
            location_number=number,
            text=text,
            note=_standalone_note(nodes, index),
        )
        positioned.append((node.position, record))
        highlight_count += 1

    # Nodes are grouped by container, headings of nested containers come later
    positioned.sort(key=lambda item: item[0])
    return [record for _, record in positioned], highlight_count


def extract(
    raw_html: str | bytes,
    destination_folder: str,
    current_date: date,
    parser: str | None = None,
) -> ImportResult:
    """
    Turn an export into a finished note.

    Args:
        raw_html: Export contents
        destination_folder: Vault folder the note will be written to
        current_date: Import date written to the frontmatter
        parser: BeautifulSoup feature name (default: html.parser)

    Returns:
        ImportResult with the rendered document and its destination path

    Raises:
        ParseError: If the export cannot be parsed at all
    """
    soup = parse_document(raw_html, parser=parser)

    metadata = extract_metadata(soup)
    records, highlight_count = group_highlights(flatten_siblings(soup))

    unlocated = sum(1 for record in records if not record.location_label)
    if unlocated:
        warning(f"{unlocated} highlight(s) without a page or location")

    logger.info(
        f"Extracted [bold]{highlight_count}[/bold] highlight(s) from "
        f'"{escape(metadata.title) or "untitled"}"'
    )

    return ImportResult(
        document=render_document(metadata, records, highlight_count, current_date),
        highlight_count=highlight_count,
        path=destination_path(destination_folder, metadata.title),
        metadata=metadata,
        highlights=records,
    )
