"""Render highlights and book metadata into a Markdown note."""

import re
from datetime import date

from common.constants import DATE_FORMAT, HIGHLIGHTS_HEADING, ORIGIN

from .models import BookMetadata, HighlightRecord

_WHITESPACE = re.compile(r"\s+")


def tag_value(value: str) -> str:
    """Collapse whitespace runs to underscores: 'Ursula K. Le Guin' -> 'Ursula_K._Le_Guin'."""
    return _WHITESPACE.sub("_", value)


def render_highlight(record: HighlightRecord) -> str:
    """
    Render one highlight block.

    Format:
        {text}
        - {label} {number}

        >[!{note}]          (only when a standalone note is attached)

        ---

    """
    block = f"{record.text}\n- {record.location_label} {record.location_number}\n\n"
    if record.note is not None:
        block += f">[!{record.note}]\n\n"
    block += "---\n\n"
    return block


def render_body(records: list[HighlightRecord]) -> str:
    """Concatenate highlight blocks in source order."""
    return "".join(render_highlight(record) for record in records)


def render_frontmatter(metadata: BookMetadata, highlight_count: int, import_date: date) -> str:
    """Build the frontmatter block, closing '---' line included."""
    lines = [
        "---",
        f'título: "{metadata.title}"',
        f'autor: "{metadata.author}"',
        f'editorial: "{metadata.publisher}"',
        f"resaltados: {highlight_count}",
        f"origen: {ORIGIN}",
        "tags:",
        f"  - {ORIGIN}",
        f"  - {tag_value(metadata.author)}",
        f"  - {tag_value(metadata.title)}",
        f'fechaImportación: "{import_date.strftime(DATE_FORMAT)}"',
        "---",
    ]
    return "\n".join(lines) + "\n"


def render_document(
    metadata: BookMetadata,
    records: list[HighlightRecord],
    highlight_count: int,
    import_date: date,
) -> str:
    """Frontmatter, then the highlights heading, then every highlight block."""
    frontmatter = render_frontmatter(metadata, highlight_count, import_date)
    return f"{frontmatter}\n\n{HIGHLIGHTS_HEADING}\n\n{render_body(records)}"


def destination_path(folder: str, title: str) -> str:
    """
    Build the vault path of the note.

    Args:
        folder: Configured destination folder, '/' for the vault root
        title: Sanitized book title

    Returns:
        '{folder}/{title}.md' without a doubled separator
    """
    return f"{folder.rstrip('/')}/{title}.md"
