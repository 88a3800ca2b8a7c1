"""Builders for Kindle "Notes & Highlights" export markup used across tests."""


def highlight(text: str, location: str = "Page 12", color: str = "yellow") -> str:
    return (
        f'<div class="noteHeading">Highlight (<span class="highlight_{color}">{color}</span>)'
        f" - {location}</div>\n"
        f'<div class="noteText">{text}</div>\n'
    )


def note(text: str, location: str = "Page 12") -> str:
    return f'<div class="noteHeading">Note - {location}</div>\n<div class="noteText">{text}</div>\n'


def section(name: str) -> str:
    return f'<div class="sectionHeading">{name}</div>\n'


def export(
    body: str,
    title: str | None = "Nineteen Eighty-Four",
    authors: str | None = "George Orwell",
    publisher: str | None = "Penguin Books",
) -> str:
    """Wrap highlight markup in the export's header and container."""
    header = ""
    if title is not None:
        header += f'<div class="bookTitle">{title}</div>\n'
    if authors is not None:
        header += f'<div class="authors">{authors}</div>\n'
    header += '<div class="citation"></div>\n'
    if publisher is not None:
        header += f'<div class="publisher">{publisher}</div>\n'

    return (
        "<!DOCTYPE html>\n"
        '<html><head><meta charset="UTF-8"><title>Notebook</title></head>\n'
        "<body>\n"
        '<div class="bodyContainer">\n'
        '<div class="notebookFor">Notebook Export</div>\n'
        f"{header}"
        "<hr />\n"
        f"{body}"
        "</div>\n"
        "</body></html>\n"
    )
