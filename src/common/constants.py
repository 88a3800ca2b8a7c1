"""Shared constants for the kindle-highlights importer.

For environment-based configuration (destination folder, vault root, parser),
use the env module:
    from common.env import env
    folder = env.destination_folder()
"""

import re

# Marker classes Amazon's "Notes & Highlights" export puts on its elements
BOOK_TITLE_CLASS = "bookTitle"
AUTHORS_CLASS = "authors"
PUBLISHER_CLASS = "publisher"
NOTE_HEADING_CLASS = "noteHeading"
NOTE_TEXT_CLASS = "noteText"
SECTION_HEADING_CLASS = "sectionHeading"

# Characters that cannot appear in a vault file name
UNSAFE_FILENAME_CHARS = re.compile(r'[\\/*<>:|?"]')

# "Highlight(yellow) - Page 12 · Location 150" -> ("Page", "12")
LOCATION_PATTERN = re.compile(r"(Page|Location) (\d+)")

# Frontmatter values
ORIGIN = "Kindle"
HIGHLIGHTS_HEADING = "## Highlights"
DATE_FORMAT = "%Y-%m-%d"

DEFAULT_DESTINATION_FOLDER = "/"
DEFAULT_HTML_PARSER = "html.parser"
SUPPORTED_HTML_PARSERS: tuple[str, ...] = ("html.parser", "lxml")
