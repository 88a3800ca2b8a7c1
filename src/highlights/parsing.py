"""Parse a Kindle export into a tree and flatten its marker elements."""

from bs4 import BeautifulSoup, FeatureNotFound, Tag
from bs4.builder import ParserRejectedMarkup

from common.constants import (
    DEFAULT_HTML_PARSER,
    NOTE_HEADING_CLASS,
    NOTE_TEXT_CLASS,
    SECTION_HEADING_CLASS,
)
from common.logger import get_logger

from .errors import ParseError
from .models import MarkerNode, NodeKind

logger = get_logger(__name__)

_KIND_BY_CLASS = {
    NOTE_HEADING_CLASS: NodeKind.HEADING,
    NOTE_TEXT_CLASS: NodeKind.TEXT,
    SECTION_HEADING_CLASS: NodeKind.SECTION_HEADING,
}


def parse_document(raw_html: str | bytes, parser: str | None = None) -> BeautifulSoup:
    """
    Parse an export into a BeautifulSoup tree.

    Unbalanced or unclosed tags are repaired by the tree builder; only input
    the builder refuses outright is an error.

    Args:
        raw_html: Export contents, bytes are decoded as UTF-8
        parser: BeautifulSoup feature name (default: html.parser)

    Returns:
        Parsed document tree

    Raises:
        ParseError: If the input cannot be decoded or parsed
    """
    if isinstance(raw_html, bytes):
        try:
            raw_html = raw_html.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"Export is not valid UTF-8: {e}") from e

    features = parser or DEFAULT_HTML_PARSER
    try:
        return BeautifulSoup(raw_html, features)
    except FeatureNotFound as e:
        raise ParseError(f"HTML parser '{features}' is not available") from e
    except ParserRejectedMarkup as e:
        raise ParseError(f"Export could not be parsed as HTML: {e}") from e


def find_marker(soup: BeautifulSoup, marker: str) -> Tag | None:
    """Return the first element carrying a marker class, or None."""
    return soup.select_one(f".{marker}")


def find_markers(soup: BeautifulSoup, marker: str) -> list[Tag]:
    """Return every element carrying a marker class, in document order."""
    return soup.select(f".{marker}")


def node_kind(tag: Tag) -> NodeKind:
    """Classify an element by the first marker class it carries."""
    classes = tag.get("class") or []
    for cls in classes:
        kind = _KIND_BY_CLASS.get(cls)
        if kind is not None:
            return kind
    return NodeKind.OTHER


def flatten_siblings(soup: BeautifulSoup) -> list[MarkerNode]:
    """
    Flatten the containers of all note headings into one ordered node list.

    Every element child of a container that holds at least one note heading
    becomes a MarkerNode. Containers are visited in the order their first
    heading appears, and each node records which container it came from.
    Headings also record their document position: a nested container can
    hold headings that sit between two headings of its parent.

    Args:
        soup: Parsed export

    Returns:
        Nodes grouped by container, headings tagged with their position
    """
    headings = find_markers(soup, NOTE_HEADING_CLASS)
    heading_positions = {id(heading): position for position, heading in enumerate(headings)}

    containers: list[Tag] = []
    for heading in headings:
        parent = heading.parent
        if parent is None:
            continue
        if not any(parent is seen for seen in containers):
            containers.append(parent)

    nodes: list[MarkerNode] = []
    for index, container in enumerate(containers):
        for child in container.children:
            if not isinstance(child, Tag):
                continue
            nodes.append(
                MarkerNode(
                    kind=node_kind(child),
                    text=child.get_text(),
                    span_count=len(child.find_all("span", recursive=False)),
                    parent=index,
                    position=heading_positions.get(id(child), -1),
                )
            )

    logger.debug(f"Flattened {len(nodes)} element(s) from {len(containers)} container(s)")
    return nodes
