"""HTML parsing and element selection shared by both extractors."""

from __future__ import annotations

from collections.abc import Iterator

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import PreformattedString

from dailymenu.errors import EncodingError, NotFound, ParseError

Document = BeautifulSoup


def parse(content: bytes) -> Document:
    """Decode *content* as UTF-8 and parse it into a document tree."""
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(f"page is not valid UTF-8: {exc}") from exc
    try:
        return BeautifulSoup(text, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"markup rejected by parser: {exc}") from exc


def select(node: Tag, pattern: str) -> Iterator[Tag]:
    """Lazily yield descendants of *node* matching the CSS *pattern*.

    Nodes come in document order.  Call again to restart.
    """
    return node.css.iselect(pattern)


def texts(node: Tag) -> Iterator[str]:
    """Yield the text runs below *node* in document order.

    Comments, doctypes, CDATA sections and other declarations are
    skipped.  The first run is normally the element's own text.
    """
    for child in node.descendants:
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            yield str(child)


def first_text(node: Tag) -> str | None:
    """Return the first text run of *node*, or ``None`` if it has none."""
    return next(texts(node), None)


def select_one(node: Tag, pattern: str, what: str) -> Tag:
    """Return the first match of *pattern* or raise ``NotFound(what)``."""
    found = next(select(node, pattern), None)
    if found is None:
        raise NotFound(what, pattern)
    return found


def select_text(node: Tag, pattern: str, what: str) -> str:
    """Return the trimmed first text run of the first *pattern* match.

    Raises:
        NotFound: ``what`` when nothing matches, ``"<what> text"`` when
            the match has no text at all.
    """
    element = select_one(node, pattern, what)
    text = first_text(element)
    if text is None:
        raise NotFound(f"{what} text", pattern)
    return text.strip()
