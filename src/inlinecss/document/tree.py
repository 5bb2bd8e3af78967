"""HTML document handling on top of BeautifulSoup."""

from __future__ import annotations

from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

__all__ = ["parse_html", "iter_elements", "serialize"]


class SourceOrderFormatter(HTMLFormatter):
    """HTML formatter that writes attributes in source order.

    Characters with a named HTML entity are written back as that entity, so
    ``&nbsp;`` survives the parse/serialize round trip.
    """

    def __init__(self) -> None:
        super().__init__(entity_substitution=EntitySubstitution.substitute_html)

    def attributes(self, tag: Tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


_FORMATTER = SourceOrderFormatter()


def parse_html(html: str, parser: str = "html.parser") -> BeautifulSoup:
    """Parse *html* into a mutable element tree.

    Whitespace-only text between tags is collapsed to a single newline or
    space by BeautifulSoup.
    """
    return BeautifulSoup(html, parser)


def iter_elements(tree: BeautifulSoup) -> Iterator[Tag]:
    """Yield every element of *tree* in document order."""
    yield from tree.find_all(True)


def serialize(tree: BeautifulSoup) -> str:
    """Render *tree* back to HTML text."""
    return tree.decode(formatter=_FORMATTER)
