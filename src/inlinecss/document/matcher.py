"""Selector matching against a parsed document."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from inlinecss.errors import UnresolvableSelector


def match(selector: str, tree: BeautifulSoup) -> list[Tag]:
    """Return the elements of *tree* matched by *selector*, in document order."""
    try:
        return list(tree.select(selector))
    except SelectorSyntaxError as exc:
        raise UnresolvableSelector(
            f"Cannot match selector {selector!r}: {exc}",
            selector=selector,
            cause=exc,
        ) from exc
