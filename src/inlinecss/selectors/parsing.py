"""Selector parsing shared by the specificity calculator and eligibility filter."""

from __future__ import annotations

from collections.abc import Iterator

import tinycss2
from cssselect2.parser import CombinedSelector, CompoundSelector, Selector, SelectorError, parse

from inlinecss.errors import UnresolvableSelector


def parse_selector(selector: str) -> Selector:
    """Parse a single selector string with cssselect2.

    Raises :class:`UnresolvableSelector` for empty input, syntax errors or a
    selector list where a single selector was expected.
    """
    if not selector or not selector.strip():
        raise UnresolvableSelector("Empty selector", selector=selector)
    try:
        parsed = list(parse(selector))
    except SelectorError as exc:
        raise UnresolvableSelector(
            f"Cannot parse selector {selector!r}: {exc.args[-1]}",
            selector=selector,
            cause=exc,
        ) from exc
    if len(parsed) != 1:
        raise UnresolvableSelector(
            f"Expected a single selector, got {len(parsed)} in {selector!r}",
            selector=selector,
        )
    return parsed[0]


def compound_segments(selector: Selector) -> Iterator[CompoundSelector]:
    """Yield the compound segments of *selector*, rightmost first."""
    tree = selector.parsed_tree
    while isinstance(tree, CombinedSelector):
        yield tree.right
        tree = tree.left
    yield tree


def has_double_colon(selector: str) -> bool:
    """Return True if *selector* contains a ``::`` pseudo-element marker.

    Checked on raw tokens so that pseudo-elements the parser does not know
    (vendor-prefixed ones, for instance) are still recognised.
    """
    previous = None
    for token in tinycss2.parse_component_value_list(selector, skip_comments=True):
        if token == ":" and previous == ":":
            return True
        previous = token
    return False
