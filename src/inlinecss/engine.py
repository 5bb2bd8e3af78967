"""Inlining engine: the single pass from (HTML, CSS) to inlined HTML.

1. Parse the document and the stylesheet.
2. Seed every element with its own ``style`` attribute, then walk the
   stylesheet once, rule by rule and selector by selector, pushing a
   contribution onto every element each eligible selector matches.
3. Resolve each element's contributions and write the winning declarations
   back as its ``style`` attribute.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from inlinecss.cascade import StyleAccumulator, resolve, write
from inlinecss.config import InlinerConfig
from inlinecss.document import iter_elements, match, parse_html, serialize
from inlinecss.model.contribution import INLINE_ORIGIN
from inlinecss.model.declaration import Declaration
from inlinecss.selectors import calculate, is_eligible
from inlinecss.stylesheet import Stylesheet, parse_stylesheet

logger = logging.getLogger(__name__)


class Inliner:
    """Inline a stylesheet into HTML documents.

    The instance holds only configuration; every :meth:`inline` call owns its
    own accumulator, so one instance can be reused.
    """

    def __init__(self, config: InlinerConfig | None = None) -> None:
        self.config = config or InlinerConfig()

    def inline(self, html: str, css: str) -> str:
        """Return *html* with *css* applied as inline ``style`` attributes."""
        tree = parse_html(html, self.config.html_parser)
        stylesheet = parse_stylesheet(css)
        accumulator = self.calculate_styles(tree, stylesheet)
        contributions = accumulator.contribution_count
        written = self.apply_styles(accumulator)
        logger.info(
            "Inlined %d rule(s): %d contribution(s), %d element(s) written",
            len(stylesheet),
            contributions,
            written,
        )
        return serialize(tree)

    def calculate_styles(self, tree: BeautifulSoup, stylesheet: Stylesheet) -> StyleAccumulator:
        """Collect every element's style contributions in cascade order."""
        accumulator = StyleAccumulator()
        for element in iter_elements(tree):
            accumulator.seed(element)

        origin_order = INLINE_ORIGIN
        for rule in stylesheet.rules:
            declarations = tuple(Declaration.from_raw(raw) for raw in rule.declarations)
            for selector in rule.selectors:
                if not is_eligible(selector, self.config.ignored_pseudo_classes):
                    continue
                origin_order += 1
                specificity = calculate(selector)
                elements = match(selector, tree)
                logger.debug(
                    "Selector %r (specificity %s) matched %d element(s)",
                    selector,
                    specificity,
                    len(elements),
                )
                for element in elements:
                    accumulator.append(element, declarations, specificity, origin_order)
        return accumulator

    @staticmethod
    def apply_styles(accumulator: StyleAccumulator) -> int:
        """Resolve and write every accumulated element; return how many were written."""
        written = 0
        for element, contributions in accumulator.drain():
            if write(element, resolve(contributions)):
                written += 1
        return written


def inline(html: str, css: str, config: InlinerConfig | None = None) -> str:
    """Take an HTML string and a CSS string and return the HTML with the CSS inlined."""
    return Inliner(config).inline(html, css)
