from inlinecss.document.matcher import match
from inlinecss.document.tree import iter_elements, parse_html, serialize

__all__ = ["parse_html", "iter_elements", "serialize", "match"]
