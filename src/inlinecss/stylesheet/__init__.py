from inlinecss.stylesheet.parser import parse_declarations, parse_style_attribute, parse_stylesheet
from inlinecss.stylesheet.model import Stylesheet, StyleRule

__all__ = [
    "parse_stylesheet",
    "parse_declarations",
    "parse_style_attribute",
    "Stylesheet",
    "StyleRule",
]
