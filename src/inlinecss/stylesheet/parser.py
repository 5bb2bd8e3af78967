"""Stylesheet and style-attribute parsing on top of tinycss2.

Syntax example:
    p, .note { color: red; margin: 0 !important; }
    #footer a { text-decoration: none; }
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import tinycss2

from inlinecss.errors import MalformedDeclaration, MalformedStylesheet
from inlinecss.model.declaration import RawDeclaration
from inlinecss.stylesheet.model import StyleRule, Stylesheet

__all__ = ["parse_stylesheet", "parse_declarations", "parse_style_attribute"]

logger = logging.getLogger(__name__)


def _serialize_selector(tokens: Iterable) -> str:
    """Serialize selector tokens without the ``/**/`` separators tinycss2 adds.

    ``tinycss2.serialize`` puts an empty comment between token pairs such as
    ``*`` ``=`` so they re-tokenize the same way; selectors are handed to
    soupsieve and cssselect2 as text, which read ``*=`` as one operator.
    """
    parts: list[str] = []
    for token in tokens:
        if token.type == "[] block":
            parts.append(f"[{_serialize_selector(token.content)}]")
        elif token.type == "() block":
            parts.append(f"({_serialize_selector(token.content)})")
        elif token.type == "function":
            name = tinycss2.serialize_identifier(token.name)
            parts.append(f"{name}({_serialize_selector(token.arguments)})")
        else:
            parts.append(token.serialize())
    return "".join(parts)


def _split_selectors(prelude: list) -> tuple[str, ...]:
    """Split a rule prelude on top-level commas into raw selector strings."""
    groups: list[list] = [[]]
    for token in prelude:
        if token == ",":
            groups.append([])
        else:
            groups[-1].append(token)
    return tuple(_serialize_selector(group).strip() for group in groups)


def parse_declarations(content: str | Iterable, source: str = "") -> tuple[RawDeclaration, ...]:
    """Parse a declaration block (rule body or style attribute).

    Raises :class:`MalformedDeclaration` on the first entry that is not a
    ``property: value`` pair.
    """
    if not source and isinstance(content, str):
        source = content
    declarations: list[RawDeclaration] = []
    for item in tinycss2.parse_declaration_list(
        content, skip_comments=True, skip_whitespace=True
    ):
        if item.type == "declaration":
            value = tinycss2.serialize(item.value).strip()
            if item.important:
                value = f"{value} !important"
            declarations.append(RawDeclaration(property=item.lower_name, value=value))
        elif item.type == "error":
            raise MalformedDeclaration(
                f"Malformed declaration at line {item.source_line}: {item.message}",
                source=source,
                line=item.source_line,
                column=item.source_column,
            )
        else:
            raise MalformedDeclaration(
                f"Unexpected {item.type} in declaration block at line {item.source_line}",
                source=source,
                line=item.source_line,
                column=item.source_column,
            )
    return tuple(declarations)


def parse_style_attribute(style: str) -> tuple[RawDeclaration, ...]:
    """Parse the text of an HTML ``style`` attribute."""
    return parse_declarations(style, source=style)


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse a CSS string into a Stylesheet object.

    Top-level qualified rules are kept in source order. At-rules are skipped,
    so rules nested in ``@media`` never inline.
    """
    rules: list[StyleRule] = []
    for node in tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True):
        if node.type == "qualified-rule":
            body = tinycss2.serialize(node.content)
            rules.append(
                StyleRule(
                    selectors=_split_selectors(node.prelude),
                    declarations=parse_declarations(node.content, source=body),
                )
            )
        elif node.type == "at-rule":
            logger.debug("Skipping @%s rule at line %d", node.lower_at_keyword, node.source_line)
        elif node.type == "error":
            raise MalformedStylesheet(
                f"Invalid stylesheet at line {node.source_line}: {node.message}",
                line=node.source_line,
                column=node.source_column,
            )
    return Stylesheet(rules=tuple(rules))
