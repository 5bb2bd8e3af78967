"""Attribute writer: serialize a resolved style onto an element."""

from __future__ import annotations

from bs4 import Tag

from inlinecss.model.contribution import ResolvedStyle


def escape_value(value: str) -> str:
    """Make *value* safe inside a double-quoted attribute."""
    return value.replace('"', "'")


def serialize_style(resolved: ResolvedStyle) -> str:
    """Serialize declarations as ``property:value;`` pairs."""
    return "".join(f"{d.property}:{escape_value(d.value)};" for d in resolved)


def write(element: Tag, resolved: ResolvedStyle) -> bool:
    """Replace the element's ``style`` attribute with *resolved*.

    An empty style leaves the element untouched. Returns whether the
    attribute was written.
    """
    if not resolved:
        return False
    element["style"] = serialize_style(resolved)
    return True
