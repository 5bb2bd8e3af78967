"""Cascade: accumulate contributions, resolve them, write the result."""

from inlinecss.cascade.accumulator import StyleAccumulator
from inlinecss.cascade.resolver import rank, resolve
from inlinecss.cascade.writer import escape_value, serialize_style, write

__all__ = [
    "StyleAccumulator",
    "rank",
    "resolve",
    "escape_value",
    "serialize_style",
    "write",
]
