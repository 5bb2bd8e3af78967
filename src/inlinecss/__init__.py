"""Inlinecss -- move stylesheet rules into HTML style attributes."""

__version__ = "0.1.0"

from inlinecss.config import InlinerConfig  # noqa: E402
from inlinecss.engine import Inliner, inline  # noqa: E402
from inlinecss.errors import (  # noqa: E402
    InlineError,
    MalformedDeclaration,
    MalformedStylesheet,
    UnresolvableSelector,
)

__all__ = [
    "__version__",
    "inline",
    "Inliner",
    "InlinerConfig",
    "InlineError",
    "MalformedDeclaration",
    "MalformedStylesheet",
    "UnresolvableSelector",
]
