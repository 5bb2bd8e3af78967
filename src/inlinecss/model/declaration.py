"""Declaration model: a single property/value pair with its importance."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Trailing "!important" marker, with optional whitespace around the bang.
IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class RawDeclaration:
    """A declaration as produced by the stylesheet parser.

    ``value`` may still carry a trailing ``!important`` marker.
    """

    property: str
    value: str


@dataclass(frozen=True)
class Declaration:
    """A declaration whose ``!important`` marker has been extracted.

    Use :meth:`from_raw` to build one; ``value`` never contains the marker.
    """

    property: str
    value: str
    important: bool = False

    @classmethod
    def from_raw(cls, raw: RawDeclaration) -> Declaration:
        value, important = split_important(raw.value)
        return cls(property=raw.property, value=value, important=important)


def split_important(value: str) -> tuple[str, bool]:
    """Strip a trailing ``!important`` from *value*.

    Returns the stripped value and whether the marker was present.
    """
    stripped, count = IMPORTANT_RE.subn("", value)
    return stripped.strip(), count > 0
