"""Specificity model: the comparable weight of a style contribution."""

from __future__ import annotations

from typing import NamedTuple


class Specificity(NamedTuple):
    """CSS specificity, compared lexicographically.

    Attributes:
        inline: 1 for a style attribute, 0 for anything selector-derived.
        ids: Number of ID selectors.
        classes: Number of class, attribute and pseudo-class selectors.
        types: Number of type selectors and pseudo-elements.
    """

    inline: int = 0
    ids: int = 0
    classes: int = 0
    types: int = 0

    def __str__(self) -> str:
        return ",".join(str(part) for part in self)


# Specificity of a style attribute; it outranks every selector.
INLINE_SPECIFICITY = Specificity(inline=1)
