"""Style contributions and the resolved style they cascade into."""

from __future__ import annotations

from dataclasses import dataclass

from inlinecss.model.declaration import Declaration
from inlinecss.model.specificity import Specificity

# Origin order reserved for an element's own style attribute.
INLINE_ORIGIN = 0


@dataclass(frozen=True)
class StyleContribution:
    """The declarations one source (style attribute or rule selector) gives an element.

    Attributes:
        declarations: Declarations in source order.
        specificity: Weight of the source.
        origin_order: Position of the source in discovery order; the style
            attribute is 0 and stylesheet selectors count up from 1.
    """

    declarations: tuple[Declaration, ...]
    specificity: Specificity
    origin_order: int


# The winning declaration for each property, in output order.
ResolvedStyle = tuple[Declaration, ...]
