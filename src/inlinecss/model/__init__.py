"""Inlinecss model layer -- public type re-exports."""

from inlinecss.model.contribution import INLINE_ORIGIN, ResolvedStyle, StyleContribution
from inlinecss.model.declaration import Declaration, RawDeclaration, split_important
from inlinecss.model.specificity import INLINE_SPECIFICITY, Specificity

__all__ = [
    # declaration
    "RawDeclaration",
    "Declaration",
    "split_important",
    # specificity
    "Specificity",
    "INLINE_SPECIFICITY",
    # contribution
    "StyleContribution",
    "ResolvedStyle",
    "INLINE_ORIGIN",
]
