"""Specificity calculator for selector strings."""

from __future__ import annotations

from inlinecss.model.specificity import Specificity
from inlinecss.selectors.parsing import parse_selector


def calculate(selector: str) -> Specificity:
    """Return the specificity of *selector*.

    IDs, class/attribute/pseudo-class selectors and type selectors/pseudo-elements
    are counted across the whole selector. The ``inline`` component is always 0;
    style attributes use :data:`~inlinecss.model.INLINE_SPECIFICITY` instead.
    """
    ids, classes, types = parse_selector(selector).specificity
    return Specificity(inline=0, ids=ids, classes=classes, types=types)
