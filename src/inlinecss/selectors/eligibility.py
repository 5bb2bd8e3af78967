"""Selector eligibility: may a selector's declarations be inlined at all?

A selector is rejected when any of its compound segments carries a
pseudo-element (there is no element to put the style on) or a pseudo-class
from the ignored set (interaction or history state a static attribute cannot
express).
"""

from __future__ import annotations

import logging

from cssselect2.parser import FunctionalPseudoClassSelector, PseudoClassSelector

from inlinecss.config import DEFAULT_IGNORED_PSEUDO_CLASSES
from inlinecss.selectors.parsing import compound_segments, has_double_colon, parse_selector

logger = logging.getLogger(__name__)

_PSEUDO_CLASS_TYPES = (PseudoClassSelector, FunctionalPseudoClassSelector)


def ineligibility_reason(
    selector: str,
    ignored_pseudo_classes: frozenset[str] = DEFAULT_IGNORED_PSEUDO_CLASSES,
) -> str | None:
    """Return why *selector* cannot be inlined, or None if it can."""
    if has_double_colon(selector):
        return "pseudo-element"
    parsed = parse_selector(selector)
    if parsed.pseudo_element is not None:
        return f"pseudo-element ::{parsed.pseudo_element}"
    for compound in compound_segments(parsed):
        for simple in compound.simple_selectors:
            if isinstance(simple, _PSEUDO_CLASS_TYPES) and simple.name in ignored_pseudo_classes:
                return f"pseudo-class :{simple.name}"
    return None


def is_eligible(
    selector: str,
    ignored_pseudo_classes: frozenset[str] = DEFAULT_IGNORED_PSEUDO_CLASSES,
) -> bool:
    """Return True if declarations matched by *selector* may be inlined."""
    reason = ineligibility_reason(selector, ignored_pseudo_classes)
    if reason is not None:
        logger.debug("Ignoring selector %r: %s", selector, reason)
        return False
    return True
