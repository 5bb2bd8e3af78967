"""Selector analysis: specificity and inlining eligibility."""

from inlinecss.selectors.eligibility import ineligibility_reason, is_eligible
from inlinecss.selectors.parsing import parse_selector
from inlinecss.selectors.specificity import calculate

__all__ = ["calculate", "is_eligible", "ineligibility_reason", "parse_selector"]
