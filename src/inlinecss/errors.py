"""Error hierarchy for CSS inlining.

Every error is fatal for the whole ``inline()`` call: a partially inlined
document is never returned.
"""

from __future__ import annotations


class InlineError(Exception):
    """Base error for all inlinecss errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class MalformedDeclaration(InlineError):
    """A declaration block that cannot be tokenized into property/value pairs."""

    def __init__(
        self,
        message: str,
        *,
        source: str = "",
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.source = source
        self.line = line
        self.column = column


class UnresolvableSelector(InlineError):
    """A selector that cannot be classified or matched."""

    def __init__(
        self, message: str, *, selector: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.selector = selector


class MalformedStylesheet(InlineError):
    """A top-level stylesheet construct that is not a rule."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
