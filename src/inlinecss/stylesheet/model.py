"""Stylesheet model: StyleRule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from inlinecss.model.declaration import RawDeclaration


@dataclass(frozen=True)
class StyleRule:
    """A single rule pairing its selectors with property declarations."""

    selectors: tuple[str, ...]  # raw selector strings, in source order
    declarations: tuple[RawDeclaration, ...]


@dataclass(frozen=True)
class Stylesheet:
    """A collection of style rules parsed from CSS source, in source order."""

    rules: tuple[StyleRule, ...]

    def __len__(self) -> int:
        return len(self.rules)
