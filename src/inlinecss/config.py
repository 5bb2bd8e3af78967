from __future__ import annotations

from dataclasses import dataclass, replace

# Pseudo-classes that describe interaction or history state.
DEFAULT_IGNORED_PSEUDO_CLASSES = frozenset({
    "hover",
    "active",
    "focus",
    "visited",
    "link",
})


@dataclass(frozen=True)
class InlinerConfig:
    ignored_pseudo_classes: frozenset[str] = DEFAULT_IGNORED_PSEUDO_CLASSES
    html_parser: str = "html.parser"  # any BeautifulSoup tree builder name

    def with_ignored(self, *names: str) -> InlinerConfig:
        """Return a copy whose ignore set also contains *names*."""
        extra = frozenset(name.lower() for name in names)
        return replace(self, ignored_pseudo_classes=self.ignored_pseudo_classes | extra)
