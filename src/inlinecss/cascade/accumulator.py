"""Style accumulator: per-element contribution buffers for one inlining pass."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from bs4 import Tag

from inlinecss.model.contribution import INLINE_ORIGIN, StyleContribution
from inlinecss.model.declaration import Declaration
from inlinecss.model.specificity import INLINE_SPECIFICITY, Specificity
from inlinecss.stylesheet.parser import parse_style_attribute


class StyleAccumulator:
    """Collects the style contributions of every element touched by a pass.

    Buffers are keyed by element identity (``bs4.Tag`` hashes by content, so
    two identical tags would otherwise share a buffer) and live only as long
    as the accumulator. :meth:`drain` hands each buffer out once.
    """

    def __init__(self) -> None:
        self._buffers: dict[int, tuple[Tag, list[StyleContribution]]] = {}

    def _buffer(self, element: Tag) -> list[StyleContribution]:
        key = id(element)
        if key not in self._buffers:
            self._buffers[key] = (element, [])
        return self._buffers[key][1]

    def seed(self, element: Tag) -> None:
        """Push the element's own ``style`` attribute, if it has one."""
        style = element.get("style")
        if not style or not style.strip():
            return
        declarations = tuple(Declaration.from_raw(raw) for raw in parse_style_attribute(style))
        self._buffer(element).append(
            StyleContribution(
                declarations=declarations,
                specificity=INLINE_SPECIFICITY,
                origin_order=INLINE_ORIGIN,
            )
        )

    def append(
        self,
        element: Tag,
        declarations: Sequence[Declaration],
        specificity: Specificity,
        origin_order: int,
    ) -> None:
        """Push a rule-derived contribution for *element*."""
        self._buffer(element).append(
            StyleContribution(
                declarations=tuple(declarations),
                specificity=specificity,
                origin_order=origin_order,
            )
        )

    def contributions(self, element: Tag) -> tuple[StyleContribution, ...]:
        entry = self._buffers.get(id(element))
        return tuple(entry[1]) if entry else ()

    def drain(self) -> Iterator[tuple[Tag, tuple[StyleContribution, ...]]]:
        """Yield each element with its contributions, emptying the accumulator."""
        while self._buffers:
            key = next(iter(self._buffers))
            element, contributions = self._buffers.pop(key)
            yield element, tuple(contributions)

    @property
    def contribution_count(self) -> int:
        return sum(len(contributions) for _, contributions in self._buffers.values())

    def __len__(self) -> int:
        return len(self._buffers)
