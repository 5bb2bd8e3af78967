"""Cascade resolver: pick the winning declaration for every property.

Each declaration is tagged with one composite rank::

    (important, inline, ids, classes, types, origin_order)

Entries are stable-sorted ascending by that rank, so the cascade winner for
a property is the last entry carrying it. Declarations that repeat a
property inside one contribution share a rank and keep their source order.
"""

from __future__ import annotations

from collections.abc import Iterable
from operator import itemgetter

from inlinecss.model.contribution import ResolvedStyle, StyleContribution
from inlinecss.model.declaration import Declaration

Rank = tuple[int, int, int, int, int, int]


def rank(declaration: Declaration, contribution: StyleContribution) -> Rank:
    """Return the cascade sort key of *declaration* within *contribution*."""
    return (int(declaration.important), *contribution.specificity, contribution.origin_order)


def resolve(contributions: Iterable[StyleContribution]) -> ResolvedStyle:
    """Resolve *contributions* into one declaration per property.

    Properties appear in the order they are first seen in rank order; the
    value is that of the highest-ranked entry. The ``important`` flag is not
    carried into the result.
    """
    entries = [
        (rank(declaration, contribution), declaration)
        for contribution in contributions
        for declaration in contribution.declarations
    ]
    entries.sort(key=itemgetter(0))

    winners: dict[str, str] = {}
    for _, declaration in entries:
        winners[declaration.property] = declaration.value
    return tuple(Declaration(property=prop, value=value) for prop, value in winners.items())
