"""Relation operations for temporal entities.

This module provides each qualitative temporal relation as a function
of two operands and an explicit comparison granularity. The functions
delegate to the left operand's TemporalRelations implementation, so
they accept instants as well as any other entity implementing the same
interface.

Instant semantics at granularity g (``a(g)`` is a's granule count at g):
    - before: a(g) < b(g)
    - after: a(g) > b(g)
    - equals: a(g) == b(g)
    - meets: a(g) + 1 == b(g) or a(g) == b(g)
    - met_by: meets(b, a)
    - adjacent: meets(a, b) or met_by(a, b)
    - overlaps, overlapped_by, contains, during, starts, started_by,
      finishes, finished_by: always False

Supported Operations:
    - The fourteen relations in tempora.core.relation.RELATION_NAMES
    - evaluate: Look up a relation by name and apply it
"""

from __future__ import annotations

from typing import Callable

from tempora.core.relation import TemporalRelations
from tempora.units.granularity import Granularity

Relation = Callable[[TemporalRelations, TemporalRelations, Granularity | int], bool]


def before(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    """Test if left precedes right at ``granularity``.

    Examples:
        >>> from tempora.core.instant import Instant
        >>> before(Instant(1, Granularity.DAYS), Instant(2, Granularity.DAYS), Granularity.DAYS)
        True
    """
    return left.before(right, granularity)


def after(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    """Test if left follows right at ``granularity``."""
    return left.after(right, granularity)


def equals(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    """Test if left and right coincide at ``granularity``.

    Examples:
        >>> from tempora.core.instant import Instant
        >>> equals(Instant(12, Granularity.MONTHS), Instant(1, Granularity.YEARS), Granularity.YEARS)
        True
    """
    return left.equals(right, granularity)


def meets(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    """Test if left meets right at ``granularity``.

    For instants this holds when right is the granule immediately after
    left, and also when both are the same granule.
    """
    return left.meets(right, granularity)


def met_by(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    """Test if right meets left at ``granularity``."""
    return left.met_by(right, granularity)


def adjacent(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    """Test if left meets or is met by right at ``granularity``."""
    return left.adjacent(right, granularity)


def overlaps(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    return left.overlaps(right, granularity)


def overlapped_by(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    return left.overlapped_by(right, granularity)


def contains(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    return left.contains(right, granularity)


def during(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    return left.during(right, granularity)


def starts(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    return left.starts(right, granularity)


def started_by(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    return left.started_by(right, granularity)


def finishes(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    return left.finishes(right, granularity)


def finished_by(left: TemporalRelations, right: TemporalRelations, granularity: Granularity | int) -> bool:
    return left.finished_by(right, granularity)


RELATIONS: dict[str, Relation] = {
    "before": before,
    "after": after,
    "equals": equals,
    "meets": meets,
    "met_by": met_by,
    "adjacent": adjacent,
    "overlaps": overlaps,
    "overlapped_by": overlapped_by,
    "contains": contains,
    "during": during,
    "starts": starts,
    "started_by": started_by,
    "finishes": finishes,
    "finished_by": finished_by,
}


def evaluate(
    name: str,
    left: TemporalRelations,
    right: TemporalRelations,
    granularity: Granularity | int,
) -> bool:
    """Apply the relation called ``name`` to two operands.

    Args:
        name: One of RELATION_NAMES.
        left: First operand.
        right: Second operand.
        granularity: Comparison granularity.

    Returns:
        The relation's truth value.

    Raises:
        ValueError: If ``name`` is not a known relation.
        ConversionError: If an operand cannot be converted to ``granularity``.

    Examples:
        >>> from tempora.core.instant import Instant
        >>> a = Instant(5, Granularity.DAYS)
        >>> evaluate("met_by", a, Instant(4, Granularity.DAYS), Granularity.DAYS)
        True
    """
    try:
        relation = RELATIONS[name]
    except KeyError:
        raise ValueError(f"unknown temporal relation: {name!r}") from None
    return relation(left, right, granularity)


__all__ = [
    "Relation",
    "RELATIONS",
    "before",
    "after",
    "equals",
    "meets",
    "met_by",
    "adjacent",
    "overlaps",
    "overlapped_by",
    "contains",
    "during",
    "starts",
    "started_by",
    "finishes",
    "finished_by",
    "evaluate",
]
