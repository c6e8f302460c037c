"""Temporal relation algebra and list operations.

The functions in this module serve as the canonical function-based API
for comparing temporal entities. They complement the relation methods
on Instant.

Relation Operations (from tempora.arithmetic.relations):
    - before, after, equals: Ordering at a granularity
    - meets, met_by, adjacent: Contiguity at a granularity
    - overlaps, overlapped_by, contains, during,
      starts, started_by, finishes, finished_by: Interval relations,
      always False between instants
    - evaluate: Apply a relation by name

List Operations (from tempora.arithmetic.coalesce):
    - coalesce: Drop instants equal to an earlier one
"""

from __future__ import annotations

from tempora.arithmetic.coalesce import coalesce
from tempora.arithmetic.relations import (
    RELATIONS,
    adjacent,
    after,
    before,
    contains,
    during,
    equals,
    evaluate,
    finished_by,
    finishes,
    meets,
    met_by,
    overlapped_by,
    overlaps,
    started_by,
    starts,
)

__all__ = [
    # Relations
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
    # Lists
    "coalesce",
]
