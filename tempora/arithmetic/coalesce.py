"""Deduplication of instant lists.

This module provides coalesce, which merges instants that are equal at
a chosen granularity.
"""

from __future__ import annotations

from collections.abc import Iterable

from tempora.core.instant import Instant
from tempora.units.granularity import Granularity


def coalesce(instants: Iterable[Instant], granularity: Granularity | int) -> list[Instant]:
    """Remove instants equal to an earlier instant at ``granularity``.

    Takes the first remaining instant, drops every later instant that
    equals it, and repeats until none remain. Survivors keep their
    first-occurrence order. The input is not modified.

    Quadratic in the number of instants; built-in argument lists are
    small.

    Args:
        instants: Instants to deduplicate.
        granularity: Granularity at which instants are compared.

    Returns:
        A new list of the surviving instants.

    Raises:
        ConversionError: If an instant cannot be converted to ``granularity``.

    Examples:
        >>> days = [Instant(n, Granularity.DAYS) for n in (10, 10, 20, 10, 30)]
        >>> [i.granule_count for i in coalesce(days, Granularity.DAYS)]
        [10, 20, 30]
    """
    remaining = list(instants)
    result: list[Instant] = []

    while remaining:
        first = remaining.pop(0)
        remaining = [other for other in remaining if not first.equals(other, granularity)]
        result.append(first)

    return result


__all__ = ["coalesce"]
