"""Granularity enumeration for granule counts.

This module provides the Granularity enum, ordered from the finest
time scale (milliseconds) to the coarsest (years), together with the
module-level constants describing the enumeration.
"""

from __future__ import annotations

from enum import IntEnum

from tempora._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from tempora.errors import GranularityError


class Granularity(IntEnum):
    """Named time scales, totally ordered from finest to coarsest.

    A granule is the smallest indivisible unit at a granularity. Integer
    values double as indices into per-granularity tables such as the
    instant conversion cache.

    Note:
        MONTHS and YEARS do not have a fixed length in milliseconds
        (month lengths vary, leap years). fixed_millis() returns None for
        these members.

    Examples:
        >>> Granularity.MILLISECONDS < Granularity.YEARS
        True

        >>> Granularity.HOURS.fixed_millis()
        3600000

        >>> Granularity.from_name("Days")
        <Granularity.DAYS: 4>
    """

    MILLISECONDS = 0
    SECONDS = 1
    MINUTES = 2
    HOURS = 3
    DAYS = 4
    MONTHS = 5
    YEARS = 6

    def fixed_millis(self) -> int | None:
        """Return the length of one granule in milliseconds.

        Returns:
            Milliseconds per granule, or None for variable-length
            granularities (MONTHS and YEARS).
        """
        return _FIXED_MILLIS[self]

    def is_finer_than(self, other: Granularity) -> bool:
        """Check whether this granularity has smaller granules than ``other``."""
        return self < other

    def is_coarser_than(self, other: Granularity) -> bool:
        """Check whether this granularity has larger granules than ``other``."""
        return self > other

    @classmethod
    def from_name(cls, name: str) -> Granularity:
        """Look up a granularity by its textual name.

        Matching is case-insensitive and accepts singular and plural
        forms as well as common abbreviations.

        Args:
            name: Granularity name such as "years", "Month" or "ms".

        Returns:
            The matching Granularity.

        Raises:
            GranularityError: If the name is not recognised.

        Examples:
            >>> Granularity.from_name("YEARS")
            <Granularity.YEARS: 6>
            >>> Granularity.from_name("sec")
            <Granularity.SECONDS: 1>
        """
        key = name.strip().lower()
        try:
            return _NAMES[key]
        except KeyError:
            raise GranularityError(f"unknown granularity: {name!r}") from None


_FIXED_MILLIS: dict[Granularity, int | None] = {
    Granularity.MILLISECONDS: 1,
    Granularity.SECONDS: MILLIS_PER_SECOND,
    Granularity.MINUTES: MILLIS_PER_MINUTE,
    Granularity.HOURS: MILLIS_PER_HOUR,
    Granularity.DAYS: MILLIS_PER_DAY,
    Granularity.MONTHS: None,  # Variable length
    Granularity.YEARS: None,  # Variable length (leap years)
}

_NAMES: dict[str, Granularity] = {}
for _member in Granularity:
    _plural = _member.name.lower()
    _NAMES[_plural] = _member
    _NAMES[_plural[:-1]] = _member
_NAMES.update(
    {
        "ms": Granularity.MILLISECONDS,
        "s": Granularity.SECONDS,
        "sec": Granularity.SECONDS,
        "min": Granularity.MINUTES,
        "h": Granularity.HOURS,
        "hr": Granularity.HOURS,
    }
)
del _member, _plural

NUMBER_OF_GRANULARITIES: int = len(Granularity)
FINEST: Granularity = Granularity.MILLISECONDS
COARSEST: Granularity = Granularity.YEARS


__all__ = [
    "Granularity",
    "NUMBER_OF_GRANULARITIES",
    "FINEST",
    "COARSEST",
]
