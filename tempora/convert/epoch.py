"""Unix epoch conversion utilities for granule counts.

This module converts between granule counts (measured from
0001-01-01 00:00:00.000) and Unix timestamps in milliseconds (measured
from 1970-01-01 00:00:00.000). No timezone is applied: Unix
milliseconds are read as naive wall-clock time.

Examples:
    >>> from tempora.units.granularity import Granularity
    >>> unix_millis_to_granule_count(0, Granularity.YEARS)
    1969
    >>> granule_count_to_unix_millis(719_162, Granularity.DAYS)
    0
"""

from __future__ import annotations

from tempora._internal.constants import MILLIS_PER_DAY, UNIX_EPOCH_DAY
from tempora._internal.validation import validate_granularity, validate_granule_count
from tempora.convert.granule import granule_at_millis, granule_start_millis
from tempora.units.granularity import Granularity

_UNIX_EPOCH_OFFSET_MILLIS = UNIX_EPOCH_DAY * MILLIS_PER_DAY


def unix_millis_to_granule_count(millis: int, granularity: Granularity | int) -> int:
    """Convert Unix milliseconds to the granule containing that moment.

    Args:
        millis: Milliseconds since 1970-01-01 00:00:00.000.
        granularity: Granularity of the result.

    Returns:
        Granule count at ``granularity``.

    Raises:
        GranularityError: If the granularity is invalid.
        GranuleOverflowError: If the result leaves the 64-bit range.
    """
    g = validate_granularity(granularity)
    return validate_granule_count(
        granule_at_millis(millis + _UNIX_EPOCH_OFFSET_MILLIS, g)
    )


def granule_count_to_unix_millis(count: int, granularity: Granularity | int) -> int:
    """Convert a granule count to Unix milliseconds at the granule start.

    Raises:
        GranularityError: If the granularity is invalid.
        GranuleOverflowError: If count is outside the 64-bit range.
    """
    g = validate_granularity(granularity)
    validate_granule_count(count)
    return granule_start_millis(count, g) - _UNIX_EPOCH_OFFSET_MILLIS


__all__ = [
    "unix_millis_to_granule_count",
    "granule_count_to_unix_millis",
]
