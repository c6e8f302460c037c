"""Validation utilities for Tempora.

This module provides helpers for checking granularities and granule
counts before they reach the converter. Failures raise the conversion
error subclasses from tempora.errors.

This module is not part of the public API.
"""

from __future__ import annotations

from tempora._internal.constants import (
    MAX_GRANULE_COUNT,
    MAX_YEAR,
    MIN_GRANULE_COUNT,
    MIN_YEAR,
)
from tempora.errors import GranularityError, GranuleOverflowError
from tempora.units.granularity import Granularity


def validate_granularity(value: object) -> Granularity:
    """Coerce a value to a Granularity.

    Granularity members pass through unchanged; plain integers are
    looked up by value. Booleans and anything else are rejected.

    Args:
        value: The candidate granularity.

    Returns:
        The matching Granularity member.

    Raises:
        GranularityError: If the value does not name a granularity.

    Examples:
        >>> validate_granularity(4)
        <Granularity.DAYS: 4>
    """
    if isinstance(value, Granularity):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Granularity(value)
        except ValueError:
            pass
    raise GranularityError(f"invalid granularity: {value!r}")


def validate_granule_count(count: int) -> int:
    """Validate that a granule count fits a signed 64-bit integer.

    Raises:
        TypeError: If count is not an integer.
        GranuleOverflowError: If count is outside the 64-bit range.
    """
    if not isinstance(count, int) or isinstance(count, bool):
        raise TypeError(f"granule count must be int, got {type(count).__name__}")
    if count < MIN_GRANULE_COUNT or count > MAX_GRANULE_COUNT:
        raise GranuleOverflowError(f"granule count out of 64-bit range: {count}")
    return count


def validate_calendar_year(year: int) -> None:
    """Validate that a year can be expressed as a calendar value.

    Raises:
        GranuleOverflowError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise GranuleOverflowError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


__all__ = [
    "validate_granularity",
    "validate_granule_count",
    "validate_calendar_year",
]
