"""Tempora exception hierarchy.

All Tempora-specific exceptions inherit from TemporaError. Every failure
raised while converting between granularities, calendar values and
datetime strings is a ConversionError.
"""

from __future__ import annotations


class TemporaError(Exception):
    """Base exception for all Tempora errors."""

    pass


class ConversionError(TemporaError):
    """A granule count, calendar value or datetime string could not be converted.

    Conversions are deterministic, so an input that fails once fails
    every time.

    Examples:
        - Aware datetime passed where a naive one is expected
        - Calendar value outside years 1-9999
    """

    pass


class ParseError(ConversionError):
    """Failed to parse a textual datetime or granularity.

    Examples:
        - "2024-13-01" (month out of range)
        - "yesterday-ish"
        - Empty string
    """

    pass


class GranularityError(ConversionError):
    """Value is not a supported granularity.

    Examples:
        - Integer outside the granularity enumeration
        - Unknown granularity name such as "fortnights"
    """

    pass


class GranuleOverflowError(ConversionError):
    """Granule count does not fit the representable range.

    Raised when a count or a conversion result leaves the signed 64-bit
    range, or when a count maps to a year outside the calendar range.
    """

    pass


__all__ = [
    "TemporaError",
    "ConversionError",
    "ParseError",
    "GranularityError",
    "GranuleOverflowError",
]
