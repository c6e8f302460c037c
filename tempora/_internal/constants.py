"""Internal constants for Tempora.

These constants define the epoch, the limits and the canonical datetime
string layout used throughout the library. This module is not part of
the public API.
"""

from __future__ import annotations

# Fixed-length granules, in milliseconds
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

MONTHS_PER_YEAR: int = 12

# Granule 0 at every granularity starts at 0001-01-01 00:00:00.000
EPOCH_YEAR: int = 1

# Calendar values that can be formatted or marshaled
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Granule counts are signed 64-bit integers
MIN_GRANULE_COUNT: int = -(2**63)
MAX_GRANULE_COUNT: int = 2**63 - 1

# Days between 0001-01-01 and 1970-01-01
UNIX_EPOCH_DAY: int = 719_162

# Canonical datetime string: YYYY-MM-DD HH:MM:SS.mmm
DATE_SEPARATOR: str = "-"
DATETIME_SEPARATOR: str = " "
TIME_SEPARATOR: str = ":"
FRACTION_SEPARATOR: str = "."
FRACTION_DIGITS: int = 3

# Token resolved to the current moment when building an instant from text
NOW_TOKEN: str = "now"


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MONTHS_PER_YEAR",
    "EPOCH_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_GRANULE_COUNT",
    "MAX_GRANULE_COUNT",
    "UNIX_EPOCH_DAY",
    "DATE_SEPARATOR",
    "DATETIME_SEPARATOR",
    "TIME_SEPARATOR",
    "FRACTION_SEPARATOR",
    "FRACTION_DIGITS",
    "NOW_TOKEN",
]
