"""Granule count conversion utilities.

This module provides the pure conversion functions instants delegate to:
    - Granule count conversion between granularities
    - Calendar value conversions (datetime.datetime, datetime.date)
    - Unix epoch conversions (milliseconds)

Examples:
    >>> from tempora.units.granularity import Granularity
    >>> from tempora.convert import convert_granule_count

    >>> convert_granule_count(24, Granularity.MONTHS, Granularity.YEARS)
    2
"""

from __future__ import annotations

from tempora.convert.epoch import (
    granule_count_to_unix_millis,
    unix_millis_to_granule_count,
)
from tempora.convert.granule import (
    convert_granule_count,
    date_to_granule_count,
    datetime_to_granule_count,
    fields_to_granule_count,
    granule_count_to_date,
    granule_count_to_datetime,
    granule_count_to_fields,
)

__all__ = [
    # Granule counts
    "convert_granule_count",
    "granule_count_to_fields",
    "fields_to_granule_count",
    # Calendar values
    "datetime_to_granule_count",
    "granule_count_to_datetime",
    "date_to_granule_count",
    "granule_count_to_date",
    # Epoch
    "unix_millis_to_granule_count",
    "granule_count_to_unix_millis",
]
