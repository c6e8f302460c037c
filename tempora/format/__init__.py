"""Datetime string formatting and parsing.

This module provides the textual side of granule count conversion:
    - Parsing full or partial datetime strings
    - Canonicalization (normalize, express at granularity, strip)
    - Granule count to and from datetime strings
    - The current-moment string used to resolve "now"

Examples:
    >>> from tempora.units.granularity import Granularity
    >>> from tempora.format import datetime_string_to_granule_count

    >>> datetime_string_to_granule_count("0001-01-02 01", Granularity.HOURS)
    25
"""

from __future__ import annotations

from tempora.format.datetime_string import (
    datetime_string_to_granule_count,
    express_datetime_string_at_granularity,
    format_datetime_fields,
    granule_count_to_datetime_string,
    normalize_datetime_string,
    now_datetime_string,
    parse_datetime_string,
    strip_datetime_string,
)

__all__: list[str] = [
    "parse_datetime_string",
    "format_datetime_fields",
    "normalize_datetime_string",
    "express_datetime_string_at_granularity",
    "strip_datetime_string",
    "datetime_string_to_granule_count",
    "granule_count_to_datetime_string",
    "now_datetime_string",
]
