"""Internal utilities for Tempora.

This module contains private implementation details:
    - Validation helpers
    - Constants and magic numbers
    - Calendar arithmetic

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tempora._internal.validation import (
    validate_calendar_year,
    validate_granularity,
    validate_granule_count,
)

__all__: list[str] = [
    "validate_calendar_year",
    "validate_granularity",
    "validate_granule_count",
]
