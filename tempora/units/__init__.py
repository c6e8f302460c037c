"""Temporal units and enumerations.

This module provides:
    - Granularity: Time scales from MILLISECONDS (finest) to YEARS (coarsest)
    - NUMBER_OF_GRANULARITIES, FINEST, COARSEST: Enumeration constants
"""

from __future__ import annotations

from tempora.units.granularity import (
    COARSEST,
    FINEST,
    NUMBER_OF_GRANULARITIES,
    Granularity,
)

__all__: list[str] = [
    "Granularity",
    "NUMBER_OF_GRANULARITIES",
    "FINEST",
    "COARSEST",
]
