"""Core temporal types.

This module provides the fundamental temporal types:
    - Instant: Zero-duration point in time at a declared granularity
    - TemporalRelations: Relation interface shared with period types
"""

from __future__ import annotations

from tempora.core.instant import Instant
from tempora.core.relation import RELATION_NAMES, TemporalRelations

__all__: list[str] = [
    "Instant",
    "RELATION_NAMES",
    "TemporalRelations",
]
