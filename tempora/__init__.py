"""Tempora: granularity-aware instants for temporal rule built-ins.

Tempora represents points in time as granule counts at a named
granularity and provides the qualitative relation algebra that temporal
built-in predicates evaluate.

Core Types:
    Instant: Zero-duration point in time (granule count + granularity)
    TemporalRelations: Allen-style relation interface

Units:
    Granularity: MILLISECONDS, SECONDS, MINUTES, HOURS, DAYS, MONTHS, YEARS
    NUMBER_OF_GRANULARITIES, FINEST, COARSEST

Operations:
    before, after, equals, meets, met_by, adjacent, ...: Relations at a granularity
    coalesce: Drop instants equal to an earlier one
    convert_granule_count: Convert a count between granularities

Exceptions:
    TemporaError: Base exception
    ConversionError: Any failed conversion
    ParseError: Malformed datetime or granularity text
    GranularityError: Unsupported granularity
    GranuleOverflowError: Count outside the representable range

Example:
    >>> from tempora import Granularity, Instant, coalesce
    >>> start = Instant.from_string("2024-03-05", Granularity.DAYS)
    >>> end = start.add_granule_count(2, Granularity.DAYS)
    >>> start.before(end, Granularity.DAYS)
    True
    >>> start.duration(end, Granularity.HOURS)
    48
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from tempora.core.instant import Instant
from tempora.core.relation import RELATION_NAMES, TemporalRelations

# Units
from tempora.units.granularity import (
    COARSEST,
    FINEST,
    NUMBER_OF_GRANULARITIES,
    Granularity,
)

# Exceptions
from tempora.errors import (
    ConversionError,
    GranularityError,
    GranuleOverflowError,
    ParseError,
    TemporaError,
)

# Operations
from tempora.arithmetic import (
    adjacent,
    after,
    before,
    coalesce,
    contains,
    during,
    equals,
    evaluate,
    finished_by,
    finishes,
    meets,
    met_by,
    overlapped_by,
    overlaps,
    started_by,
    starts,
)
from tempora.convert import convert_granule_count

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "TemporalRelations",
    "RELATION_NAMES",
    # Units
    "Granularity",
    "NUMBER_OF_GRANULARITIES",
    "FINEST",
    "COARSEST",
    # Exceptions
    "TemporaError",
    "ConversionError",
    "ParseError",
    "GranularityError",
    "GranuleOverflowError",
    # Relations
    "before",
    "after",
    "equals",
    "meets",
    "met_by",
    "adjacent",
    "overlaps",
    "overlapped_by",
    "contains",
    "during",
    "starts",
    "started_by",
    "finishes",
    "finished_by",
    "evaluate",
    # Operations
    "coalesce",
    "convert_granule_count",
]
