"""Instant class representing a zero-duration point in time.

This module provides the Instant class: a granule count at a declared
granularity, with a lazily filled per-granularity conversion cache.
"""

from __future__ import annotations

import datetime as _dt
import logging
from typing import Callable

from tempora._internal.constants import NOW_TOKEN
from tempora._internal.validation import validate_granularity, validate_granule_count
from tempora.convert.epoch import (
    granule_count_to_unix_millis,
    unix_millis_to_granule_count,
)
from tempora.convert.granule import (
    convert_granule_count,
    date_to_granule_count,
    datetime_to_granule_count,
    granule_count_to_date,
    granule_count_to_datetime,
)
from tempora.core.relation import TemporalRelations
from tempora.errors import ConversionError
from tempora.format.datetime_string import (
    datetime_string_to_granule_count,
    express_datetime_string_at_granularity,
    granule_count_to_datetime_string,
    normalize_datetime_string,
    now_datetime_string,
    strip_datetime_string,
)
from tempora.units.granularity import FINEST, NUMBER_OF_GRANULARITIES, Granularity

logger = logging.getLogger(__name__)


class Instant(TemporalRelations):
    """A point in time stored as a granule count at a declared granularity.

    Instants are immutable. Operations that would change the count or
    the granularity return a new Instant, so a conversion cached by one
    instance always matches its count and granularity.

    Conversions to other granularities are computed on first request and
    memoized per instance: relation evaluation tends to query the same
    non-native granularity repeatedly, and month/year conversions need
    calendar arithmetic.

    There is no granularity-free equality. Use ``equals(other, g)`` or
    the other relations, which compare both operands at ``g``.

    Attributes:
        granule_count: Granules since 0001-01-01 00:00:00.000.
        granularity: Granularity of ``granule_count``.

    Examples:
        >>> i = Instant.from_string("2024-03-05 10:20", Granularity.MINUTES)
        >>> i.get_granule_count(Granularity.DAYS)
        738949
        >>> str(i)
        '2024-03-05 10:20'

        >>> j = i.add_granule_count(1, Granularity.DAYS)
        >>> i.before(j, Granularity.DAYS)
        True
        >>> i.meets(j, Granularity.DAYS)
        True
    """

    __slots__ = ("_count", "_granularity", "_cache")

    def __init__(self, count: int, granularity: Granularity | int = FINEST) -> None:
        """Create an instant from a granule count.

        Args:
            count: Granules since the epoch at ``granularity``.
            granularity: Granularity of ``count``. Defaults to the finest.

        Raises:
            TypeError: If count is not an integer.
            GranularityError: If granularity is invalid.
            GranuleOverflowError: If count is outside the 64-bit range.
        """
        self._count = validate_granule_count(count)
        self._granularity = validate_granularity(granularity)
        self._cache: list[int | None] = [None] * NUMBER_OF_GRANULARITIES

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def from_datetime(
        cls,
        value: _dt.datetime,
        granularity: Granularity | int = FINEST,
    ) -> Instant:
        """Create an instant from a naive ``datetime.datetime``.

        Fields finer than ``granularity`` are truncated.

        Raises:
            ConversionError: If the value is not a naive datetime.

        Examples:
            >>> import datetime
            >>> Instant.from_datetime(datetime.datetime(1, 1, 2), Granularity.HOURS)
            Instant(24, Granularity.HOURS)
        """
        return cls(datetime_to_granule_count(value, granularity), granularity)

    @classmethod
    def from_date(
        cls,
        value: _dt.date,
        granularity: Granularity | int = FINEST,
    ) -> Instant:
        """Create an instant at the start of a ``datetime.date``."""
        return cls(date_to_granule_count(value, granularity), granularity)

    @classmethod
    def from_unix_millis(
        cls,
        millis: int,
        granularity: Granularity | int = FINEST,
    ) -> Instant:
        """Create an instant from milliseconds since 1970-01-01 00:00:00.000."""
        return cls(unix_millis_to_granule_count(millis, granularity), granularity)

    @classmethod
    def from_string(
        cls,
        text: str,
        granularity: Granularity | int = FINEST,
        round_up: bool = False,
        *,
        clock: Callable[[], _dt.datetime] | None = None,
    ) -> Instant:
        """Create an instant from a datetime string.

        The literal token "now" is resolved to the current moment. Any
        other text is trimmed, completed to a full datetime at
        ``granularity`` (see ``normalize_datetime_string``) and converted
        to a granule count.

        Args:
            text: Datetime text such as "2024", "2024-03-05 10:20" or "now".
            granularity: Granularity of the new instant.
            round_up: Resolve a partial string to the last granule it covers
                instead of the first.
            clock: Optional callable returning the current naive datetime,
                used to resolve "now".

        Returns:
            A new Instant.

        Raises:
            ParseError: If the text is malformed.

        Examples:
            >>> Instant.from_string("1999", Granularity.DAYS).to_datetime_string()
            '1999-01-01'
            >>> Instant.from_string("1999", Granularity.DAYS, round_up=True).to_datetime_string()
            '1999-12-31'
        """
        g = validate_granularity(granularity)
        if text == NOW_TOKEN:
            text = now_datetime_string(clock)
        else:
            text = text.strip()

        text = normalize_datetime_string(text, g, round_up)
        text = express_datetime_string_at_granularity(text, g)
        return cls(datetime_string_to_granule_count(text, g), g)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def granularity(self) -> Granularity:
        """The declared granularity."""
        return self._granularity

    @property
    def granule_count(self) -> int:
        """The stored granule count, at the declared granularity."""
        return self._count

    def get_granule_count(self, granularity: Granularity | int | None = None) -> int:
        """Return the granule count at ``granularity``.

        The declared granularity (the default) returns the stored count
        directly. Any other granularity is converted once and served
        from the instance cache afterwards.

        Args:
            granularity: Granularity of the result.

        Returns:
            The granule count at ``granularity``.

        Raises:
            ConversionError: If the count cannot be converted.
        """
        if granularity is None:
            return self._count

        g = validate_granularity(granularity)
        if g is self._granularity:
            return self._count

        cached = self._cache[g]
        if cached is None:
            cached = convert_granule_count(self._count, self._granularity, g)
            self._cache[g] = cached
            logger.debug("cached %r at %s: %d", self, g.name, cached)
        return cached

    def is_start_of_time(self) -> bool:
        """Whether the instant is granule 0, the epoch."""
        return self._count == 0

    # =========================================================================
    # Derived instants
    # =========================================================================

    def with_granularity(self, granularity: Granularity | int) -> Instant:
        """Return this instant re-expressed at another granularity.

        Converting to a coarser granularity truncates to the containing
        granule. The receiver is returned unchanged when the granularity
        is already ``granularity``.

        Raises:
            ConversionError: If the count cannot be converted.

        Examples:
            >>> Instant(400, Granularity.DAYS).with_granularity(Granularity.YEARS)
            Instant(1, Granularity.YEARS)
        """
        g = validate_granularity(granularity)
        if g is self._granularity:
            return self
        return Instant(self.get_granule_count(g), g)

    def with_granule_count(
        self,
        count: int,
        granularity: Granularity | int,
    ) -> Instant:
        """Return a new instant with the given count and granularity."""
        return Instant(count, granularity)

    def add_granule_count(self, delta: int, granularity: Granularity | int) -> Instant:
        """Return an instant moved forward by ``delta`` granules.

        ``delta`` is converted from ``granularity`` into this instant's
        granularity before it is added.

        Raises:
            ConversionError: If the delta cannot be converted or the
                result overflows.
        """
        step = convert_granule_count(delta, granularity, self._granularity)
        return Instant(self._count + step, self._granularity)

    def subtract_granule_count(
        self,
        delta: int,
        granularity: Granularity | int,
    ) -> Instant:
        """Return an instant moved back by ``delta`` granules.

        Raises:
            ConversionError: If the delta cannot be converted or the
                result overflows.
        """
        step = convert_granule_count(delta, granularity, self._granularity)
        return Instant(self._count - step, self._granularity)

    def duration(self, other: Instant, granularity: Granularity | int) -> int:
        """Return the number of granules between two instants at ``granularity``.

        Examples:
            >>> a = Instant(10, Granularity.DAYS)
            >>> b = Instant(3, Granularity.DAYS)
            >>> a.duration(b, Granularity.DAYS)
            7
        """
        left, right = self._counts(other, granularity)
        return abs(left - right)

    # =========================================================================
    # Relations
    # =========================================================================

    def _counts(self, other: Instant, granularity: Granularity | int) -> tuple[int, int]:
        if not isinstance(other, Instant):
            raise TypeError(f"cannot relate Instant to {type(other).__name__}")
        return (
            self.get_granule_count(granularity),
            other.get_granule_count(granularity),
        )

    def before(self, other: Instant, granularity: Granularity | int) -> bool:
        left, right = self._counts(other, granularity)
        return left < right

    def equals(self, other: Instant, granularity: Granularity | int) -> bool:
        left, right = self._counts(other, granularity)
        return left == right

    def meets(self, other: Instant, granularity: Granularity | int) -> bool:
        """Whether ``other`` is the next granule or the same granule.

        An instant meets itself: equal granules count as meeting.
        """
        left, right = self._counts(other, granularity)
        return left + 1 == right or left == right

    # A zero-duration instant cannot overlap, contain, start or finish
    # another entity.

    def overlaps(self, other: Instant, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return False

    def contains(self, other: Instant, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return False

    def during(self, other: Instant, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return False

    def starts(self, other: Instant, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return False

    def finishes(self, other: Instant, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return False

    # =========================================================================
    # Calendar and string output
    # =========================================================================

    def to_datetime_string(self, granularity: Granularity | int | None = None) -> str:
        """Format the instant at ``granularity`` (default: its own).

        The string is stripped to the fields meaningful at that
        granularity, e.g. "2024-03" at MONTHS.

        Raises:
            ConversionError: If the instant lies outside years 1-9999.
        """
        g = self._granularity if granularity is None else validate_granularity(granularity)
        text = granule_count_to_datetime_string(self.get_granule_count(g), g)
        return strip_datetime_string(text, g)

    def to_datetime(self, granularity: Granularity | int | None = None) -> _dt.datetime:
        """Return the naive datetime at the start of the granule at ``granularity``."""
        g = self._granularity if granularity is None else validate_granularity(granularity)
        return granule_count_to_datetime(self.get_granule_count(g), g)

    def to_date(self, granularity: Granularity | int | None = None) -> _dt.date:
        """Return the date containing the start of the granule at ``granularity``."""
        g = self._granularity if granularity is None else validate_granularity(granularity)
        return granule_count_to_date(self.get_granule_count(g), g)

    def to_unix_millis(self) -> int:
        """Return milliseconds since 1970-01-01 00:00:00.000 at the granule start."""
        return granule_count_to_unix_millis(self._count, self._granularity)

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Instant(738949, Granularity.DAYS)'.
        """
        return f"Instant({self._count}, Granularity.{self._granularity.name})"

    def __str__(self) -> str:
        """Return the datetime string at the instant's own granularity.

        Never raises: an instant that cannot be formatted renders as
        '<INVALID_INSTANT: reason>'.
        """
        try:
            return self.to_datetime_string()
        except ConversionError as e:
            logger.debug("cannot format %r: %s", self, e)
            return f"<INVALID_INSTANT: {e}>"


__all__ = ["Instant"]
