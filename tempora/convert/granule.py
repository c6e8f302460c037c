"""Granule count conversion utilities.

This module converts granule counts between granularities and to and
from calendar values (``datetime.datetime`` and ``datetime.date``).

Every granule count is measured from the Tempora epoch,
0001-01-01 00:00:00.000: granule 0 at any granularity is the granule
that starts at the epoch. Conversions locate the start of the source
granule on the millisecond timeline and return the target granule that
contains it, so converting to a coarser granularity truncates and
converting to a finer one yields the first fine granule.

Functions:
    convert_granule_count: Convert a count between two granularities.
    granule_start_millis: Milliseconds from the epoch to the start of a granule.
    granule_at_millis: Granule containing a millisecond offset from the epoch.
    granule_count_to_fields: Calendar fields at the start of a granule.
    fields_to_granule_count: Granule containing the given calendar fields.
    datetime_to_granule_count: Convert a naive datetime to a granule count.
    granule_count_to_datetime: Convert a granule count to a naive datetime.
    date_to_granule_count: Convert a date to a granule count.
    granule_count_to_date: Convert a granule count to a date.

Examples:
    >>> from tempora.units.granularity import Granularity
    >>> convert_granule_count(1, Granularity.YEARS, Granularity.DAYS)
    365
    >>> convert_granule_count(365, Granularity.DAYS, Granularity.YEARS)
    1
"""

from __future__ import annotations

import datetime as _dt

from tempora._internal.calendar import (
    day_count_to_ymd,
    days_before_year,
    month_count_to_ym,
    ym_to_month_count,
    ymd_to_day_count,
)
from tempora._internal.constants import (
    EPOCH_YEAR,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MONTHS_PER_YEAR,
)
from tempora._internal.validation import (
    validate_calendar_year,
    validate_granularity,
    validate_granule_count,
)
from tempora.errors import ConversionError
from tempora.units.granularity import Granularity

# (year, month, day, hour, minute, second, millisecond)
Fields = tuple[int, int, int, int, int, int, int]


def granule_start_millis(count: int, granularity: Granularity) -> int:
    """Return the milliseconds from the epoch to the start of a granule.

    Args:
        count: Granule count at ``granularity``.
        granularity: Granularity of ``count``.

    Returns:
        Offset in milliseconds (unbounded Python int).
    """
    fixed = granularity.fixed_millis()
    if fixed is not None:
        return count * fixed
    if granularity is Granularity.MONTHS:
        year, month = month_count_to_ym(count)
        return ymd_to_day_count(year, month, 1) * MILLIS_PER_DAY
    return days_before_year(count + EPOCH_YEAR) * MILLIS_PER_DAY


def granule_at_millis(millis: int, granularity: Granularity) -> int:
    """Return the granule at ``granularity`` containing a millisecond offset.

    Args:
        millis: Milliseconds from the epoch (may be negative).
        granularity: Target granularity.

    Returns:
        The granule count, floored toward the past.
    """
    fixed = granularity.fixed_millis()
    if fixed is not None:
        return millis // fixed
    year, month, _ = day_count_to_ymd(millis // MILLIS_PER_DAY)
    if granularity is Granularity.MONTHS:
        return ym_to_month_count(year, month)
    return year - EPOCH_YEAR


def convert_granule_count(
    count: int,
    from_granularity: Granularity | int,
    to_granularity: Granularity | int,
) -> int:
    """Convert a granule count from one granularity to another.

    Month and year granules are resolved with calendar arithmetic, so
    month lengths and leap years are honoured.

    Args:
        count: Granule count at ``from_granularity``.
        from_granularity: Granularity of ``count``.
        to_granularity: Granularity of the result.

    Returns:
        Granule count at ``to_granularity``.

    Raises:
        GranularityError: If either granularity is invalid.
        GranuleOverflowError: If the count or the result leaves the
            signed 64-bit range.

    Examples:
        >>> convert_granule_count(2, Granularity.MONTHS, Granularity.DAYS)
        59
        >>> convert_granule_count(90_000, Granularity.SECONDS, Granularity.DAYS)
        1
    """
    from_g = validate_granularity(from_granularity)
    to_g = validate_granularity(to_granularity)
    validate_granule_count(count)

    if from_g is to_g:
        return count

    if from_g is Granularity.MONTHS and to_g is Granularity.YEARS:
        result = count // MONTHS_PER_YEAR
    else:
        result = granule_at_millis(granule_start_millis(count, from_g), to_g)

    return validate_granule_count(result)


def granule_count_to_fields(count: int, granularity: Granularity | int) -> Fields:
    """Return the calendar fields at the start of a granule.

    Args:
        count: Granule count at ``granularity``.
        granularity: Granularity of ``count``.

    Returns:
        Tuple of (year, month, day, hour, minute, second, millisecond).
    """
    g = validate_granularity(granularity)
    validate_granule_count(count)

    millis = granule_start_millis(count, g)
    days, millis = divmod(millis, MILLIS_PER_DAY)
    hour, millis = divmod(millis, MILLIS_PER_HOUR)
    minute, millis = divmod(millis, MILLIS_PER_MINUTE)
    second, millis = divmod(millis, MILLIS_PER_SECOND)
    year, month, day = day_count_to_ymd(days)
    return (year, month, day, hour, minute, second, millis)


def fields_to_granule_count(fields: Fields, granularity: Granularity | int) -> int:
    """Return the granule at ``granularity`` containing the given fields.

    Fields finer than ``granularity`` are truncated.

    Raises:
        GranuleOverflowError: If the result leaves the 64-bit range.
    """
    g = validate_granularity(granularity)
    year, month, day, hour, minute, second, millis = fields

    if g is Granularity.YEARS:
        return validate_granule_count(year - EPOCH_YEAR)
    if g is Granularity.MONTHS:
        return validate_granule_count(ym_to_month_count(year, month))

    total = (
        ymd_to_day_count(year, month, day) * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millis
    )
    return validate_granule_count(granule_at_millis(total, g))


def datetime_to_granule_count(
    value: _dt.datetime,
    granularity: Granularity | int,
) -> int:
    """Convert a naive ``datetime.datetime`` to a granule count.

    Microseconds are truncated to milliseconds.

    Raises:
        ConversionError: If the value is not a naive datetime.

    Examples:
        >>> import datetime
        >>> datetime_to_granule_count(datetime.datetime(1, 1, 2), Granularity.HOURS)
        24
    """
    if not isinstance(value, _dt.datetime):
        raise ConversionError(f"expected datetime, got {type(value).__name__}")
    if value.tzinfo is not None:
        raise ConversionError("timezone-aware datetimes are not supported")

    fields = (
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond // 1000,
    )
    return fields_to_granule_count(fields, granularity)


def granule_count_to_datetime(
    count: int,
    granularity: Granularity | int,
) -> _dt.datetime:
    """Convert a granule count to the naive datetime at the granule start.

    Raises:
        GranuleOverflowError: If the granule lies outside years 1-9999.
    """
    year, month, day, hour, minute, second, millis = granule_count_to_fields(
        count, granularity
    )
    validate_calendar_year(year)
    return _dt.datetime(year, month, day, hour, minute, second, millis * 1000)


def date_to_granule_count(value: _dt.date, granularity: Granularity | int) -> int:
    """Convert a ``datetime.date`` to a granule count.

    Only the date part is used; a datetime argument is taken at the
    start of its day.

    Raises:
        ConversionError: If the value is not a date.
    """
    if not isinstance(value, _dt.date):
        raise ConversionError(f"expected date, got {type(value).__name__}")
    return fields_to_granule_count(
        (value.year, value.month, value.day, 0, 0, 0, 0), granularity
    )


def granule_count_to_date(count: int, granularity: Granularity | int) -> _dt.date:
    """Convert a granule count to the date containing the granule start.

    Raises:
        GranuleOverflowError: If the granule lies outside years 1-9999.
    """
    year, month, day, *_ = granule_count_to_fields(count, granularity)
    validate_calendar_year(year)
    return _dt.date(year, month, day)


__all__ = [
    "Fields",
    "granule_start_millis",
    "granule_at_millis",
    "convert_granule_count",
    "granule_count_to_fields",
    "fields_to_granule_count",
    "datetime_to_granule_count",
    "granule_count_to_datetime",
    "date_to_granule_count",
    "granule_count_to_date",
]
