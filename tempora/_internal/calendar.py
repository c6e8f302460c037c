"""Calendar utilities for Tempora.

This module provides internal functions for proleptic Gregorian calendar
calculations. Days are counted from the Tempora epoch, so day 0 is
0001-01-01 and day -1 is 0000-12-31 (astronomical year numbering).

This module is not part of the public API.
"""

from __future__ import annotations

from tempora._internal.constants import MONTHS_PER_YEAR

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

_DAYS_PER_400_YEARS = 146_097
_DAYS_PER_100_YEARS = 36_524
_DAYS_PER_4_YEARS = 1_461


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (astronomical, can be 0 or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def days_before_year(year: int) -> int:
    """Return the number of days from the epoch to January 1st of ``year``.

    Negative for years before 1. Python's floor division keeps the
    leap-day count correct on both sides of the epoch.

    Examples:
        >>> days_before_year(1)
        0
        >>> days_before_year(2)
        365
    """
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def ymd_to_day_count(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a day count since 0001-01-01.

    Args:
        year: The year (astronomical).
        month: The month (1-12).
        day: The day of month (1-31).

    Returns:
        Number of whole days between the epoch and the given date.

    Examples:
        >>> ymd_to_day_count(1, 1, 1)
        0
        >>> ymd_to_day_count(1970, 1, 1)
        719162
    """
    return days_before_year(year) + _days_before_month(year, month) + day - 1


def day_count_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert a day count since 0001-01-01 to year, month, day.

    Args:
        days: Day count (day 0 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> day_count_to_ymd(0)
        (1, 1, 1)
        >>> day_count_to_ymd(719162)
        (1970, 1, 1)
    """
    # 400-year cycles: divmod floors, so n is always within a cycle
    n400, n = divmod(days, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, _DAYS_PER_100_YEARS)
    n4, n = divmod(n, _DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year closing a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def month_count_to_ym(months: int) -> tuple[int, int]:
    """Convert a month count since January of year 1 to (year, month).

    Examples:
        >>> month_count_to_ym(0)
        (1, 1)
        >>> month_count_to_ym(13)
        (2, 2)
    """
    years, month_index = divmod(months, MONTHS_PER_YEAR)
    return (years + 1, month_index + 1)


def ym_to_month_count(year: int, month: int) -> int:
    """Convert (year, month) to a month count since January of year 1."""
    return (year - 1) * MONTHS_PER_YEAR + (month - 1)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_before_year",
    "ymd_to_day_count",
    "day_count_to_ymd",
    "month_count_to_ym",
    "ym_to_month_count",
]
