"""Datetime string parsing, formatting and canonicalization.

Datetime strings use the canonical layout ``YYYY-MM-DD HH:MM:SS.mmm``.
Any leading prefix of that layout is accepted as input, so "2024",
"2024-03" and "2024-03-05 10:20" are all valid. A ``T`` separator
between date and time is accepted as well, and the fraction may carry
one to three digits.

Functions:
    parse_datetime_string: Parse text into its present calendar fields.
    format_datetime_fields: Format calendar fields in the canonical layout.
    normalize_datetime_string: Complete a partial string, rounding up or down.
    express_datetime_string_at_granularity: Truncate a string to a granularity.
    strip_datetime_string: Minimal representation of a string at a granularity.
    datetime_string_to_granule_count: Convert text to a granule count.
    granule_count_to_datetime_string: Convert a granule count to text.
    now_datetime_string: Canonical string for the current moment.

Examples:
    >>> from tempora.units.granularity import Granularity
    >>> normalize_datetime_string("2024-02", Granularity.DAYS, round_up=True)
    '2024-02-29 00:00:00.000'
    >>> strip_datetime_string("2024-02-29 13:45:00.000", Granularity.MINUTES)
    '2024-02-29 13:45'
"""

from __future__ import annotations

import datetime as _dt
import re
from typing import Callable

from tempora._internal.calendar import days_in_month
from tempora._internal.constants import (
    DATE_SEPARATOR,
    DATETIME_SEPARATOR,
    FRACTION_DIGITS,
    FRACTION_SEPARATOR,
    MIN_YEAR,
    TIME_SEPARATOR,
)
from tempora._internal.validation import validate_calendar_year, validate_granularity
from tempora.convert.granule import (
    Fields,
    fields_to_granule_count,
    granule_count_to_fields,
)
from tempora.errors import ParseError
from tempora.units.granularity import NUMBER_OF_GRANULARITIES, Granularity

# YYYY[-MM[-DD[ HH[:MM[:SS[.f{1,3}]]]]]]
_DATETIME_PATTERN = re.compile(
    r"^(\d{4})"
    r"(?:-(\d{2})"
    r"(?:-(\d{2})"
    r"(?:[ Tt](\d{2})"
    r"(?::(\d{2})"
    r"(?::(\d{2})"
    r"(?:\.(\d{1,3}))?"
    r")?)?)?)?)?$",
    re.ASCII,
)

# Upper bounds for hour, minute, second, millisecond
_TIME_LIMITS = (23, 59, 59, 999)
_FIELD_NAMES = ("year", "month", "day", "hour", "minute", "second", "millisecond")


def _field_count(granularity: Granularity) -> int:
    # YEARS keeps one field, MILLISECONDS keeps all seven
    return NUMBER_OF_GRANULARITIES - int(granularity)


def parse_datetime_string(text: str) -> tuple[int, ...]:
    """Parse a datetime string into the calendar fields it specifies.

    Args:
        text: Datetime text in the canonical layout or a leading prefix of it.

    Returns:
        Tuple of one to seven integers, in the order
        (year, month, day, hour, minute, second, millisecond).

    Raises:
        ParseError: If the text is malformed or a field is out of range.

    Examples:
        >>> parse_datetime_string("2024-03-05 10:20")
        (2024, 3, 5, 10, 20)
        >>> parse_datetime_string("2024-03-05T10:20:30.5")
        (2024, 3, 5, 10, 20, 30, 500)
    """
    s = text.strip()
    if not s:
        raise ParseError("empty datetime string")

    match = _DATETIME_PATTERN.match(s)
    if not match:
        raise ParseError(
            f"Invalid datetime string: {text!r}. "
            "Expected YYYY[-MM[-DD[ HH[:MM[:SS[.mmm]]]]]]"
        )

    groups = [g for g in match.groups() if g is not None]
    fields = [int(g) for g in groups]
    if len(groups) == 7:
        # Fraction digits are tenths, hundredths, thousandths
        fields[6] = int(groups[6].ljust(FRACTION_DIGITS, "0"))

    _check_fields(fields, text)
    return tuple(fields)


def _check_fields(fields: list[int], text: str) -> None:
    year = fields[0]
    if year < MIN_YEAR:
        raise ParseError(f"year out of range in {text!r}: {year}")
    if len(fields) > 1 and not 1 <= fields[1] <= 12:
        raise ParseError(f"month out of range in {text!r}: {fields[1]}")
    if len(fields) > 2:
        max_day = days_in_month(year, fields[1])
        if not 1 <= fields[2] <= max_day:
            raise ParseError(f"day out of range in {text!r}: {fields[2]}")
    for index, limit in enumerate(_TIME_LIMITS, start=3):
        if len(fields) > index and fields[index] > limit:
            raise ParseError(
                f"{_FIELD_NAMES[index]} out of range in {text!r}: {fields[index]}"
            )


def _complete(fields: tuple[int, ...], fill_to: int, round_up: bool) -> Fields:
    """Fill missing fields.

    Missing fields before index ``fill_to`` take their maximum when
    ``round_up`` is set; everything else takes its minimum.
    """
    year = fields[0]
    result = list(fields)
    for index in range(len(fields), 7):
        if round_up and index < fill_to:
            if index == 1:
                value = 12
            elif index == 2:
                value = days_in_month(year, result[1])
            else:
                value = _TIME_LIMITS[index - 3]
        else:
            value = 1 if index < 3 else 0
        result.append(value)
    return tuple(result)  # type: ignore[return-value]


def _truncate(fields: Fields, keep: int) -> Fields:
    minimums = (1, 1, 1, 0, 0, 0, 0)
    return fields[:keep] + minimums[keep:]  # type: ignore[return-value]


def format_datetime_fields(fields: Fields, keep: int = 7) -> str:
    """Format calendar fields in the canonical layout.

    Args:
        fields: (year, month, day, hour, minute, second, millisecond).
        keep: Number of leading fields to render (1-7).

    Returns:
        The formatted string.

    Examples:
        >>> format_datetime_fields((2024, 1, 5, 9, 3, 7, 42))
        '2024-01-05 09:03:07.042'
        >>> format_datetime_fields((2024, 1, 5, 9, 3, 7, 42), keep=2)
        '2024-01'
    """
    year, month, day, hour, minute, second, millis = fields
    parts = [f"{year:04d}"]
    if keep > 1:
        parts.append(f"{DATE_SEPARATOR}{month:02d}")
    if keep > 2:
        parts.append(f"{DATE_SEPARATOR}{day:02d}")
    if keep > 3:
        parts.append(f"{DATETIME_SEPARATOR}{hour:02d}")
    if keep > 4:
        parts.append(f"{TIME_SEPARATOR}{minute:02d}")
    if keep > 5:
        parts.append(f"{TIME_SEPARATOR}{second:02d}")
    if keep > 6:
        parts.append(f"{FRACTION_SEPARATOR}{millis:0{FRACTION_DIGITS}d}")
    return "".join(parts)


def normalize_datetime_string(
    text: str,
    granularity: Granularity | int,
    round_up: bool = False,
) -> str:
    """Complete a possibly partial datetime string.

    Fields missing from the text are filled in. With ``round_up`` the
    missing fields down to ``granularity`` take their largest value, so
    the result designates the last granule the text covers; otherwise
    they take their smallest value and designate the first one. Fields
    finer than ``granularity`` always take their smallest value.

    Args:
        text: Datetime text, possibly partial.
        granularity: Granularity the string is normalized to.
        round_up: Round the partially specified granule up instead of down.

    Returns:
        A full canonical datetime string.

    Raises:
        ParseError: If the text is malformed.

    Examples:
        >>> normalize_datetime_string("1999", Granularity.MONTHS)
        '1999-01-01 00:00:00.000'
        >>> normalize_datetime_string("1999", Granularity.MONTHS, round_up=True)
        '1999-12-01 00:00:00.000'
    """
    g = validate_granularity(granularity)
    fields = parse_datetime_string(text)
    return format_datetime_fields(_complete(fields, _field_count(g), round_up))


def express_datetime_string_at_granularity(
    text: str,
    granularity: Granularity | int,
) -> str:
    """Reset the fields of a datetime string finer than ``granularity``.

    Examples:
        >>> express_datetime_string_at_granularity(
        ...     "2024-03-05 10:20:30.400", Granularity.HOURS
        ... )
        '2024-03-05 10:00:00.000'
    """
    g = validate_granularity(granularity)
    fields = _complete(parse_datetime_string(text), 0, False)
    return format_datetime_fields(_truncate(fields, _field_count(g)))


def strip_datetime_string(text: str, granularity: Granularity | int) -> str:
    """Return the minimal representation of a datetime string at ``granularity``.

    Examples:
        >>> strip_datetime_string("2024-03-05 10:20:30.400", Granularity.DAYS)
        '2024-03-05'
        >>> strip_datetime_string("2024", Granularity.MONTHS)
        '2024-01'
    """
    g = validate_granularity(granularity)
    fields = _complete(parse_datetime_string(text), 0, False)
    return format_datetime_fields(fields, keep=_field_count(g))


def datetime_string_to_granule_count(text: str, granularity: Granularity | int) -> int:
    """Convert a datetime string to the granule count containing it.

    Missing fields take their smallest value; fields finer than
    ``granularity`` are truncated.

    Raises:
        ParseError: If the text is malformed.

    Examples:
        >>> datetime_string_to_granule_count("0002-01-01", Granularity.DAYS)
        365
    """
    fields = _complete(parse_datetime_string(text), 0, False)
    return fields_to_granule_count(fields, granularity)


def granule_count_to_datetime_string(count: int, granularity: Granularity | int) -> str:
    """Convert a granule count to the full canonical string of its start.

    Raises:
        GranuleOverflowError: If the granule lies outside years 1-9999.

    Examples:
        >>> granule_count_to_datetime_string(13, Granularity.MONTHS)
        '0002-02-01 00:00:00.000'
    """
    fields = granule_count_to_fields(count, granularity)
    validate_calendar_year(fields[0])
    return format_datetime_fields(fields)


def now_datetime_string(clock: Callable[[], _dt.datetime] | None = None) -> str:
    """Return the canonical datetime string of the current moment.

    Args:
        clock: Optional zero-argument callable returning a naive datetime.
               Defaults to ``datetime.datetime.now``.

    Returns:
        Full canonical datetime string with millisecond precision.
    """
    value = (clock or _dt.datetime.now)()
    return format_datetime_fields(
        (
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond // 1000,
        )
    )


__all__ = [
    "parse_datetime_string",
    "format_datetime_fields",
    "normalize_datetime_string",
    "express_datetime_string_at_granularity",
    "strip_datetime_string",
    "datetime_string_to_granule_count",
    "granule_count_to_datetime_string",
    "now_datetime_string",
]
