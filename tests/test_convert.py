"""Tests for granule count conversion and calendar interop."""

from __future__ import annotations

import datetime

import pytest

from tempora._internal.calendar import (
    day_count_to_ymd,
    days_before_year,
    is_leap_year,
    month_count_to_ym,
    ym_to_month_count,
    ymd_to_day_count,
)
from tempora.convert import (
    convert_granule_count,
    date_to_granule_count,
    datetime_to_granule_count,
    fields_to_granule_count,
    granule_count_to_date,
    granule_count_to_datetime,
    granule_count_to_fields,
    granule_count_to_unix_millis,
    unix_millis_to_granule_count,
)
from tempora.errors import ConversionError, GranularityError, GranuleOverflowError
from tempora.units.granularity import Granularity

Y = Granularity.YEARS
MO = Granularity.MONTHS
D = Granularity.DAYS
H = Granularity.HOURS
MI = Granularity.MINUTES
S = Granularity.SECONDS
MS = Granularity.MILLISECONDS


def _day(year: int, month: int, day: int) -> int:
    """Day count of a date, using the standard library as oracle."""
    return datetime.date(year, month, day).toordinal() - 1


# ============================================================================
# Calendar arithmetic
# ============================================================================


class TestCalendar:
    """Tests for the proleptic Gregorian helpers."""

    def test_leap_years(self) -> None:
        """Test the leap year rule."""
        assert is_leap_year(2000)
        assert is_leap_year(2024)
        assert not is_leap_year(1900)
        assert not is_leap_year(2023)

    @pytest.mark.parametrize(
        "days",
        [0, 30, 58, 59, 364, 365, 1460, 1461, 36524, 146096, 146097, 719162, 738949],
    )
    def test_day_count_matches_stdlib(self, days: int) -> None:
        """Test day_count_to_ymd agrees with date.fromordinal."""
        expected = datetime.date.fromordinal(days + 1)
        assert day_count_to_ymd(days) == (expected.year, expected.month, expected.day)
        assert ymd_to_day_count(expected.year, expected.month, expected.day) == days

    def test_days_before_year(self) -> None:
        """Test day offsets of January 1st."""
        assert days_before_year(1) == 0
        assert days_before_year(2) == 365
        assert days_before_year(2024) == _day(2024, 1, 1)

    def test_day_before_epoch(self) -> None:
        """Test day -1 is the last day of year 0."""
        assert day_count_to_ymd(-1) == (0, 12, 31)
        assert ymd_to_day_count(0, 12, 31) == -1

    def test_month_counts(self) -> None:
        """Test month count helpers."""
        assert month_count_to_ym(0) == (1, 1)
        assert month_count_to_ym(13) == (2, 2)
        assert ym_to_month_count(2024, 3) == 2023 * 12 + 2


# ============================================================================
# Granularity conversion
# ============================================================================


class TestConvertGranuleCount:
    """Tests for convert_granule_count."""

    def test_same_granularity_is_identity(self) -> None:
        """Test converting to the same granularity returns the count."""
        assert convert_granule_count(42, D, D) == 42

    @pytest.mark.parametrize(
        "count,from_g,to_g,expected",
        [
            (2000, MS, S, 2),
            (1999, MS, S, 1),
            (2, S, MS, 2000),
            (47, H, D, 1),
            (1, D, H, 24),
            (90, S, MI, 1),
            (23, MO, Y, 1),
            (24, MO, Y, 2),
            (3, Y, MO, 36),
            (1, Y, D, 365),
            (4, Y, D, 1461),
            (364, D, Y, 0),
            (365, D, Y, 1),
            (1, MO, D, 31),
            (2, MO, D, 59),
        ],
    )
    def test_known_conversions(
        self, count: int, from_g: Granularity, to_g: Granularity, expected: int
    ) -> None:
        """Test conversions against hand-computed values."""
        assert convert_granule_count(count, from_g, to_g) == expected

    def test_accepts_integer_granularities(self) -> None:
        """Test plain integers are accepted as granularities."""
        assert convert_granule_count(1, 4, 3) == 24

    def test_month_lengths_honour_leap_years(self) -> None:
        """Test February has 29 days in 2024 and 28 in 2023."""
        feb_2024 = ym_to_month_count(2024, 2)
        feb_2023 = ym_to_month_count(2023, 2)

        assert convert_granule_count(feb_2024, MO, D) == _day(2024, 2, 1)
        assert (
            convert_granule_count(feb_2024 + 1, MO, D)
            - convert_granule_count(feb_2024, MO, D)
        ) == 29
        assert (
            convert_granule_count(feb_2023 + 1, MO, D)
            - convert_granule_count(feb_2023, MO, D)
        ) == 28

    def test_year_lengths_honour_leap_years(self) -> None:
        """Test 2024 has 366 days and 2023 has 365."""
        assert convert_granule_count(2024, Y, D) - convert_granule_count(2023, Y, D) == 366
        assert convert_granule_count(2023, Y, D) - convert_granule_count(2022, Y, D) == 365

    def test_coarsening_truncates_to_containing_granule(self) -> None:
        """Test any day of 2024 converts to the 2024 year granule."""
        assert convert_granule_count(_day(2024, 1, 1), D, Y) == 2023
        assert convert_granule_count(_day(2024, 12, 31), D, Y) == 2023
        assert convert_granule_count(_day(2024, 3, 15), D, MO) == ym_to_month_count(2024, 3)

    def test_aligned_round_trip_is_exact(self) -> None:
        """Test refine-coarsen-refine reproduces aligned counts."""
        start_of_2024 = _day(2024, 1, 1)
        years = convert_granule_count(start_of_2024, D, Y)
        assert convert_granule_count(years, Y, D) == start_of_2024

        two_hours = 2 * 3_600_000
        hours = convert_granule_count(two_hours, MS, H)
        assert convert_granule_count(hours, H, MS) == two_hours

    def test_unaligned_round_trip_is_lossy(self) -> None:
        """Test refine-coarsen-refine truncates unaligned counts."""
        mid_2024 = _day(2024, 6, 15)
        years = convert_granule_count(mid_2024, D, Y)
        assert convert_granule_count(years, Y, D) == _day(2024, 1, 1)
        assert convert_granule_count(years, Y, D) != mid_2024

    def test_invalid_granularity_raises(self) -> None:
        """Test values outside the enumeration raise GranularityError."""
        with pytest.raises(GranularityError):
            convert_granule_count(1, 7, D)
        with pytest.raises(GranularityError):
            convert_granule_count(1, D, -1)
        with pytest.raises(GranularityError):
            convert_granule_count(1, True, D)

    def test_overflowing_result_raises(self) -> None:
        """Test results beyond 64 bits raise GranuleOverflowError."""
        with pytest.raises(GranuleOverflowError):
            convert_granule_count(2**62, Y, MS)

    def test_overflowing_input_raises(self) -> None:
        """Test counts beyond 64 bits raise GranuleOverflowError."""
        with pytest.raises(GranuleOverflowError):
            convert_granule_count(2**63, MS, S)

    def test_overflow_is_conversion_error(self) -> None:
        """Test overflow is reported as a conversion error."""
        with pytest.raises(ConversionError):
            convert_granule_count(2**62, D, MS)


# ============================================================================
# Calendar fields
# ============================================================================


class TestFields:
    """Tests for granule count to and from calendar fields."""

    def test_count_to_fields(self) -> None:
        """Test a millisecond count resolves to every field."""
        count = 86_400_000 + 3_600_000 + 60_000 + 1_000 + 1
        assert granule_count_to_fields(count, MS) == (1, 1, 2, 1, 1, 1, 1)

    def test_fields_at_granule_start(self) -> None:
        """Test coarse granules resolve to their first moment."""
        assert granule_count_to_fields(13, MO) == (2, 2, 1, 0, 0, 0, 0)
        assert granule_count_to_fields(0, Y) == (1, 1, 1, 0, 0, 0, 0)

    def test_fields_to_count_truncates(self) -> None:
        """Test finer fields are dropped when converting to a coarse granule."""
        fields = (2024, 3, 5, 10, 20, 30, 456)
        assert fields_to_granule_count(fields, Y) == 2023
        assert fields_to_granule_count(fields, MO) == ym_to_month_count(2024, 3)
        assert fields_to_granule_count(fields, D) == _day(2024, 3, 5)
        assert fields_to_granule_count(fields, H) == _day(2024, 3, 5) * 24 + 10


# ============================================================================
# datetime and date interop
# ============================================================================


class TestDatetimeInterop:
    """Tests for datetime.datetime conversions."""

    def test_datetime_to_count(self) -> None:
        """Test a datetime converts at several granularities."""
        value = datetime.datetime(1970, 1, 1, 6, 30)
        assert datetime_to_granule_count(value, D) == 719_162
        assert datetime_to_granule_count(value, H) == 719_162 * 24 + 6
        assert datetime_to_granule_count(value, MI) == (719_162 * 24 + 6) * 60 + 30

    def test_microseconds_truncate_to_millis(self) -> None:
        """Test sub-millisecond precision is dropped."""
        value = datetime.datetime(1, 1, 1, 0, 0, 0, 1999)
        assert datetime_to_granule_count(value, MS) == 1

    def test_aware_datetime_raises(self) -> None:
        """Test timezone-aware datetimes are rejected."""
        value = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
        with pytest.raises(ConversionError, match="timezone-aware"):
            datetime_to_granule_count(value, D)

    def test_non_datetime_raises(self) -> None:
        """Test other types are rejected."""
        with pytest.raises(ConversionError, match="expected datetime"):
            datetime_to_granule_count("2024-01-01", D)  # type: ignore[arg-type]

    def test_count_to_datetime(self) -> None:
        """Test a count converts to the datetime of its granule start."""
        assert granule_count_to_datetime(719_162, D) == datetime.datetime(1970, 1, 1)
        assert granule_count_to_datetime(25, H) == datetime.datetime(1, 1, 2, 1)
        assert granule_count_to_datetime(1_500, MS) == datetime.datetime(
            1, 1, 1, 0, 0, 1, 500_000
        )

    def test_count_beyond_year_9999_raises(self) -> None:
        """Test granules outside the calendar range raise."""
        with pytest.raises(GranuleOverflowError):
            granule_count_to_datetime(9999, Y)


class TestDateInterop:
    """Tests for datetime.date conversions."""

    def test_date_to_count(self) -> None:
        """Test a date converts at several granularities."""
        value = datetime.date(2024, 3, 5)
        assert date_to_granule_count(value, D) == _day(2024, 3, 5)
        assert date_to_granule_count(value, MO) == ym_to_month_count(2024, 3)
        assert date_to_granule_count(value, H) == _day(2024, 3, 5) * 24

    def test_datetime_uses_date_part(self) -> None:
        """Test a datetime argument is taken at the start of its day."""
        value = datetime.datetime(2024, 3, 5, 23, 59)
        assert date_to_granule_count(value, H) == _day(2024, 3, 5) * 24

    def test_non_date_raises(self) -> None:
        """Test other types are rejected."""
        with pytest.raises(ConversionError, match="expected date"):
            date_to_granule_count(738_949, D)  # type: ignore[arg-type]

    def test_count_to_date(self) -> None:
        """Test a count converts to the date of its granule start."""
        assert granule_count_to_date(ym_to_month_count(2024, 2), MO) == datetime.date(
            2024, 2, 1
        )
        assert granule_count_to_date(_day(2024, 3, 5) * 24 + 23, H) == datetime.date(
            2024, 3, 5
        )


class TestEpoch:
    """Tests for Unix millisecond conversions."""

    def test_unix_epoch(self) -> None:
        """Test Unix millisecond 0 is 1970-01-01."""
        assert unix_millis_to_granule_count(0, D) == 719_162
        assert unix_millis_to_granule_count(0, Y) == 1969
        assert granule_count_to_unix_millis(719_162, D) == 0

    def test_before_unix_epoch(self) -> None:
        """Test negative Unix milliseconds floor to the previous granule."""
        assert unix_millis_to_granule_count(-1, D) == 719_161

    def test_round_trip_at_millis(self) -> None:
        """Test millisecond counts survive a Unix round trip."""
        millis = 1_709_634_030_456
        count = unix_millis_to_granule_count(millis, MS)
        assert granule_count_to_unix_millis(count, MS) == millis

    def test_granule_start(self) -> None:
        """Test coarse granules convert to their first millisecond."""
        assert granule_count_to_unix_millis(719_163, D) == 86_400_000
