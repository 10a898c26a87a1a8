"""Tests for date_utils pure functions."""

from datetime import date

import pytest

from date_utils import (
    add_days,
    add_months,
    add_years,
    check_weekday,
    days_between_inclusive,
    end_of_month,
    end_of_week,
    is_same_day,
    is_same_month,
    is_weekend,
    is_within_interval,
    set_month,
    set_year,
    start_of_week,
)


class TestMonthArithmetic:
    """Tests for add_months / set_month / set_year."""

    def test_add_month_crosses_year(self) -> None:
        """Should roll December into January of the next year."""
        assert add_months(date(2024, 12, 15), 1) == date(2025, 1, 15)

    def test_add_negative_months(self) -> None:
        """Should step back across the year boundary."""
        assert add_months(date(2024, 1, 10), -2) == date(2023, 11, 10)

    def test_add_month_clamps_day(self) -> None:
        """Should clamp Jan 31 to the end of February."""
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_set_month_clamps_day(self) -> None:
        """Should clamp day 31 into a 30-day month."""
        assert set_month(date(2024, 5, 31), 6) == date(2024, 6, 30)

    def test_set_year_from_leap_day(self) -> None:
        """Should clamp Feb 29 to Feb 28 in a non-leap year."""
        assert set_year(date(2024, 2, 29), 2023) == date(2023, 2, 28)
        assert add_years(date(2024, 2, 29), 4) == date(2028, 2, 29)

    def test_end_of_month(self) -> None:
        """Should find the last day of the month."""
        assert end_of_month(date(2024, 2, 10)) == date(2024, 2, 29)


class TestWeeks:
    """Tests for week alignment."""

    def test_start_of_week_monday(self) -> None:
        """Friday Mar 1 2024 belongs to the week starting Monday Feb 26."""
        assert start_of_week(date(2024, 3, 1), 0) == date(2024, 2, 26)

    def test_start_of_week_sunday(self) -> None:
        """With Sunday starts, Mar 1 2024 belongs to the week of Feb 25."""
        assert start_of_week(date(2024, 3, 1), 6) == date(2024, 2, 25)

    def test_start_of_week_is_idempotent(self) -> None:
        """A day that already starts a week maps to itself."""
        assert start_of_week(date(2024, 2, 26), 0) == date(2024, 2, 26)

    def test_end_of_week(self) -> None:
        """Sunday Mar 31 2024 already ends its Monday-started week."""
        assert end_of_week(date(2024, 3, 31), 0) == date(2024, 3, 31)
        assert end_of_week(date(2024, 3, 31), 6) == date(2024, 4, 6)

    @pytest.mark.parametrize("bad", [-1, 7, "1", 1.0])
    def test_invalid_week_start(self, bad) -> None:
        """Should reject week starts outside 0..6."""
        with pytest.raises(ValueError):
            check_weekday(bad)


class TestComparisons:
    """Tests for day comparisons."""

    def test_same_day_handles_none(self) -> None:
        """None never equals a date."""
        assert is_same_day(date(2024, 3, 1), date(2024, 3, 1))
        assert not is_same_day(None, date(2024, 3, 1))
        assert not is_same_day(None, None)

    def test_same_month(self) -> None:
        """Same month number in another year is not the same month."""
        assert is_same_month(date(2024, 3, 1), date(2024, 3, 31))
        assert not is_same_month(date(2024, 3, 1), date(2023, 3, 1))

    def test_weekend_is_saturday_and_sunday_only(self) -> None:
        """Only Saturday and Sunday are weekend days."""
        week = [add_days(date(2024, 3, 4), i) for i in range(7)]  # Mon..Sun
        assert [is_weekend(d) for d in week] == [False] * 5 + [True, True]

    def test_interval_is_inclusive(self) -> None:
        """Both endpoints are inside the interval."""
        start, end = date(2024, 3, 5), date(2024, 3, 10)
        assert is_within_interval(start, start, end)
        assert is_within_interval(end, start, end)
        assert not is_within_interval(date(2024, 3, 11), start, end)

    def test_reversed_interval_raises(self) -> None:
        """Should raise ValueError when start is after end."""
        with pytest.raises(ValueError):
            is_within_interval(date(2024, 3, 6), date(2024, 3, 10), date(2024, 3, 5))

    def test_days_between_inclusive(self) -> None:
        """Counts both ends."""
        assert days_between_inclusive(date(2024, 2, 26), date(2024, 3, 31)) == 35
        assert days_between_inclusive(date(2024, 3, 1), date(2024, 3, 1)) == 1
