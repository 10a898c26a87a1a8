"""Pure calendar calculations — no UI dependencies.

Builds the week-aligned day grid for one month and tags every day with the
flags the rendering layer maps to visual state.
"""

import calendar
import functools
from dataclasses import dataclass
from datetime import date, timedelta

from date_utils import (
    check_weekday,
    days_between_inclusive,
    end_of_month,
    end_of_week,
    is_same_day,
    is_same_month,
    is_weekend,
    is_within_interval,
    start_of_month,
    start_of_week,
)

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def weekday_headers(week_starts_on: int) -> list[str]:
    """Column headers rotated so the grid's first column comes first."""
    check_weekday(week_starts_on)
    return DAY_ABBR[week_starts_on:] + DAY_ABBR[:week_starts_on]


@dataclass(frozen=True)
class DateRange:
    """Ordered pair of optional dates.

    ``(None, None)`` is cleared, ``(start, None)`` is open and
    ``(start, end)`` is closed with ``start <= end``.
    """

    start: date | None = None
    end: date | None = None

    def __post_init__(self) -> None:
        if self.end is not None:
            if self.start is None:
                raise ValueError("a range with an end needs a start")
            if self.start > self.end:
                raise ValueError(f"range start {self.start} is after end {self.end}")

    @property
    def is_cleared(self) -> bool:
        return self.start is None and self.end is None

    @property
    def is_open(self) -> bool:
        return self.start is not None and self.end is None

    @property
    def is_closed(self) -> bool:
        return self.end is not None

    def contains(self, d: date) -> bool:
        """True if the range is closed and *d* falls inside it (inclusive)."""
        if self.start is None or self.end is None:
            return False
        return is_within_interval(d, self.start, self.end)

    def as_tuple(self) -> tuple[date | None, date | None]:
        return self.start, self.end


CLEARED = DateRange()


@dataclass(frozen=True)
class DayCell:
    """One date as rendered inside one month."""

    date: date
    is_today: bool
    is_outside_displayed_month: bool
    is_weekend: bool
    is_selected: bool
    is_in_highlight_range: bool

    @property
    def label(self) -> str:
        return str(self.date.day)


@dataclass(frozen=True)
class MonthView:
    """Week-aligned cells for one month, padding days included."""

    year: int
    month: int
    cells: tuple[DayCell, ...]

    @property
    def title(self) -> str:
        return calendar.month_abbr[self.month]

    def weeks(self) -> list[tuple[DayCell, ...]]:
        """Split the cells into rows of 7."""
        return [self.cells[i:i + 7] for i in range(0, len(self.cells), 7)]

    def visible_dates(self) -> set[date]:
        """Dates rendered as in-month (non-padding) cells."""
        return {c.date for c in self.cells if not c.is_outside_displayed_month}


@functools.lru_cache(maxsize=128)
def _grid_dates(year: int, month: int, week_starts_on: int) -> tuple[date, ...]:
    first = date(year, month, 1)
    grid_start = start_of_week(first, week_starts_on)
    grid_end = end_of_week(end_of_month(first), week_starts_on)
    total = days_between_inclusive(grid_start, grid_end)
    return tuple(grid_start + timedelta(days=i) for i in range(total))


def month_dates(reference: date, week_starts_on: int) -> tuple[date, ...]:
    """Return every date of the grid for *reference*'s month.

    The grid starts on *week_starts_on* of the week holding the 1st and ends
    on the last day of the week holding the month's last day, so its length
    is 28, 35 or 42.
    """
    check_weekday(week_starts_on)
    first = start_of_month(reference)
    return _grid_dates(first.year, first.month, week_starts_on)


def generate_month(
    reference: date,
    week_starts_on: int,
    *,
    today: date | None = None,
    selected: date | None = None,
    highlight: DateRange = CLEARED,
) -> MonthView:
    """Build the MonthView for *reference*'s month."""
    if today is None:
        today = date.today()
    cells = tuple(
        DayCell(
            date=d,
            is_today=d == today,
            is_outside_displayed_month=not is_same_month(d, reference),
            is_weekend=is_weekend(d),
            is_selected=is_same_day(d, selected),
            is_in_highlight_range=highlight.contains(d),
        )
        for d in month_dates(reference, week_starts_on)
    )
    return MonthView(reference.year, reference.month, cells)


def iso_week_numbers(view: MonthView) -> list[str]:
    """Return the ISO week number of each grid row, as text.

    The fourth cell decides, so rows that don't start on Monday still get
    the week most of their days belong to.
    """
    return [str(row[3].date.isocalendar()[1]) for row in view.weeks()]


def day_of_year(d: date) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.timetuple().tm_yday


def format_range(r: DateRange, fmt: str = "%d/%m/%Y") -> str:
    """Readout text: both endpoints, ``"empty"`` for a missing one."""
    return " | ".join(d.strftime(fmt) if d else "empty" for d in r.as_tuple())


def range_summary(r: DateRange) -> str:
    """Length of a closed range, e.g. ``"10 days (1 week, 3 days)"``."""
    if r.start is None or r.end is None:
        return ""
    total_days = days_between_inclusive(r.start, r.end)
    full_weeks, rem_days = divmod(total_days, 7)

    parts: list[str] = []
    if full_weeks:
        parts.append(f"{full_weeks} week{'s' if full_weeks != 1 else ''}")
    if rem_days:
        parts.append(f"{rem_days} day{'s' if rem_days != 1 else ''}")
    return f"{total_days} day{'s' if total_days != 1 else ''} ({', '.join(parts)})"
