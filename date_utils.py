"""Calendar date arithmetic — pure functions over ``datetime.date``.

Weekdays use Python's numbering: 0 = Monday ... 6 = Sunday.
"""

import calendar
from datetime import date, timedelta

MONDAY = 0
SUNDAY = 6


def check_weekday(week_starts_on: int) -> int:
    """Return *week_starts_on* unchanged, or raise ValueError if not 0..6."""
    if not isinstance(week_starts_on, int) or not 0 <= week_starts_on <= 6:
        raise ValueError(f"week_starts_on must be 0..6, got {week_starts_on!r}")
    return week_starts_on


def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)


def set_month(d: date, month: int) -> date:
    """Replace the month (1–12), clamping the day to the month length."""
    last = calendar.monthrange(d.year, month)[1]
    return d.replace(month=month, day=min(d.day, last))


def set_year(d: date, year: int) -> date:
    """Replace the year, clamping Feb 29 to Feb 28 in non-leap years."""
    last = calendar.monthrange(year, d.month)[1]
    return d.replace(year=year, day=min(d.day, last))


def add_months(d: date, n: int) -> date:
    """Shift by *n* months, clamping the day to the target month length."""
    year, month0 = divmod(d.year * 12 + (d.month - 1) + n, 12)
    last = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(d.day, last))


def add_years(d: date, n: int) -> date:
    return set_year(d, d.year + n)


def start_of_month(d: date) -> date:
    return d.replace(day=1)


def end_of_month(d: date) -> date:
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def start_of_year(d: date) -> date:
    return date(d.year, 1, 1)


def start_of_week(d: date, week_starts_on: int = MONDAY) -> date:
    """Return the first day of the week containing *d*."""
    offset = (d.weekday() - check_weekday(week_starts_on)) % 7
    return d - timedelta(days=offset)


def end_of_week(d: date, week_starts_on: int = MONDAY) -> date:
    """Return the last day of the week containing *d*."""
    return start_of_week(d, week_starts_on) + timedelta(days=6)


def days_between_inclusive(start: date, end: date) -> int:
    """Number of calendar days from *start* to *end*, counting both ends."""
    return (end - start).days + 1


def is_same_day(a: date | None, b: date | None) -> bool:
    return a is not None and b is not None and a == b


def is_same_month(a: date, b: date) -> bool:
    return (a.year, a.month) == (b.year, b.month)


def is_weekend(d: date) -> bool:
    return d.weekday() >= 5


def is_within_interval(d: date, start: date, end: date) -> bool:
    """Inclusive interval test. Raises ValueError if *start* is after *end*."""
    if start > end:
        raise ValueError(f"invalid interval: {start} is after {end}")
    return start <= d <= end


def format_date(d: date, fmt: str) -> str:
    return d.strftime(fmt)
