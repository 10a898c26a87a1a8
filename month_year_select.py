"""Month and year pickers: option lists and reference-date replacement."""

import calendar
from datetime import date

from date_utils import set_month, set_year

YEARS_BEFORE = 4
YEAR_WINDOW = 10


def _parse_index(value: int | str, what: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"{what} must be a whole number, got {value!r}")


def month_options(reference: date) -> list[tuple[int, str]]:
    """The 12 months in calendar order as ``(index, label)``, index 0–11."""
    return [(i, calendar.month_abbr[i + 1]) for i in range(12)]


def year_options(reference: date) -> list[int]:
    """Ten years, from four before *reference*'s year to five after."""
    first = reference.year - YEARS_BEFORE
    return list(range(first, first + YEAR_WINDOW))


def select_month(value: int | str, reference: date) -> date:
    """Move *reference* to month index *value* (0–11), keeping year and day.

    The day is clamped to the target month's length. Raises ValueError for
    non-numeric or out-of-range input.
    """
    index = _parse_index(value, "month")
    if not 0 <= index <= 11:
        raise ValueError(f"month index must be 0..11, got {index}")
    return set_month(reference, index + 1)


def select_year(value: int | str, reference: date) -> date:
    """Move *reference* to *value*'s year, keeping month and day (clamped)."""
    year = _parse_index(value, "year")
    return set_year(reference, year)
