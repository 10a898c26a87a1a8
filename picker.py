"""Two-month picker: composes grids, selection and keyboard focus.

The highlight range is controlled by the host. Ranges the picker emits only
show up highlighted once the host passes them back through
:meth:`PickerShell.set_highlight_range`.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

import month_year_select
from calendar_logic import CLEARED, DateRange, MonthView, generate_month
from date_utils import MONDAY, add_months, check_weekday
from focus_nav import COMMIT_KEYS, KEY_DELTAS, FocusNavigator
from selection import CommitResult, SelectionController

logger = logging.getLogger(__name__)


def _noop(_value) -> None:
    pass


@dataclass(frozen=True)
class PickerConfig:
    initial_selected_date: date | None = None  # None means today
    week_starts_on: int = MONDAY
    on_range_change: Callable[[DateRange], None] = _noop
    on_date_selected: Callable[[date], None] = _noop
    today: Callable[[], date] = date.today


class PickerShell:
    """Headless state of one picker instance."""

    def __init__(self, config: PickerConfig | None = None,
                 highlight_range: DateRange = CLEARED) -> None:
        self.config = config or PickerConfig()
        self.week_starts_on = check_weekday(self.config.week_starts_on)
        initial = self.config.initial_selected_date or self.config.today()

        self._reference = initial
        self._highlight = highlight_range
        self.selection = SelectionController(
            initial,
            on_range_change=self.config.on_range_change,
            on_date_selected=self.config.on_date_selected,
        )
        self.focus = FocusNavigator()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def reference_month(self) -> date:
        return self._reference

    @property
    def next_month(self) -> date:
        return add_months(self._reference, 1)

    @property
    def highlight_range(self) -> DateRange:
        return self._highlight

    @property
    def anchor(self) -> DateRange:
        return self.selection.anchor

    @property
    def selected_date(self) -> date:
        return self.selection.selected_date

    @property
    def focused_date(self) -> date | None:
        return self.focus.focused_date

    # ------------------------------------------------------------------
    # Host input
    # ------------------------------------------------------------------
    def set_highlight_range(self, highlight: DateRange) -> None:
        self._highlight = highlight

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _set_reference(self, d: date) -> None:
        self._reference = d
        logger.debug("reference month -> %s", self._reference.strftime("%Y-%m"))

    def step_month(self, delta: int) -> None:
        self._set_reference(add_months(self._reference, delta))

    def reset_to_today(self) -> None:
        self._set_reference(self.config.today())

    def select_month(self, value: int | str) -> None:
        self._set_reference(month_year_select.select_month(value, self._reference))

    def select_year(self, value: int | str) -> None:
        self._set_reference(month_year_select.select_year(value, self._reference))

    # ------------------------------------------------------------------
    # Rendering input
    # ------------------------------------------------------------------
    def months(self) -> tuple[MonthView, MonthView]:
        """Current and next month, flagged against today, selection and highlight."""
        today = self.config.today()
        return tuple(
            generate_month(
                ref,
                self.week_starts_on,
                today=today,
                selected=self.selected_date,
                highlight=self._highlight,
            )
            for ref in (self._reference, self.next_month)
        )

    # ------------------------------------------------------------------
    # User events
    # ------------------------------------------------------------------
    def click(self, d: date) -> CommitResult:
        logger.debug("commit %s", d)
        return self.selection.commit(d)

    def day_focused(self, d: date) -> None:
        self.focus.day_focused(d)

    def key_down(self, key: str) -> bool:
        """Handle one key press; return True if the key was consumed."""
        delta = KEY_DELTAS.get(key)
        if delta is not None:
            self.focus.move(delta)
            return True
        if key in COMMIT_KEYS:
            focused = self.focus.focused_date
            if focused is not None:
                self.click(focused)
            return True
        return False

    def take_focus_request(self, has_focus: date | None = None) -> date | None:
        return self.focus.take_focus_request(self.months(), has_focus)
