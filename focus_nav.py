"""Keyboard focus tracking, separate from selection."""

import logging
from datetime import date
from typing import Iterable

from calendar_logic import MonthView
from date_utils import add_days

logger = logging.getLogger(__name__)

# tkinter keysyms and DOM key names
KEY_DELTAS: dict[str, int] = {
    "Up": -7,
    "Down": 7,
    "Left": -1,
    "Right": 1,
    "ArrowUp": -7,
    "ArrowDown": 7,
    "ArrowLeft": -1,
    "ArrowRight": 1,
}

COMMIT_KEYS = frozenset({"Return", "KP_Enter", "Enter", "space", " "})


class FocusNavigator:
    """Tracks the keyboard-focused date and hands out focus requests.

    Each change of the focused date arms exactly one request. The request is
    released by :meth:`take_focus_request` once the date is on screen as an
    in-month cell, so re-rendering with an unchanged focus never steals focus
    again.
    """

    def __init__(self) -> None:
        self._focused: date | None = None
        self._pending: date | None = None

    @property
    def focused_date(self) -> date | None:
        return self._focused

    def _set(self, d: date) -> None:
        if d == self._focused:
            return
        self._focused = d
        self._pending = d

    def day_focused(self, d: date) -> None:
        """A day cell received input focus."""
        self._set(d)

    def move(self, delta: int) -> date | None:
        """Shift the focused date by *delta* days; no-op without focus."""
        if self._focused is None:
            return None
        self._set(add_days(self._focused, delta))
        return self._focused

    def take_focus_request(
        self, views: Iterable[MonthView], has_focus: date | None
    ) -> date | None:
        """Return the date whose cell should grab input focus, at most once.

        *has_focus* is the date of the cell currently holding input focus,
        if any.
        """
        target = self._pending
        if target is None:
            return None
        if not any(target in v.visible_dates() for v in views):
            return None
        self._pending = None
        if target == has_focus:
            return None
        logger.debug("focus request for %s", target)
        return target
