"""Range selection state machine.

The controller keeps a private *anchor* range. A commit on an empty or open
anchor closes it (sorted ascending); a commit on a closed anchor starts a new
open one without announcing a range. Every commit also announces the single
selected date.

The anchor is never what gets highlighted: the host receives each emitted
range and decides what to feed back as the highlight range.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from calendar_logic import CLEARED, DateRange

logger = logging.getLogger(__name__)


def _noop(_value) -> None:
    pass


@dataclass(frozen=True)
class CommitResult:
    anchor: DateRange
    notify: DateRange | None  # None when no range was announced
    selected_date: date


class SelectionController:
    """Owns the in-progress anchor and the selected date."""

    def __init__(
        self,
        selected_date: date,
        on_range_change: Callable[[DateRange], None] = _noop,
        on_date_selected: Callable[[date], None] = _noop,
    ) -> None:
        self._anchor: DateRange = CLEARED
        self._selected_date = selected_date
        self._on_range_change = on_range_change
        self._on_date_selected = on_date_selected

    @property
    def anchor(self) -> DateRange:
        return self._anchor

    @property
    def selected_date(self) -> date:
        return self._selected_date

    def commit(self, d: date) -> CommitResult:
        """Apply one click / keyboard confirm on *d*."""
        notify: DateRange | None = None
        if self._anchor.is_closed:
            self._anchor = DateRange(d, None)
            logger.debug("anchor reopened at %s", d)
        else:
            lo, hi = sorted((self._anchor.start or d, d))
            self._anchor = DateRange(lo, hi)
            notify = self._anchor
            logger.debug("anchor closed: %s -> %s", lo, hi)

        self._selected_date = d
        if notify is not None:
            self._on_range_change(notify)
        self._on_date_selected(d)
        return CommitResult(self._anchor, notify, d)
