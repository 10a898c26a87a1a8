"""Tests for keyboard focus navigation and focus requests."""

from datetime import date

from calendar_logic import generate_month
from focus_nav import KEY_DELTAS, FocusNavigator

TODAY = date(2024, 3, 15)


def views(*refs: date):
    return [generate_month(r, 0, today=TODAY) for r in refs]


MARCH_APRIL = views(date(2024, 3, 1), date(2024, 4, 1))


class TestMove:
    """Tests for FocusNavigator.move."""

    def test_no_focus_is_noop(self) -> None:
        """Arrow keys do nothing before any day was focused."""
        nav = FocusNavigator()

        assert nav.move(7) is None
        assert nav.focused_date is None
        assert nav.take_focus_request(MARCH_APRIL, None) is None

    def test_arrow_down_is_one_week(self) -> None:
        """ArrowDown from D lands on D+7."""
        nav = FocusNavigator()
        nav.day_focused(date(2024, 3, 10))

        assert nav.move(KEY_DELTAS["ArrowDown"]) == date(2024, 3, 17)
        assert nav.move(KEY_DELTAS["Up"]) == date(2024, 3, 10)
        assert nav.move(KEY_DELTAS["Left"]) == date(2024, 3, 9)
        assert nav.move(KEY_DELTAS["ArrowRight"]) == date(2024, 3, 10)

    def test_move_crosses_month(self) -> None:
        """Moves are plain day arithmetic across month ends."""
        nav = FocusNavigator()
        nav.day_focused(date(2024, 3, 28))

        assert nav.move(7) == date(2024, 4, 4)


class TestFocusRequest:
    """Tests for take_focus_request."""

    def test_request_issued_once_per_change(self) -> None:
        """A change yields one request; re-rendering yields none."""
        nav = FocusNavigator()
        nav.day_focused(date(2024, 3, 10))
        nav.take_focus_request(MARCH_APRIL, date(2024, 3, 10))

        nav.move(7)

        assert nav.take_focus_request(MARCH_APRIL, date(2024, 3, 10)) == date(2024, 3, 17)
        assert nav.take_focus_request(MARCH_APRIL, date(2024, 3, 10)) is None

    def test_already_focused_cell_is_not_requested(self) -> None:
        """A cell that just received focus doesn't get a request."""
        nav = FocusNavigator()
        nav.day_focused(date(2024, 3, 10))

        assert nav.take_focus_request(MARCH_APRIL, date(2024, 3, 10)) is None
        assert nav.take_focus_request(MARCH_APRIL, None) is None

    def test_refocusing_same_day_is_not_a_change(self) -> None:
        """Focusing the already focused date arms nothing."""
        nav = FocusNavigator()
        nav.day_focused(date(2024, 3, 10))
        nav.take_focus_request(MARCH_APRIL, date(2024, 3, 10))

        nav.day_focused(date(2024, 3, 10))

        assert nav.take_focus_request(MARCH_APRIL, None) is None

    def test_padding_day_resolves_to_real_cell(self) -> None:
        """May 1 is padding in the April pane but real in the May pane."""
        april_may = views(date(2024, 4, 1), date(2024, 5, 1))
        nav = FocusNavigator()
        nav.day_focused(date(2024, 4, 30))
        nav.take_focus_request(april_may, date(2024, 4, 30))

        nav.move(1)

        assert nav.take_focus_request(april_may, None) == date(2024, 5, 1)

    def test_offscreen_date_waits_until_visible(self) -> None:
        """Stepping before the visible range defers the request."""
        nav = FocusNavigator()
        nav.day_focused(date(2024, 3, 2))
        nav.take_focus_request(MARCH_APRIL, date(2024, 3, 2))

        nav.move(-7)

        assert nav.focused_date == date(2024, 2, 24)
        assert nav.take_focus_request(MARCH_APRIL, None) is None
        assert nav.take_focus_request(MARCH_APRIL, None) is None

        feb_mar = views(date(2024, 2, 1), date(2024, 3, 1))
        assert nav.take_focus_request(feb_mar, None) == date(2024, 2, 24)
        assert nav.take_focus_request(feb_mar, None) is None
