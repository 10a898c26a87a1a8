"""Two-month range picker rendered with tkinter."""

import calendar as _cal
import logging
import tkinter as tk
from datetime import date
from tkinter import font as tkfont
from tkinter import ttk

from calendar_logic import DateRange, DayCell, MonthView, iso_week_numbers, weekday_headers
from month_year_select import month_options, year_options
from picker import PickerShell

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
WN_FG = "#888888"
GRAYOUT_FG = "#BBBBBB"
WEEKEND_FG = "#CC0000"

_MAX_WEEKS = 6


class _MonthPanel:
    """Pre-allocated widget pool for a single month (header + 6 weeks max)."""

    __slots__ = ("frame", "header", "title", "day_headers", "week_nums", "day_cells")

    def __init__(self, parent: tk.Frame, fonts: dict, headers: list[str],
                 on_click, on_focus, on_key) -> None:
        self.frame = tk.Frame(parent, bg=GRID_BG)

        self.header = tk.Frame(self.frame, bg=HEADER_BG)
        self.header.grid(row=0, column=0, columnspan=8, sticky="we", pady=(0, 2))
        self.title = tk.Label(
            self.header, font=fonts["header"], bg=HEADER_BG, fg="#333333",
        )

        tk.Label(
            self.frame, text="Wk", font=fonts["bold"], bg=GRID_BG, fg=WN_FG, width=3,
        ).grid(row=1, column=0)

        self.day_headers: list[tk.Label] = []
        for col, abbr in enumerate(headers):
            fg = WEEKEND_FG if abbr in ("Sat", "Sun") else "#333333"
            lbl = tk.Label(
                self.frame, text=abbr, font=fonts["bold"], bg=GRID_BG, fg=fg, width=3,
            )
            lbl.grid(row=1, column=col + 1)
            self.day_headers.append(lbl)

        self.week_nums: list[tk.Label] = []
        self.day_cells: list[list[tk.Canvas]] = []
        for r in range(_MAX_WEEKS):
            grid_row = r + 2
            wn = tk.Label(
                self.frame, font=fonts["wn"], bg=GRID_BG, fg=WN_FG, width=3,
            )
            wn.grid(row=grid_row, column=0)
            self.week_nums.append(wn)

            row_cells: list[tk.Canvas] = []
            for c in range(7):
                cell = tk.Canvas(
                    self.frame, width=fonts["cell_w"], height=fonts["cell_h"],
                    bg=GRID_BG, borderwidth=0, takefocus=1,
                    highlightthickness=1, highlightbackground=GRID_BG,
                    highlightcolor=ACCENT,
                )
                cell.grid(row=grid_row, column=c + 1)
                # Bound once — handlers look the date up in _widget_dates
                cell.bind("<Button-1>", on_click)
                cell.bind("<FocusIn>", on_focus)
                cell.bind("<KeyPress>", on_key)
                row_cells.append(cell)
            self.day_cells.append(row_cells)


class PickerWindow:
    """Renders a PickerShell and feeds user events back into it.

    The host owns the highlight range: call :meth:`set_highlight_range` with
    whatever the shell's ``on_range_change`` reported (or anything else) to
    change what is shown as in-range.
    """

    def __init__(self, parent: tk.Misc, shell: PickerShell) -> None:
        self.parent = parent
        self.shell = shell
        self._setup_fonts()

        # Widget-to-date mapping, every rendered cell
        self._widget_dates: dict[int, date] = {}
        # Date-to-widget mapping, in-month cells only
        self._date_widgets: dict[date, tk.Canvas] = {}

        _tmp = tk.Label(parent, text="00", font=self.font_normal, width=3)
        _tmp.update_idletasks()
        self._panel_fonts = {
            "header": self.font_header, "bold": self.font_bold,
            "wn": self.font_wn,
            "cell_w": _tmp.winfo_reqwidth(), "cell_h": _tmp.winfo_reqheight(),
        }
        _tmp.destroy()

        self.frame = tk.Frame(parent, bg=GRID_BG)
        self._build()
        self.render()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.parent)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_wn = tkfont.Font(family=base, size=8)

    # ------------------------------------------------------------------
    # Build (once) — two month panels + nav row
    # ------------------------------------------------------------------
    def _build(self) -> None:
        months_frame = tk.Frame(self.frame, bg=GRID_BG)
        months_frame.pack(padx=6, pady=4)

        headers = weekday_headers(self.shell.week_starts_on)
        self._panels = [
            _MonthPanel(months_frame, self._panel_fonts, headers,
                        self._on_click, self._on_focus, self._on_key)
            for _ in range(2)
        ]
        for i, panel in enumerate(self._panels):
            panel.frame.grid(row=0, column=i, padx=6, pady=2, sticky="n")

        # First pane: month + year pickers instead of a plain title
        first = self._panels[0].header
        self._month_box = ttk.Combobox(
            first, state="readonly", width=5,
            values=[label for _i, label in month_options(self.shell.reference_month)],
        )
        self._month_box.pack(side="left", padx=(2, 4))
        self._month_box.bind("<<ComboboxSelected>>", self._on_month_selected)
        self._year_box = ttk.Combobox(first, state="readonly", width=6)
        self._year_box.pack(side="left")
        self._year_box.bind("<<ComboboxSelected>>", self._on_year_selected)
        self._panels[1].title.pack(fill="x")

        # Navigation row: ◀  Today  ▶
        nav = tk.Frame(self.frame, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 4))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=GRID_BG, cursor="hand2"
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=GRID_BG, cursor="hand2"
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        btn_today = tk.Label(
            nav, text="Today", font=self.font_bold, bg=GRID_BG, fg=ACCENT,
            cursor="hand2",
        )
        btn_today.pack(side="top")
        btn_today.bind("<Button-1>", lambda _e: self._go_today())

    # ------------------------------------------------------------------
    # Render — reconfigure pooled panels, then follow keyboard focus
    # ------------------------------------------------------------------
    def render(self) -> None:
        self._widget_dates.clear()
        self._date_widgets.clear()

        views = self.shell.months()
        for panel, view in zip(self._panels, views):
            self._fill_panel(panel, view)

        ref = self.shell.reference_month
        self._month_box.current(ref.month - 1)
        self._year_box.configure(values=year_options(ref))
        self._year_box.set(str(ref.year))

        target = self.shell.take_focus_request(self._focused_date())
        if target is not None:
            self._date_widgets[target].focus_set()

    def _fill_panel(self, panel: _MonthPanel, view: MonthView) -> None:
        """Reconfigure an existing panel's cells — no widget creation."""
        panel.title.configure(text=f"{_cal.month_name[view.month]} {view.year}")
        weeks = view.weeks()
        week_nums = iso_week_numbers(view)

        for r in range(_MAX_WEEKS):
            if r < len(weeks):
                panel.week_nums[r].configure(text=week_nums[r])
                for c, day in enumerate(weeks[r]):
                    cell = panel.day_cells[r][c]
                    cell.grid()
                    self._draw_cell(cell, day)
                    self._widget_dates[id(cell)] = day.date
                    if not day.is_outside_displayed_month:
                        self._date_widgets[day.date] = cell
            else:
                panel.week_nums[r].configure(text="")
                for cell in panel.day_cells[r]:
                    cell.delete("all")
                    cell.grid_remove()

    # ------------------------------------------------------------------
    # Day colour logic — one DayCell flag per visual state
    # ------------------------------------------------------------------
    @staticmethod
    def _day_colors(day: DayCell) -> tuple[str, str]:
        if day.is_today:
            return ACCENT, "white"
        if day.is_in_highlight_range:
            return SEL_BG, "black"
        if day.is_outside_displayed_month:
            return GRID_BG, GRAYOUT_FG
        if day.is_weekend:
            return GRID_BG, WEEKEND_FG
        return GRID_BG, "black"

    def _draw_cell(self, cell: tk.Canvas, day: DayCell) -> None:
        cell.delete("all")
        w = int(cell["width"])
        h = int(cell["height"])
        bg, fg = self._day_colors(day)
        cell.configure(bg=bg, cursor="hand2")
        if day.is_selected:
            cell.create_rectangle(1, 1, w - 1, h - 1, outline=ACCENT, width=2)
        font = self.font_bold if day.is_today or day.is_selected else self.font_normal
        cell.create_text(w // 2, h // 2, text=day.label, fill=fg, font=font)

    def _focused_date(self) -> date | None:
        try:
            w = self.parent.focus_get()
        except KeyError:
            # focus_get() fails while a combobox popdown holds focus
            return None
        return self._widget_dates.get(id(w)) if w is not None else None

    # ------------------------------------------------------------------
    # Host input
    # ------------------------------------------------------------------
    def set_highlight_range(self, highlight: DateRange) -> None:
        self.shell.set_highlight_range(highlight)
        self.render()

    # ------------------------------------------------------------------
    # Day events
    # ------------------------------------------------------------------
    def _on_click(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d is None:
            return
        event.widget.focus_set()
        self.shell.click(d)
        self.render()

    def _on_focus(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d is not None and d != self.shell.focused_date:
            self.shell.day_focused(d)
            self.render()

    def _on_key(self, event: tk.Event) -> str | None:
        if self.shell.key_down(event.keysym):
            self.render()
            return "break"
        return None

    # ------------------------------------------------------------------
    # Month / year pickers
    # ------------------------------------------------------------------
    def _on_month_selected(self, _event: tk.Event) -> None:
        self._apply_selector(self.shell.select_month, self._month_box.current())

    def _on_year_selected(self, _event: tk.Event) -> None:
        self._apply_selector(self.shell.select_year, self._year_box.get())

    def _apply_selector(self, select, value) -> None:
        try:
            select(value)
        except ValueError as e:
            logger.warning("keeping current month, rejected picker value %r: %s", value, e)
        self.render()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _navigate(self, direction: int) -> None:
        self.shell.step_month(direction)
        self.render()

    def _go_today(self) -> None:
        self.shell.reset_to_today()
        self.render()
