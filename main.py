"""Entry point — glues pystray (daemon thread) with the tkinter range picker."""

import ctypes
import logging
import threading
import tkinter as tk
from datetime import date

from calendar_logic import CLEARED, DateRange, day_of_year, format_range, range_summary
from date_utils import add_days
from icon_gen import create_icon_image
from picker import PickerConfig, PickerShell
from picker_window import GRID_BG, PickerWindow
from settings import load_settings, range_from_setting, range_to_setting, save_settings
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def _sample_range(today: date) -> DateRange:
    return DateRange(add_days(today, -5), add_days(today, -3))


class RangeCalendarApp:
    """Host window: the picker, a readout of the chosen range and a clear button.

    The app owns the highlight range. Every range the picker reports is
    stored here and handed straight back to the picker for display.
    """

    def __init__(self, settings: dict | None = None) -> None:
        self.settings = settings if settings is not None else load_settings()
        self.date_format: str = self.settings["date_format"]

        self.root = tk.Tk()
        self.root.title(self._title())
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)

        self.range: DateRange = (
            range_from_setting(self.settings["last_range"]) or _sample_range(date.today())
        )
        shell = PickerShell(
            PickerConfig(
                week_starts_on=self.settings["week_starts_on"],
                on_range_change=self._set_range,
                on_date_selected=self._on_date_selected,
            ),
            highlight_range=self.range,
        )
        self.picker = PickerWindow(self.root, shell)
        self.picker.frame.pack()

        inputs = tk.Frame(self.root, bg=GRID_BG)
        inputs.pack(fill="x", padx=12, pady=(0, 4))
        self._readout = tk.StringVar(value=format_range(self.range, self.date_format))
        tk.Entry(
            inputs, textvariable=self._readout, state="readonly", width=28,
        ).pack(side="left")
        tk.Button(inputs, text="clear", command=self.clear).pack(side="left", padx=6)

        self._footer = tk.Label(
            self.root, text=range_summary(self.range), bg=GRID_BG, fg="#555555",
        )
        self._footer.pack(pady=(0, 6))

        self.root.protocol("WM_DELETE_WINDOW", self.hide)

    @staticmethod
    def _title() -> str:
        return f"Range Calendar  Day: {day_of_year(date.today())}"

    # ------------------------------------------------------------------
    # Range handling
    # ------------------------------------------------------------------
    def _set_range(self, r: DateRange) -> None:
        logger.info("range: %s", format_range(r, self.date_format))
        self.range = r
        self._readout.set(format_range(r, self.date_format))
        self._footer.configure(text=range_summary(r))
        self.picker.set_highlight_range(r)

    def _on_date_selected(self, d: date) -> None:
        logger.info("selected: %s", d.strftime(self.date_format))

    def clear(self) -> None:
        self._set_range(CLEARED)

    def _persist_range(self) -> None:
        self.settings["last_range"] = range_to_setting(self.range)
        save_settings(self.settings)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.title(self._title())
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self._persist_range()
        self.root.withdraw()


def main() -> None:
    # DPI awareness so fonts are crisp on Hi-DPI Windows monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

    settings = load_settings()
    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = RangeCalendarApp(settings)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        app.root.after(0, app.toggle)

    def on_clear() -> None:
        app.root.after(0, app.clear)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            app._persist_range()
            app.root.destroy()
        app.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_clear, on_exit)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    app.root.mainloop()


if __name__ == "__main__":
    main()
