"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_clear: Callable[[], None],
    on_exit: Callable[[], None],
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    menu = Menu(
        MenuItem("Show Picker", lambda _icon, _item: on_show(), default=True),
        MenuItem("Clear Range", lambda _icon, _item: on_clear()),
        Menu.SEPARATOR,
        MenuItem("Exit", lambda _icon, _item: on_exit()),
    )
    title = f"Range Calendar – {date.today().strftime('%d %b %Y')}"
    return pystray.Icon("range-calendar", icon_image, title, menu)
