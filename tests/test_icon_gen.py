"""Tests for the tray icon image."""

from datetime import date

from icon_gen import ACCENT, ICON_SIZE, create_icon_image


class TestCreateIconImage:
    """Tests for create_icon_image."""

    def test_size_and_mode(self) -> None:
        """Should be a 64x64 RGBA image."""
        img = create_icon_image(date(2024, 3, 15))

        assert img.size == (ICON_SIZE, ICON_SIZE)
        assert img.mode == "RGBA"

    def test_top_strip_is_accent(self) -> None:
        """The binding strip uses the accent colour."""
        img = create_icon_image(date(2024, 3, 15))
        r, g, b = (int(ACCENT[i:i + 2], 16) for i in (1, 3, 5))

        assert img.getpixel((ICON_SIZE // 2, 2)) == (r, g, b, 255)

    def test_day_number_is_drawn(self) -> None:
        """Some dark pixels appear below the strip."""
        img = create_icon_image(date(2024, 3, 15))
        body = img.crop((0, 16, ICON_SIZE, ICON_SIZE)).convert("L")

        assert body.getextrema()[0] < 128
