"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ACCENT = "#0078D4"
ICON_SIZE = 64
_BAR_HEIGHT = 14


def _fit_font(draw: ImageDraw.ImageDraw, text: str, max_w: int, max_h: int):
    """Largest truetype font that fits, or Pillow's default bitmap font."""
    font_size = 120
    while font_size > 10:
        try:
            font = ImageFont.truetype("segoeuib.ttf", font_size)
        except OSError:
            return ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= max_w and bbox[3] - bbox[1] <= max_h:
            return font
        font_size -= 1
    return font


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA tear-off calendar page showing the day of month."""
    if today is None:
        today = date.today()
    size = ICON_SIZE
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    # Coloured binding strip across the top, like a desk calendar
    draw.rectangle((0, 0, size - 1, _BAR_HEIGHT - 1), fill=ACCENT)

    text = str(today.day)
    body_h = size - _BAR_HEIGHT
    font = _fit_font(draw, text, size, body_h)

    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = _BAR_HEIGHT + (body_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
