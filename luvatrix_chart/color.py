from __future__ import annotations

import logging

from PIL import ImageColor


LOGGER = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]
Color = str | tuple[int, int, int] | tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)


def resolve_color(color: Color | None, *, default: RGBA = BLACK) -> RGBA:
    """Resolve a colour name, ``#hex`` string or RGB(A) tuple to RGBA.

    Unknown names and malformed values fall back to ``default`` instead of
    failing the render.
    """
    if color is None:
        return default
    if isinstance(color, tuple):
        if len(color) == 3:
            r, g, b = color
            return (_channel(r), _channel(g), _channel(b), 255)
        if len(color) == 4:
            r, g, b, a = color
            return (_channel(r), _channel(g), _channel(b), _channel(a))
        LOGGER.debug("unsupported colour tuple %r, using default", color)
        return default
    text = str(color).strip()
    if len(text) in {3, 6} and all(c in "0123456789abcdefABCDEF" for c in text):
        text = "#" + text
    try:
        rgb = ImageColor.getrgb(text)
    except ValueError:
        LOGGER.debug("unknown colour %r, using default", color)
        return default
    if len(rgb) == 4:
        return (rgb[0], rgb[1], rgb[2], rgb[3])
    return (rgb[0], rgb[1], rgb[2], 255)


def to_hex(color: Color | None, *, default: RGBA = BLACK) -> str:
    r, g, b, _ = resolve_color(color, default=default)
    return f"#{r:02x}{g:02x}{b:02x}"


def _channel(value: int | float) -> int:
    return int(max(0, min(255, int(value))))
