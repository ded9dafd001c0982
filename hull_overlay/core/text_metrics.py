# hull_overlay/core/text_metrics.py
"""
Approximate text footprint: width = characters * font_size * 0.6, height = font_size.
No font files are read; the font family is carried along for rendering only.
"""

from __future__ import annotations

from hull_overlay.core.config import CHAR_WIDTH_FACTOR
from hull_overlay.core.types import Point, TextBox


def approximate_text_size(text: str, font_size: float) -> tuple[float, float]:
    """Return (width, height) in geometry units."""
    return (len(text) * font_size * CHAR_WIDTH_FACTOR, float(font_size))


def text_box_at(text: str, font_size: float, font_family: str, center: Point) -> TextBox:
    """TextBox of the approximate footprint centered on `center`."""
    w, h = approximate_text_size(text, font_size)
    return TextBox(
        x=center.x - w / 2,
        y=center.y - h / 2,
        width=w,
        height=h,
        text=text,
        font_size=font_size,
        font_family=font_family,
    )
