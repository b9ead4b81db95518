"""Drawing helpers for rounded rectangles and text."""

from __future__ import annotations

import logging
from typing import Any

from PIL import Image, ImageDraw

log = logging.getLogger(__name__)


def rounded_rect(
    screen: Image.Image,
    x: float,
    y: float,
    width: float,
    height: float,
    radius: float,
    color: Any,
) -> None:
    """Fill a rectangle with rounded corners of ``radius`` onto ``screen``."""
    if width <= 0 or height <= 0:
        return
    x0, y0 = round(x), round(y)
    x1, y1 = round(x + width) - 1, round(y + height) - 1
    if x1 < x0 or y1 < y0:
        return
    draw = ImageDraw.Draw(screen)
    draw.rounded_rectangle((x0, y0, x1, y1), radius=max(0, round(radius)), fill=color)


def text(
    screen: Image.Image,
    x: int,
    y: int,
    text: str,
    font_face: Any,
    color: Any,
) -> None:
    """Draw ``text`` with its top edge at ``y``; nothing is drawn without a face."""
    if font_face is None:
        log.warning("Font face not defined for text")
        return
    draw = ImageDraw.Draw(screen)
    getmetrics = getattr(font_face, "getmetrics", None)
    if callable(getmetrics):
        ascent = getmetrics()[0]
        draw.text((x, y + ascent), text, fill=color, font=font_face, anchor="ls")
    else:
        draw.text((x, y), text, fill=color, font=font_face)