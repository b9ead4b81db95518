"""Named storage for TrueType fonts and the faces made from them."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import ImageFont

log = logging.getLogger(__name__)

_POINTS_PER_INCH = 72.0


def _parse(font_bytes: bytes, what: str) -> None:
    try:
        ImageFont.truetype(io.BytesIO(font_bytes), 12)
    except (OSError, ValueError) as exc:
        raise ValueError(f"failed to parse font {what}: {exc}") from exc


class FontManager:
    """Stores font data by name and builds sized faces from it."""

    def __init__(self) -> None:
        self.fonts: dict[str, bytes] = {}

    def register_font(self, name: str, font_bytes: bytes) -> None:
        """Associate already validated font data with ``name``."""
        if font_bytes is None:
            raise ValueError("register_font called with no font")
        self.fonts[name] = font_bytes

    def register_font_bytes(self, name: str, font_bytes: bytes) -> None:
        """Check that ``font_bytes`` is a font, then register it under ``name``."""
        _parse(font_bytes, f"bytes for {name}")
        self.fonts[name] = font_bytes

    def get_font(self, name: str) -> bytes | None:
        """Return the font data registered under ``name``, or None."""
        return self.fonts.get(name)

    def load_font(self, name: str, file_path: str | Path) -> None:
        """Read a font file and register it under ``name``."""
        try:
            data = Path(file_path).read_bytes()
        except OSError as exc:
            log.warning("Failed to read font file: %s", exc)
            raise
        _parse(data, f"file {file_path}")
        self.register_font(name, data)

    def get_face(self, name: str, size: float, dpi: float) -> ImageFont.FreeTypeFont | None:
        """Return a face of ``size`` points at ``dpi``, or None if the font is unknown."""
        font_bytes = self.get_font(name)
        if font_bytes is None:
            log.warning("Font not found: %s", name)
            return None
        pixel_size = float(size) * float(dpi) / _POINTS_PER_INCH
        return ImageFont.truetype(io.BytesIO(font_bytes), pixel_size)