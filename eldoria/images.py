"""Named storage for decoded images."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

log = logging.getLogger(__name__)


def _decode(image_bytes: bytes, what: str) -> Image.Image:
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            img.load()
            return img.convert("RGBA")
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ValueError(f"failed to decode image {what}: {exc}") from exc


class ImageManager:
    """Stores RGBA images by name."""

    def __init__(self) -> None:
        self.images: dict[str, Image.Image] = {}

    def register_image(self, name: str, image: Image.Image) -> None:
        """Associate ``image`` with ``name``."""
        if image is None:
            raise ValueError("register_image called with no image")
        self.images[name] = image

    def register_image_bytes(self, name: str, image_bytes: bytes) -> None:
        """Decode ``image_bytes`` and register the result under ``name``."""
        self.images[name] = _decode(image_bytes, f"bytes for {name}")

    def get_image(self, name: str) -> Image.Image | None:
        """Return the image registered under ``name``, or None."""
        return self.images.get(name)

    def load_image(self, name: str, file_path: str | Path) -> None:
        """Load an image file and register it under ``name``."""
        try:
            data = Path(file_path).read_bytes()
        except OSError as exc:
            log.warning("Failed to open image file: %s", exc)
            raise
        self.register_image(name, _decode(data, f"file {file_path}"))