"""Sprite sheets and a manager that finds sprites by logical name."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from PIL import Image

from eldoria.dtos import SpriteConfigDTO, SpriteSheetDTO

log = logging.getLogger(__name__)


class _ImageSource(Protocol):
    def get_image(self, name: str) -> Image.Image | None: ...


class _Sheet(Protocol):
    def sub_image(self, index: int) -> Image.Image: ...


@dataclass(frozen=True)
class SpriteIdentifier:
    """A sprite's place: the sheet it is on and its index there."""

    sheet_name: str
    index: int


@dataclass
class SpriteSheet:
    """An image laid out as a grid of equally sized tiles."""

    image: Image.Image
    tile_width: int
    tile_height: int
    tiles_per_row: int
    start_x: int = 0
    start_y: int = 0

    def sub_image(self, index: int) -> Image.Image:
        """Return the tile at ``index``, counted row by row."""
        row, column = divmod(index, self.tiles_per_row)
        x = self.start_x + column * self.tile_width
        y = self.start_y + row * self.tile_height
        return self.image.crop((x, y, x + self.tile_width, y + self.tile_height))


@dataclass
class SpriteManager:
    """Holds sprite sheets and maps sprite names onto them."""

    image_manager: _ImageSource
    sheets: dict[str, _Sheet] = field(default_factory=dict)
    mapping: dict[str, SpriteIdentifier] = field(default_factory=dict)

    def register_sprite_sheet(self, name: str, sheet: _Sheet) -> None:
        """Register ``sheet`` under ``name``."""
        self.sheets[name] = sheet

    def map_sprite_name(self, name: str, sheet_name: str, index: int) -> None:
        """Map the sprite ``name`` to tile ``index`` of sheet ``sheet_name``."""
        self.mapping[name] = SpriteIdentifier(sheet_name, index)

    def get_sprite(self, name: str) -> Image.Image | None:
        """Return the sprite called ``name``, or None if it or its sheet is unknown."""
        identifier = self.mapping.get(name)
        if identifier is None:
            return None
        sheet = self.sheets.get(identifier.sheet_name)
        if sheet is None:
            return None
        return sheet.sub_image(identifier.index)

    def load_sprite_sheet_dtos(self, sprite_sheets: Iterable[SpriteSheetDTO]) -> None:
        """Register sheets from configuration; sheets whose image is missing are skipped."""
        for dto in sprite_sheets:
            image = self.image_manager.get_image(dto.image)
            if image is None:
                log.warning("Image not found for sprite sheet: %s", dto.image)
                continue
            self.register_sprite_sheet(
                dto.name,
                SpriteSheet(
                    image,
                    dto.tile_width,
                    dto.tile_height,
                    dto.tiles_per_row,
                    dto.start_x,
                    dto.start_y,
                ),
            )

    def load_sprite_config_dtos(self, sprite_configs: Iterable[SpriteConfigDTO]) -> None:
        """Map sprite names from configuration."""
        for config in sprite_configs:
            self.map_sprite_name(config.name, config.sheet_name, config.index)