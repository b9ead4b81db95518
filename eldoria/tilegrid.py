"""A grid of layered tiles drawn from named sprites."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from PIL import Image

from eldoria.dtos import TileConfigDTO


class _SpriteSource(Protocol):
    def get_sprite(self, name: str) -> Image.Image | None: ...


@dataclass
class SpriteConfig:
    """A sprite and its offset within a tile."""

    name: str
    x_offset: float = 0.0
    y_offset: float = 0.0


@dataclass
class TileConfig:
    """The sprites a tile is drawn from, in drawing order."""

    sprites: list[SpriteConfig] = field(default_factory=list)


class TileGrid:
    """A map of ``width`` by ``height`` positions, each holding layers of tiles."""

    def __init__(self, sprite_manager: _SpriteSource, width: int, height: int) -> None:
        self.sprite_manager = sprite_manager
        self.width = width
        self.height = height
        self.tile_mappings: dict[int, TileConfig] = {}
        self.map_grid: list[list[list[int]]] = [
            [[] for _ in range(width)] for _ in range(height)
        ]
        self.name_to_id: dict[str, int] = {}
        self._id_to_name: dict[int, str] = {}
        self.next_id = 0

    def _tile_id(self, tile_name: str) -> int:
        tile_id = self.name_to_id.get(tile_name)
        if tile_id is None:
            tile_id = self.next_id
            self.next_id += 1
            self.name_to_id[tile_name] = tile_id
            self._id_to_name[tile_id] = tile_name
        return tile_id

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def define_tile_config(
        self, tile_name: str, sprite_name: str, x_offset: float, y_offset: float
    ) -> None:
        """Add a sprite to the drawing of ``tile_name``."""
        tile_id = self._tile_id(tile_name)
        config = self.tile_mappings.setdefault(tile_id, TileConfig())
        config.sprites.append(SpriteConfig(sprite_name, x_offset, y_offset))

    def draw(self, screen: Image.Image, tile_size_x: int, tile_size_y: int) -> None:
        """Draw every tile layer onto ``screen``; unknown tiles and sprites are skipped."""
        for y, row in enumerate(self.map_grid):
            for x, layers in enumerate(row):
                for tile_id in layers:
                    config = self.tile_mappings.get(tile_id)
                    if config is None:
                        continue
                    for sprite_config in config.sprites:
                        sprite = self.sprite_manager.get_sprite(sprite_config.name)
                        if sprite is None:
                            continue
                        position = (
                            round(x * tile_size_x + sprite_config.x_offset),
                            round(y * tile_size_y + sprite_config.y_offset),
                        )
                        mask = sprite if sprite.mode in ("RGBA", "LA") else None
                        screen.paste(sprite, position, mask)

    def set_tile(self, x: int, y: int, *args: str) -> None:
        """Set the tile layers at (x, y); positions outside the grid are ignored."""
        if not self._in_bounds(x, y):
            return
        self.map_grid[y][x] = [self._tile_id(name) for name in args]

    def get_tile(self, x: int, y: int) -> list[str] | None:
        """Return the tile names at (x, y), or None when outside the grid."""
        if not self._in_bounds(x, y):
            return None
        return [
            self._id_to_name[tile_id]
            for tile_id in self.map_grid[y][x]
            if tile_id in self._id_to_name
        ]

    def load_tile_config_dtos(self, tile_configs: Iterable[TileConfigDTO]) -> None:
        """Define tile drawings from configuration."""
        for tile_config in tile_configs:
            for sprite in tile_config.sprites:
                self.define_tile_config(
                    tile_config.tile_name, sprite.name, sprite.x_offset, sprite.y_offset
                )