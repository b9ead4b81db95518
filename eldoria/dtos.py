"""Data transfer objects shared by the game server and client."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a mapping, got {type(data).__name__}")
    return data


def _list(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what}: expected a list, got {type(value).__name__}")
    return value


def _str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{what}: expected a string, got {type(value).__name__}")
    return value


def _int(value: Any, what: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what}: expected an integer, got {type(value).__name__}")
    return value


def _float(value: Any, what: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what}: expected a number, got {type(value).__name__}")
    return float(value)


@dataclass
class IndexDTO:
    """Answer of the server's index endpoint."""

    version: str

    def to_dict(self) -> dict[str, Any]:
        return {"version": self.version}


@dataclass
class PlayerDTO:
    """Public information about a player."""

    name: str
    level: int = 0
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "level": self.level, "score": self.score}


@dataclass
class SpriteSheetDTO:
    """Layout of a sprite sheet image."""

    name: str = ""
    image: str = ""
    tile_width: int = 0
    tile_height: int = 0
    tiles_per_row: int = 0
    start_x: int = 0
    start_y: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "image": self.image,
            "tileWidth": self.tile_width,
            "tileHeight": self.tile_height,
            "tilesPerRow": self.tiles_per_row,
            "startX": self.start_x,
            "startY": self.start_y,
        }

    @classmethod
    def from_dict(cls, data: Any) -> SpriteSheetDTO:
        d = _mapping(data, "sprite sheet")
        return cls(
            name=_str(d.get("name"), "name"),
            image=_str(d.get("image"), "image"),
            tile_width=_int(d.get("tileWidth"), "tileWidth"),
            tile_height=_int(d.get("tileHeight"), "tileHeight"),
            tiles_per_row=_int(d.get("tilesPerRow"), "tilesPerRow"),
            start_x=_int(d.get("startX"), "startX"),
            start_y=_int(d.get("startY"), "startY"),
        )


@dataclass
class SpriteConfigDTO:
    """Maps a sprite name to a sheet and an index within it."""

    name: str = ""
    sheet_name: str = ""
    index: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "sheetName": self.sheet_name, "index": self.index}

    @classmethod
    def from_dict(cls, data: Any) -> SpriteConfigDTO:
        d = _mapping(data, "sprite config")
        return cls(
            name=_str(d.get("name"), "name"),
            sheet_name=_str(d.get("sheetName"), "sheetName"),
            index=_int(d.get("index"), "index"),
        )


@dataclass
class SpriteDTO:
    """A sprite placed inside a tile, with its offsets."""

    name: str = ""
    x_offset: float = 0.0
    y_offset: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "xOffset": self.x_offset, "yOffset": self.y_offset}

    @classmethod
    def from_dict(cls, data: Any) -> SpriteDTO:
        d = _mapping(data, "sprite")
        return cls(
            name=_str(d.get("name"), "name"),
            x_offset=_float(d.get("xOffset"), "xOffset"),
            y_offset=_float(d.get("yOffset"), "yOffset"),
        )


@dataclass
class TileConfigDTO:
    """A tile and the sprites it is drawn from."""

    tile_name: str = ""
    sprites: list[SpriteDTO] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.tile_name,
            "sprites": [sprite.to_dict() for sprite in self.sprites],
        }

    @classmethod
    def from_dict(cls, data: Any) -> TileConfigDTO:
        d = _mapping(data, "tile config")
        return cls(
            tile_name=_str(d.get("name"), "name"),
            sprites=[SpriteDTO.from_dict(s) for s in _list(d.get("sprites"), "sprites")],
        )


@dataclass
class UIConfigDTO:
    """Top-level user interface configuration."""

    sprite_sheets: list[SpriteSheetDTO] = field(default_factory=list)
    sprite_configs: list[SpriteConfigDTO] = field(default_factory=list)
    tile_configs: list[TileConfigDTO] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "spriteSheets": [s.to_dict() for s in self.sprite_sheets],
            "sprites": [s.to_dict() for s in self.sprite_configs],
            "tiles": [t.to_dict() for t in self.tile_configs],
        }

    @classmethod
    def from_dict(cls, data: Any) -> UIConfigDTO:
        d = _mapping(data, "ui config")
        return cls(
            sprite_sheets=[
                SpriteSheetDTO.from_dict(s)
                for s in _list(d.get("spriteSheets"), "spriteSheets")
            ],
            sprite_configs=[
                SpriteConfigDTO.from_dict(s) for s in _list(d.get("sprites"), "sprites")
            ],
            tile_configs=[TileConfigDTO.from_dict(t) for t in _list(d.get("tiles"), "tiles")],
        )


def load_ui_config(config_path: str | Path) -> UIConfigDTO:
    """Load a UI configuration from a JSON file."""
    data = Path(config_path).read_text(encoding="utf-8")
    try:
        parsed = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"failed to parse configuration JSON: {exc}") from exc
    config = UIConfigDTO.from_dict(parsed)
    log.debug("Loaded UI config: %s", config)
    return config


def load_ui_config_from_yaml(config_path: str | Path) -> UIConfigDTO:
    """Load a UI configuration from a YAML file."""
    log.debug("Loading UI config from YAML: %s", config_path)
    data = Path(config_path).read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(data)
        config = UIConfigDTO.from_dict(parsed)
    except yaml.YAMLError as exc:
        raise ValueError(f"failed to parse configuration YAML: {exc}") from exc
    log.debug(
        "SpriteSheets: %d, SpriteConfigs: %d, TileConfigs: %d",
        len(config.sprite_sheets),
        len(config.sprite_configs),
        len(config.tile_configs),
    )
    return config