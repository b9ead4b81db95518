"""The YAML files a ruleset directory is made of."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

import yaml

ALL_RESOURCES_KEYWORD = "all"
"""A resource key that stands for every resource."""

T = TypeVar("T")


class RulesetFileError(Exception):
    """Raised when a ruleset file cannot be read or decoded."""


@dataclass
class Rate:
    """An inclusive range of amounts per turn."""

    min: int = 0
    max: int = 0


@dataclass
class TileResourceConfig:
    """How a resource behaves on a tile."""

    max_amount: int = 0
    harvest_rate: Rate = field(default_factory=Rate)
    restoration_rate: Rate = field(default_factory=Rate)
    restoration_threshold: int = 0
    max_population: int = 0


@dataclass
class EffectConfig:
    """An effect's description and its impact on resources."""

    summary: str = ""
    resources: dict[str, TileResourceConfig] = field(default_factory=dict)


@dataclass
class EffectsFile:
    """Contents of ``effects.yml``."""

    effects: dict[str, EffectConfig] = field(default_factory=dict)


@dataclass
class ResourceConfig:
    """A resource's description."""

    summary: str = ""


@dataclass
class ResourcesFile:
    """Contents of ``resources.yml``."""

    resources: dict[str, ResourceConfig] = field(default_factory=dict)


@dataclass
class RulesetFile:
    """Contents of ``ruleset.yml``: the enabled tiles, modifiers and effects."""

    tiles: list[str] = field(default_factory=list)
    modifiers: list[str] = field(default_factory=list)
    effects: list[str] = field(default_factory=list)


@dataclass
class TileConfig:
    """A tile type's description, effects and resources."""

    summary: str = ""
    effects: list[str] = field(default_factory=list)
    resources: dict[str, TileResourceConfig] = field(default_factory=dict)


@dataclass
class ModifierConfig:
    """A modifier's description and effects."""

    summary: str = ""
    effects: list[str] = field(default_factory=list)


@dataclass
class TilesFile:
    """Contents of ``tiles.yml``."""

    tiles: dict[str, TileConfig] = field(default_factory=dict)
    modifiers: dict[str, ModifierConfig] = field(default_factory=dict)


def _mapping(data: Any, what: str) -> Mapping[Any, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise RulesetFileError(f"{what}: expected a mapping, got {type(data).__name__}")
    return data


def _str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise RulesetFileError(f"{what}: expected a string, got {type(value).__name__}")


def _int(value: Any, what: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise RulesetFileError(f"{what}: expected an integer, got {type(value).__name__}")
    return value


def _str_list(value: Any, what: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise RulesetFileError(f"{what}: expected a list, got {type(value).__name__}")
    return [_str(item, what) for item in value]


def _dict_of(value: Any, what: str, parse: Callable[[Any, str], T]) -> dict[str, T]:
    return {
        str(key): parse(item, f"{what}.{key}")
        for key, item in _mapping(value, what).items()
    }


def _rate(data: Any, what: str) -> Rate:
    d = _mapping(data, what)
    return Rate(min=_int(d.get("min"), f"{what}.min"), max=_int(d.get("max"), f"{what}.max"))


def _tile_resource(data: Any, what: str) -> TileResourceConfig:
    d = _mapping(data, what)
    return TileResourceConfig(
        max_amount=_int(d.get("maxAmount"), f"{what}.maxAmount"),
        harvest_rate=_rate(d.get("harvestRate"), f"{what}.harvestRate"),
        restoration_rate=_rate(d.get("restorationRate"), f"{what}.restorationRate"),
        restoration_threshold=_int(
            d.get("restorationThreshold"), f"{what}.restorationThreshold"
        ),
        max_population=_int(d.get("maxPopulation"), f"{what}.maxPopulation"),
    )


def _effect(data: Any, what: str) -> EffectConfig:
    d = _mapping(data, what)
    return EffectConfig(
        summary=_str(d.get("summary"), f"{what}.summary"),
        resources=_dict_of(d.get("resources"), f"{what}.resources", _tile_resource),
    )


def _resource(data: Any, what: str) -> ResourceConfig:
    d = _mapping(data, what)
    return ResourceConfig(summary=_str(d.get("summary"), f"{what}.summary"))


def _tile(data: Any, what: str) -> TileConfig:
    d = _mapping(data, what)
    return TileConfig(
        summary=_str(d.get("summary"), f"{what}.summary"),
        effects=_str_list(d.get("effects"), f"{what}.effects"),
        resources=_dict_of(d.get("resources"), f"{what}.resources", _tile_resource),
    )


def _modifier(data: Any, what: str) -> ModifierConfig:
    d = _mapping(data, what)
    return ModifierConfig(
        summary=_str(d.get("summary"), f"{what}.summary"),
        effects=_str_list(d.get("effects"), f"{what}.effects"),
    )


def _read_yaml(path: str | Path) -> Mapping[Any, Any]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise RulesetFileError(f"error reading YAML file: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RulesetFileError(f"error unmarshaling YAML: {exc}") from exc
    return _mapping(data, str(path))


def load_effects_file(path: str | Path) -> EffectsFile:
    """Load an ``effects.yml`` file."""
    data = _read_yaml(path)
    return EffectsFile(effects=_dict_of(data.get("effects"), "effects", _effect))


def load_resources_file(path: str | Path) -> ResourcesFile:
    """Load a ``resources.yml`` file."""
    data = _read_yaml(path)
    return ResourcesFile(resources=_dict_of(data.get("resources"), "resources", _resource))


def load_ruleset_file(path: str | Path) -> RulesetFile:
    """Load a ``ruleset.yml`` file."""
    data = _read_yaml(path)
    return RulesetFile(
        tiles=_str_list(data.get("tiles"), "tiles"),
        modifiers=_str_list(data.get("modifiers"), "modifiers"),
        effects=_str_list(data.get("effects"), "effects"),
    )


def load_tiles_file(path: str | Path) -> TilesFile:
    """Load a ``tiles.yml`` file."""
    data = _read_yaml(path)
    return TilesFile(
        tiles=_dict_of(data.get("tiles"), "tiles", _tile),
        modifiers=_dict_of(data.get("modifiers"), "modifiers", _modifier),
    )