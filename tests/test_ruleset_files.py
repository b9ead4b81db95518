import pytest

from eldoria.ruleset_files import (
    EffectConfig,
    EffectsFile,
    ModifierConfig,
    Rate,
    ResourceConfig,
    RulesetFileError,
    TileResourceConfig,
    load_effects_file,
    load_resources_file,
    load_ruleset_file,
    load_tiles_file,
)


@pytest.fixture
def write_yaml(tmp_path):
    def write(content, name="example.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write


def test_load_effects_file_valid(write_yaml):
    path = write_yaml(
        """
effects:
  ProvidesFreshWater:
    summary: "Crucial for life and agriculture."
    resources:
      FreshWater:
        restorationRate: {min: 10, max: 10}
"""
    )
    got = load_effects_file(path)
    want = EffectsFile(
        effects={
            "ProvidesFreshWater": EffectConfig(
                summary="Crucial for life and agriculture.",
                resources={
                    "FreshWater": TileResourceConfig(
                        restoration_rate=Rate(min=10, max=10)
                    )
                },
            )
        }
    )
    assert got == want


def test_load_effects_file_missing():
    with pytest.raises(RulesetFileError):
        load_effects_file("nonexistent.yml")


def test_load_resources_file_valid(write_yaml):
    path = write_yaml(
        """
resources:
  Gold:
    summary: "Precious metal used for trade and crafting."
  Wood:
    summary: "Basic building material."
"""
    )
    got = load_resources_file(path)
    assert len(got.resources) == 2
    assert got.resources["Wood"] == ResourceConfig(summary="Basic building material.")


def test_load_resources_file_invalid_yaml(write_yaml):
    path = write_yaml(
        """
resources:
  Gold:
    summary: "Precious metal used for trade and crafting."
  Wood: "Basic building material." # Missing summary key
"""
    )
    with pytest.raises(RulesetFileError):
        load_resources_file(path)


def test_load_resources_file_nonexistent():
    with pytest.raises(RulesetFileError):
        load_resources_file("nonexistent.yml")


def test_load_ruleset_file_success(write_yaml):
    path = write_yaml(
        """
tiles:
  - tile1
  - tile2
modifiers:
  - modifier1
effects:
  - effect1
"""
    )
    ruleset = load_ruleset_file(path)
    assert ruleset.tiles == ["tile1", "tile2"]
    assert ruleset.modifiers == ["modifier1"]
    assert ruleset.effects == ["effect1"]


def test_load_ruleset_file_not_found():
    with pytest.raises(RulesetFileError):
        load_ruleset_file("nonexistent.yaml")


def test_load_ruleset_file_wrong_shape(write_yaml):
    path = write_yaml("tiles: notalist\n")
    with pytest.raises(RulesetFileError):
        load_ruleset_file(path)


def test_load_tiles_file_success(write_yaml):
    path = write_yaml(
        """
tiles:
  Tile1:
    summary: "Summary for tile 1"
    effects:
      - effect1
modifiers:
  Modifier1:
    summary: "Summary for modifier 1"
    effects:
      - effect1
"""
    )
    tiles_file = load_tiles_file(path)
    assert len(tiles_file.tiles) == 1
    assert len(tiles_file.modifiers) == 1
    assert tiles_file.tiles["Tile1"].summary == "Summary for tile 1"
    assert tiles_file.tiles["Tile1"].effects == ["effect1"]
    assert tiles_file.modifiers["Modifier1"] == ModifierConfig(
        summary="Summary for modifier 1", effects=["effect1"]
    )


def test_load_tiles_file_with_resources(write_yaml):
    path = write_yaml(
        """
tiles:
  Forest:
    summary: Forest
    resources:
      Wood:
        maxAmount: 100
        harvestRate: {min: 1, max: 3}
        restorationThreshold: 50
        maxPopulation: 4
"""
    )
    wood = load_tiles_file(path).tiles["Forest"].resources["Wood"]
    assert wood == TileResourceConfig(
        max_amount=100,
        harvest_rate=Rate(1, 3),
        restoration_rate=Rate(0, 0),
        restoration_threshold=50,
        max_population=4,
    )


def test_load_tiles_file_bad_integer(write_yaml):
    path = write_yaml(
        """
tiles:
  Forest:
    resources:
      Wood:
        maxAmount: lots
"""
    )
    with pytest.raises(RulesetFileError):
        load_tiles_file(path)


def test_load_tiles_file_broken_syntax(write_yaml):
    path = write_yaml("tiles: [unclosed\n")
    with pytest.raises(RulesetFileError):
        load_tiles_file(path)


def test_load_tiles_file_not_found():
    with pytest.raises(RulesetFileError):
        load_tiles_file("nonexistent.yaml")