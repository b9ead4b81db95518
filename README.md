# eldoria

Building blocks for a small turn-based strategy game:

- `eldoria.dtos` – data classes for the UI configuration (sprite sheets,
  sprites, tiles), the index answer and player information, with
  `to_dict`/`from_dict` and loaders for JSON (`load_ui_config`) and YAML
  (`load_ui_config_from_yaml`) files.
- `eldoria.ruleset_files` – loaders for the YAML files of a ruleset
  directory: `load_ruleset_file` (`ruleset.yml`), `load_tiles_file`
  (`tiles.yml`), `load_resources_file` (`resources.yml`) and
  `load_effects_file` (`effects.yml`). They raise `RulesetFileError` when a
  file cannot be read or decoded.
- `eldoria.apiclient` – `APIClient`, which fetches the UI configuration
  from `<base_url>/ui/config` and raises `APIError` on failure.
- `eldoria.images` and `eldoria.fonts` – `ImageManager` and `FontManager`,
  named storage for Pillow images and TrueType fonts.
- `eldoria.sprites` – `SpriteSheet`, `SpriteIdentifier` and
  `SpriteManager`, which finds sprites by logical name.
- `eldoria.tilegrid` – `TileGrid`, a grid of layered tiles drawn from
  sprites onto a Pillow image.
- `eldoria.ui` – UI constants, the `Key` enum and `Keyboard`, keyboard state
  fed by the host window.
- `eldoria.drawing` – `rounded_rect` and `text` helpers.
- `eldoria.textfield` – `TextField`, a single-line input with allowed
  characters, a maximum length, backspace repeat and an Enter callback.
- `eldoria.gameui` – `GameUI`, which switches between registered screens,
  and the `MapScreen` and `LoginScreen` screens.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Loading the files of a ruleset directory:

```python
from eldoria.dtos import load_ui_config_from_yaml
from eldoria.ruleset_files import load_ruleset_file, load_tiles_file

enabled = load_ruleset_file("ruleset/default/ruleset.yml")
tiles = load_tiles_file("ruleset/default/tiles.yml")
ui_config = load_ui_config_from_yaml("ruleset/default/ui.yml")
print(enabled.tiles, tiles.tiles["Grassland"].effects)
```

Drawing a tile grid:

```python
from PIL import Image

from eldoria.images import ImageManager
from eldoria.sprites import SpriteManager
from eldoria.tilegrid import TileGrid

images = ImageManager()
images.load_image("freeciv/data/trident/tiles.png", "tiles.png")

sprites = SpriteManager(images)
sprites.load_sprite_sheet_dtos(ui_config.sprite_sheets)
sprites.load_sprite_config_dtos(ui_config.sprite_configs)

grid = TileGrid(sprites, 10, 10)
grid.load_tile_config_dtos(ui_config.tile_configs)
grid.set_tile(5, 5, "Grassland")

screen = Image.new("RGBA", (300, 300))
grid.draw(screen, 30, 30)
```

Feeding keyboard input to a text field:

```python
from eldoria.textfield import TextField
from eldoria.ui import Key, Keyboard

keyboard = Keyboard()
field = TextField(is_active=True, allowed_chars="abc", keyboard=keyboard)

keyboard.feed_chars("abcd")
keyboard.press(Key.ENTER)
field.update()          # field.text == "abc"
keyboard.end_frame()
```

Fetching the UI configuration from a running server:

```python
from eldoria.apiclient import APIClient

config = APIClient("http://localhost:8080").fetch_ui_config()
print(len(config.sprite_sheets))
```

## What the package does not do

- It has no game server and no command to run: `APIClient` needs a server
  that answers `GET /ui/config`, and no such server is included.
- It has no game map, tile effects, players or game state on the server
  side, and nothing that combines the ruleset files into one ruleset; the
  `ruleset_files` loaders only read each file.
- It opens no window and runs no event loop. The host calls `update`,
  `draw` and `layout` on `GameUI` each frame, feeds key and character
  events to `Keyboard`, and passes mouse presses to `LoginScreen.update`.
  Pressing Enter in the login field only prints the lower-cased name.