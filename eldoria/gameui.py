"""The client's game UI and the screens it switches between."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from PIL import Image

from eldoria.textfield import TextField
from eldoria.ui import FontSource, Game, KeyboardInput, Screen, TileGridLike

log = logging.getLogger(__name__)

MAP_TILE_SIZE = 30
POPUP_WIDTH = 200
POPUP_HEIGHT = 100
_GREY = (150, 150, 150, 255)
_BLACK = (0, 0, 0, 255)


class _ImageSource(Protocol):
    def get_image(self, name: str) -> Image.Image | None: ...


class GameUI:
    """Holds the screens of the client and forwards frames to the current one."""

    def __init__(
        self, screen_width: int, screen_height: int, grid: TileGridLike | None
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.tile_map = grid
        self.current_screen: Screen | None = None
        self._screens: dict[str, Callable[[], Screen]] = {}

    def register_screen(self, name: str, constructor: Callable[[], Screen]) -> None:
        """Register the function that builds the screen called ``name``."""
        self._screens[name] = constructor

    def get_screen(self, name: str) -> Screen | None:
        """Build a new instance of the screen called ``name``, or return None."""
        constructor = self._screens.get(name)
        if constructor is None:
            return None
        return constructor()

    def update(self) -> None:
        """Advance the current screen by one frame."""
        if self.current_screen is not None:
            self.current_screen.update()

    def draw(self, screen: Any) -> None:
        """Draw the current screen onto ``screen``."""
        if self.current_screen is not None:
            self.current_screen.draw(screen)

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        """Return the logical screen size for the given window size."""
        if self.current_screen is not None:
            return self.current_screen.layout(outside_width, outside_height)
        return self.screen_width, self.screen_height

    def get_map(self) -> TileGridLike | None:
        """Return the tile map while a screen is shown, otherwise None."""
        if self.current_screen is not None:
            return self.tile_map
        return None

    def set_current_screen(self, name: str) -> None:
        """Switch to a fresh instance of the screen called ``name``."""
        screen = self.get_screen(name)
        if screen is None:
            log.warning("Could not create a screen named %s", name)
            return
        self.current_screen = screen


class MapScreen:
    """Shows the game's tile map."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.frames = 0

    def update(self) -> None:
        """Count the frame; the map itself does not change between frames."""
        self.frames += 1

    def draw(self, screen: Any) -> None:
        """Draw the game's map, if there is one."""
        tile_map = self.game.get_map()
        if tile_map is not None:
            tile_map.draw(screen, MAP_TILE_SIZE, MAP_TILE_SIZE)

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        """Return the game's screen size."""
        return self.game.screen_width, self.game.screen_height


class LoginScreen:
    """Shows a background image and, after a click, a login name field."""

    def __init__(
        self,
        game: Game,
        image_manager: _ImageSource,
        font_manager: FontSource,
        background_image_name: str,
        font_name: str,
        font_size: float,
        font_dpi: float,
        min_login_length: int,
        max_login_length: int,
        allowed_login_characters: str,
        keyboard: KeyboardInput | None = None,
    ) -> None:
        self.game = game
        self.image_manager = image_manager
        self.font_manager = font_manager
        self.background_image_name = background_image_name
        self.show_popup = False
        self.font_name = font_name
        self.font_size = font_size
        self.font_dpi = font_dpi
        self.min_login_length = min_login_length
        self.max_login_length = max_login_length

        field_options: dict[str, Any] = {}
        if keyboard is not None:
            field_options["keyboard"] = keyboard
        self.username_field = TextField(
            min_length=min_login_length,
            max_length=max_login_length,
            x=0,
            y=0,
            width=200,
            height=30,
            font_manager=font_manager,
            font_name=font_name,
            placeholder_font_name=font_name,
            placeholder="Login name",
            allowed_chars=allowed_login_characters,
            **field_options,
        )
        self.username_field.set_font(font_name, font_size, font_dpi, _BLACK)
        self.username_field.set_placeholder_font(font_name, font_size, font_dpi, _GREY)
        self.username_field.on_enter = self._on_username_enter

    def update(self, mouse_pressed: bool = False) -> None:
        """Open the popup on a mouse press, then feed input to the name field."""
        if not self.show_popup:
            if mouse_pressed:
                self.show_popup = True
                self.username_field.is_active = True
        else:
            self.username_field.update()

    def draw(self, screen: Image.Image) -> None:
        """Draw the background scaled to the screen height, then the popup."""
        background = self.image_manager.get_image(self.background_image_name)
        if background is not None:
            self._draw_background(screen, background)
        else:
            log.warning("Background image not found: %s", self.background_image_name)

        if self.show_popup:
            popup_x = (self.game.screen_width - POPUP_WIDTH) / 2
            popup_y = (self.game.screen_height - POPUP_HEIGHT) / 2
            self.username_field.x = int(popup_x) + 10
            self.username_field.y = int(popup_y) + 10
            self.username_field.draw(screen)

    def _draw_background(self, screen: Image.Image, background: Image.Image) -> None:
        img_width, img_height = background.size
        if img_width <= 0 or img_height <= 0:
            return
        scale = self.game.screen_height / img_height
        scaled_width = img_width * scale
        offset_x = (self.game.screen_width - scaled_width) / 2
        size = (max(1, round(scaled_width)), max(1, round(img_height * scale)))
        scaled = background.resize(size)
        mask = scaled if scaled.mode in ("RGBA", "LA") else None
        screen.paste(scaled, (round(offset_x), 0), mask)

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        """Return the game's screen size."""
        return self.game.screen_width, self.game.screen_height

    def _on_username_enter(self) -> None:
        username = self.username_field.text.lower()
        print("Enter pressed, username:", username)