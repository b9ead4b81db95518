"""Client user interface constants, shared interfaces and keyboard state."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any, Protocol

INITIAL_SCREEN_WIDTH = 1024
INITIAL_SCREEN_HEIGHT = 1024
LOGIN_SCREEN_BACKGROUND_IMAGE = "eldoria/assets/eldoria-login-screen.png"

INDIE_FLOWER_FONT_NAME = "IndieFlower"
MAGIC_SCHOOL_FONT_NAME = "MagicSchool"
PLAYFAIR_DISPLAY_FONT_NAME = "PlayfairDisplay"
PATRICK_HAND_FONT_NAME = "PatrickHand"
ORBITRON_FONT_NAME = "Orbitron"
MERRIWEATHER_FONT_NAME = "Merriweather"

DEFAULT_FONT_NAME = MERRIWEATHER_FONT_NAME

LOGIN_SCREEN_FONT_NAME = DEFAULT_FONT_NAME
LOGIN_SCREEN_FONT_SIZE = 18
LOGIN_SCREEN_FONT_DPI = 96
MIN_LOGIN_NAME_LENGTH = 3
MAX_LOGIN_NAME_LENGTH = 9

ALLOWED_LOGIN_CHARACTERS = (
    "qwertyuiopasdfghjklzxcvbnm_1234567890QWERTYUIOPASDFGHJKLZXCVBNM"
)


class Key(Enum):
    """Keys the user interface reacts to."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    ESCAPE = "escape"
    TAB = "tab"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Screen(Protocol):
    """A screen the game UI can show."""

    def update(self) -> None: ...

    def draw(self, screen: Any) -> None: ...

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]: ...


class TileGridLike(Protocol):
    """A drawable grid of tiles."""

    def draw(self, screen: Any, tile_size_x: int, tile_size_y: int) -> None: ...

    def set_tile(self, x: int, y: int, *args: str) -> None: ...

    def get_tile(self, x: int, y: int) -> list[str] | None: ...


class Game(Protocol):
    """What screens need to know about the running game UI."""

    def get_map(self) -> TileGridLike | None: ...

    screen_width: int
    screen_height: int


class FontSource(Protocol):
    """Something that builds sized font faces by name."""

    def get_face(self, name: str, size: float, dpi: float) -> Any: ...


class KeyboardInput(Protocol):
    """Keyboard state read by input widgets."""

    def take_input_chars(self) -> list[str]: ...

    def is_key_pressed(self, key: Key) -> bool: ...

    def is_key_just_pressed(self, key: Key) -> bool: ...


class Keyboard:
    """Keyboard state fed by the host window and read once per frame.

    Typed characters queue up until taken. A key is "just pressed" from the
    moment it goes down until the end of the frame.
    """

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._pressed: set[Key] = set()
        self._just_pressed: set[Key] = set()

    def feed_chars(self, chars: Iterable[str]) -> None:
        """Queue typed characters."""
        for item in chars:
            self._chars.extend(item)

    def take_input_chars(self) -> list[str]:
        """Return and clear the characters typed since the last call."""
        chars, self._chars = self._chars, []
        return chars

    def press(self, key: Key) -> None:
        """Record that ``key`` went down."""
        if key not in self._pressed:
            self._just_pressed.add(key)
        self._pressed.add(key)

    def release(self, key: Key) -> None:
        """Record that ``key`` went up."""
        self._pressed.discard(key)

    def end_frame(self) -> None:
        """Forget which keys were pressed during the frame that ended."""
        self._just_pressed.clear()

    def is_key_pressed(self, key: Key) -> bool:
        """Return True while ``key`` is held down."""
        return key in self._pressed

    def is_key_just_pressed(self, key: Key) -> bool:
        """Return True if ``key`` went down during the current frame."""
        return key in self._just_pressed