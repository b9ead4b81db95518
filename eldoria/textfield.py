"""A single-line text input field."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from PIL import Image

from eldoria.drawing import rounded_rect, text
from eldoria.ui import DEFAULT_FONT_NAME, FontSource, Key, Keyboard, KeyboardInput

_WHITE = (255, 255, 255, 255)
_BACKSPACE_REPEAT_DELAY = 10


@dataclass
class TextField:
    """An editable line of text that reads its input from a keyboard each frame."""

    text: str = ""
    is_active: bool = False
    x: int = 0
    y: int = 0
    width: int = 200
    height: int = 30
    backspace_press_duration: int = 0
    min_length: int = 0
    max_length: int = 1000
    corner_radius: float = 10.0
    on_enter: Callable[[], None] | None = None
    font_manager: FontSource | None = None
    font_name: str = DEFAULT_FONT_NAME
    font_face: Any = None
    text_color: Any = (0, 0, 0, 255)
    allowed_chars: str = ""
    placeholder_font_name: str = ""
    placeholder_font_face: Any = None
    placeholder: str = ""
    placeholder_color: Any = (150, 150, 150, 255)
    keyboard: KeyboardInput = field(default_factory=Keyboard)

    def set_font(self, font_name: str, size: float, dpi: float, color: Any) -> None:
        """Use the named font at ``size`` and ``dpi`` for the text."""
        self.text_color = color
        self.font_name = font_name
        self.font_face = self.font_manager.get_face(font_name, size, dpi)

    def set_placeholder_font(self, font_name: str, size: float, dpi: float, color: Any) -> None:
        """Use the named font at ``size`` and ``dpi`` for the placeholder."""
        self.placeholder_color = color
        self.placeholder_font_name = font_name
        self.placeholder_font_face = self.font_manager.get_face(font_name, size, dpi)

    def _is_char_allowed(self, char: str) -> bool:
        return not self.allowed_chars or char in self.allowed_chars

    def update(self) -> None:
        """Apply one frame of keyboard input while the field is active."""
        if not self.is_active:
            return

        for char in self.keyboard.take_input_chars():
            if len(self.text) < self.max_length and self._is_char_allowed(char):
                self.text += char

        if self.keyboard.is_key_pressed(Key.BACKSPACE):
            self.backspace_press_duration += 1
        else:
            self.backspace_press_duration = 0

        duration = self.backspace_press_duration
        if duration > 0 and self.text:
            if duration == 1 or (
                duration > _BACKSPACE_REPEAT_DELAY and duration % _BACKSPACE_REPEAT_DELAY == 0
            ):
                self.text = self.text[:-1]

        if (
            self.keyboard.is_key_just_pressed(Key.ENTER)
            and len(self.text) >= self.min_length
            and self.on_enter is not None
        ):
            self.on_enter()

    def draw(self, screen: Image.Image) -> None:
        """Draw the field's box and its text, or the placeholder when empty."""
        rounded_rect(screen, self.x, self.y, self.width, self.height, self.corner_radius, _WHITE)
        if not self.text and self.placeholder:
            text(
                screen,
                self.x + 6,
                self.y,
                self.placeholder,
                self.placeholder_font_face,
                self.placeholder_color,
            )
        else:
            text(screen, self.x + 6, self.y, self.text, self.font_face, self.text_color)