import logging

import pytest
from PIL import Image

from eldoria.gameui import GameUI, LoginScreen, MapScreen
from eldoria.tilegrid import TileGrid
from eldoria.ui import Key, Keyboard

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


class RecordingScreen:
    def __init__(self):
        self.drawn = []
        self.updates = 0

    def update(self):
        self.updates += 1

    def draw(self, screen):
        self.drawn.append(screen)

    def layout(self, outside_width, outside_height):
        return outside_width // 2, outside_height // 2


class RedSprites:
    def get_sprite(self, name):
        return Image.new("RGBA", (10, 10), RED)


class RecordingFonts:
    def __init__(self):
        self.calls = []

    def get_face(self, name, size, dpi):
        self.calls.append((name, size, dpi))
        return None


class Images:
    def __init__(self, images=None):
        self.images = images or {}

    def get_image(self, name):
        return self.images.get(name)


def make_login(game, images=None, keyboard=None, fonts=None):
    return LoginScreen(
        game,
        images or Images(),
        fonts or RecordingFonts(),
        "bg.png",
        "Merriweather",
        18,
        96,
        3,
        9,
        "abcABC",
        keyboard=keyboard,
    )


def test_draw_calls_current_screen_once():
    mock_screen = RecordingScreen()
    game_ui = GameUI(800, 600, None)
    game_ui.register_screen("Mock", lambda: mock_screen)
    game_ui.set_current_screen("Mock")
    image = Image.new("RGBA", (1, 1))
    game_ui.draw(image)
    assert mock_screen.drawn == [image]


def test_layout_without_screen_returns_own_size():
    assert GameUI(800, 600, None).layout(1000, 1000) == (800, 600)


def test_layout_delegates_to_screen():
    game_ui = GameUI(800, 600, None)
    game_ui.register_screen("Mock", RecordingScreen)
    game_ui.set_current_screen("Mock")
    assert game_ui.layout(1000, 400) == (500, 200)


def test_update_delegates_to_screen():
    mock_screen = RecordingScreen()
    game_ui = GameUI(800, 600, None)
    game_ui.register_screen("Mock", lambda: mock_screen)
    game_ui.set_current_screen("Mock")
    game_ui.update()
    game_ui.update()
    assert mock_screen.updates == 2


def test_get_map_only_with_current_screen():
    grid = TileGrid(RedSprites(), 2, 2)
    game_ui = GameUI(800, 600, grid)
    assert game_ui.get_map() is None
    game_ui.register_screen("Mock", RecordingScreen)
    game_ui.set_current_screen("Mock")
    assert game_ui.get_map() is grid


def test_get_screen_builds_new_instances():
    game_ui = GameUI(800, 600, None)
    game_ui.register_screen("Mock", RecordingScreen)
    first = game_ui.get_screen("Mock")
    second = game_ui.get_screen("Mock")
    assert isinstance(first, RecordingScreen)
    assert first is not second
    assert game_ui.get_screen("Missing") is None


def test_set_unknown_screen_keeps_current(caplog):
    game_ui = GameUI(800, 600, None)
    mock_screen = RecordingScreen()
    game_ui.register_screen("Mock", lambda: mock_screen)
    game_ui.set_current_screen("Mock")
    with caplog.at_level(logging.WARNING):
        game_ui.set_current_screen("Missing")
    assert game_ui.current_screen is mock_screen
    assert "Missing" in caplog.text


def test_map_screen_draws_tiles():
    grid = TileGrid(RedSprites(), 3, 3)
    grid.define_tile_config("Grass", "GrassSprite", 0, 0)
    grid.set_tile(1, 1, "Grass")
    game_ui = GameUI(100, 100, grid)
    game_ui.register_screen("Map", lambda: MapScreen(game_ui))
    game_ui.set_current_screen("Map")
    image = Image.new("RGBA", (100, 100), BLACK)
    game_ui.draw(image)
    assert image.getpixel((30, 30)) == RED
    assert image.getpixel((39, 39)) == RED
    assert image.getpixel((0, 0)) == BLACK
    assert image.getpixel((40, 40)) == BLACK


def test_map_screen_layout():
    game_ui = GameUI(640, 480, None)
    assert MapScreen(game_ui).layout(10, 10) == (640, 480)


def test_login_screen_sets_fonts():
    fonts = RecordingFonts()
    make_login(GameUI(800, 600, None), fonts=fonts)
    assert fonts.calls == [("Merriweather", 18, 96), ("Merriweather", 18, 96)]


def test_login_screen_field_configuration():
    login = make_login(GameUI(800, 600, None))
    field = login.username_field
    assert field.min_length == 3
    assert field.max_length == 9
    assert field.placeholder == "Login name"
    assert field.allowed_chars == "abcABC"
    assert field.is_active is False


def test_login_popup_opens_on_mouse_press():
    login = make_login(GameUI(800, 600, None))
    login.update()
    assert login.show_popup is False
    login.update(mouse_pressed=True)
    assert login.show_popup is True
    assert login.username_field.is_active is True


def test_login_enter_prints_lowercase_username(capsys):
    keyboard = Keyboard()
    login = make_login(GameUI(800, 600, None), keyboard=keyboard)
    login.update(mouse_pressed=True)
    keyboard.feed_chars("AbC!x")
    keyboard.press(Key.ENTER)
    login.update()
    assert login.username_field.text == "AbC"
    assert capsys.readouterr().out == "Enter pressed, username: abc\n"


def test_login_enter_ignored_when_too_short(capsys):
    keyboard = Keyboard()
    login = make_login(GameUI(800, 600, None), keyboard=keyboard)
    login.update(mouse_pressed=True)
    keyboard.feed_chars("ab")
    keyboard.press(Key.ENTER)
    login.update()
    assert login.username_field.text == "ab"
    assert capsys.readouterr().out == ""


def test_login_max_length():
    keyboard = Keyboard()
    login = make_login(GameUI(800, 600, None), keyboard=keyboard)
    login.update(mouse_pressed=True)
    keyboard.feed_chars("abcabcabcabc")
    login.update()
    assert login.username_field.text == "abcabcabc"


def test_login_draws_scaled_centered_background():
    background = Image.new("RGBA", (50, 100), RED)
    login = make_login(GameUI(200, 200, None), images=Images({"bg.png": background}))
    image = Image.new("RGBA", (200, 200), BLACK)
    login.draw(image)
    assert image.getpixel((40, 10)) == BLACK
    assert image.getpixel((60, 10)) == RED
    assert image.getpixel((149, 199)) == RED
    assert image.getpixel((150, 100)) == BLACK


def test_login_draws_popup_field():
    login = make_login(GameUI(400, 400, None))
    login.update(mouse_pressed=True)
    image = Image.new("RGBA", (400, 400), BLACK)
    login.draw(image)
    assert (login.username_field.x, login.username_field.y) == (110, 160)
    assert image.getpixel((200, 175)) == WHITE
    assert image.getpixel((50, 50)) == BLACK


def test_login_missing_background_logged(caplog):
    login = make_login(GameUI(100, 100, None))
    image = Image.new("RGBA", (100, 100), BLACK)
    with caplog.at_level(logging.WARNING):
        login.draw(image)
    assert "Background image not found: bg.png" in caplog.text
    assert image.getpixel((50, 50)) == BLACK


@pytest.mark.parametrize("size", [(10, 10), (1024, 768)])
def test_login_layout(size):
    login = make_login(GameUI(*size, None))
    assert login.layout(1, 1) == size