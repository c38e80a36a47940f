import pytest

from breakout.input import InputHandler, MouseButton
from breakout.menus import Button, LevelMenu, MainMenu, PauseMenu, SettingsMenu
from breakout.states import HIGHLIGHT_COLOR, TEXT_COLOR, Action, StateControl


class RecordingText:
    def __init__(self):
        self.calls = []

    def write_text(self, key, x, y, width, height, surface, text, color):
        self.calls.append((key, x, y, width, height, text, color))


class RecordingTextures:
    def __init__(self):
        self.calls = []

    def draw(self, key, x, y, width, height, surface, dim):
        self.calls.append((key, x, y, width, height, dim))


def centre(button):
    return (button.x + button.width / 2, button.y + button.height / 2)


def make(cls):
    inputs = InputHandler()
    text = RecordingText()
    textures = RecordingTextures()
    return cls(inputs, text, textures), inputs, text, textures


def click(inputs, point):
    inputs.set_cursor_position(*point)
    inputs.set_mouse_button(MouseButton.LEFT, True)


def test_button_edges_are_inside():
    button = Button(10, 20, 30, 40)
    inputs = InputHandler()
    inputs.set_cursor_position(10, 20)
    assert button.contains(inputs.cursor_position())
    inputs.set_cursor_position(40, 60)
    assert button.contains(inputs.cursor_position())
    inputs.set_cursor_position(41, 60)
    assert not button.contains(inputs.cursor_position())


def test_main_menu_names():
    menu, *_ = make(MainMenu)
    assert menu.name == "Main Menu"


@pytest.mark.parametrize(
    "attr, action",
    [
        ("quit_button", Action.QUIT_BUTTON),
        ("settings_button", Action.SETTINGS_BUTTON),
        ("play_button", Action.MODE_BUTTON),
    ],
)
def test_main_menu_clicks(attr, action):
    menu, inputs, _, _ = make(MainMenu)
    click(inputs, centre(getattr(menu, attr)))
    assert menu.update() == action


def test_main_menu_hover_without_click():
    menu, inputs, _, _ = make(MainMenu)
    inputs.set_cursor_position(*centre(menu.play_button))
    assert menu.update() == Action.NO_BUTTON
    assert menu.play_button.color == HIGHLIGHT_COLOR
    assert menu.settings_button.color == TEXT_COLOR
    inputs.set_cursor_position(0, 0)
    menu.update()
    assert menu.play_button.color == TEXT_COLOR


def test_main_menu_click_elsewhere_does_nothing():
    menu, inputs, _, _ = make(MainMenu)
    click(inputs, (0, 0))
    assert menu.update() == Action.NO_BUTTON


def test_main_menu_render():
    menu, _, text, textures = make(MainMenu)
    menu.render(None)
    labels = [call[5] for call in text.calls]
    assert labels == ["BREAKOUT", "Play", "Settings"]
    assert textures.calls[0][0] == "quit_icon"
    assert textures.calls[0][5] is False


def test_settings_menu_sound_click():
    menu, inputs, _, _ = make(SettingsMenu)
    click(inputs, centre(menu.sound_button))
    assert menu.update() == Action.SOUND


def test_settings_menu_hover_and_render_sound_label():
    menu, inputs, text, _ = make(SettingsMenu)
    inputs.set_cursor_position(*centre(menu.sound_button))
    assert menu.update() == Action.NO_BUTTON
    assert menu.sound_button.color == HIGHLIGHT_COLOR
    menu.set_sound(False)
    menu.render(None)
    labels = [call[5] for call in text.calls]
    assert labels == ["BREAKOUT", "Sound", "off"]


def test_settings_sound_through_state_control():
    menu, _, text, _ = make(SettingsMenu)
    control = StateControl()
    control.push_state(menu)
    control.set_sound(True)
    control.render(None)
    assert text.calls[-1][5] == "on"
    assert control.state() == "Settings Menu"


@pytest.mark.parametrize(
    "index, mode, action",
    [
        (0, "standard", Action.STANDARD),
        (1, "1337", Action.LEET),
        (2, "pyramid", Action.PYRAMID),
        (3, "crazy", Action.CRAZY),
    ],
)
def test_level_menu_choices(index, mode, action):
    menu, inputs, _, _ = make(LevelMenu)
    click(inputs, centre(menu.buttons[index]))
    assert menu.update() == action
    assert menu.mode == mode


def test_level_menu_quit_and_hover():
    menu, inputs, _, _ = make(LevelMenu)
    click(inputs, centre(menu.quit_button))
    assert menu.update() == Action.QUIT_BUTTON
    assert menu.mode == ""
    inputs.set_mouse_button(MouseButton.LEFT, False)
    inputs.set_cursor_position(*centre(menu.buttons[2]))
    menu.update()
    assert [b.color for b in menu.buttons] == [
        TEXT_COLOR, TEXT_COLOR, HIGHLIGHT_COLOR, TEXT_COLOR
    ]


def test_level_menu_render():
    menu, _, text, textures = make(LevelMenu)
    menu.render(None)
    assert [call[5] for call in text.calls] == [
        "BREAKOUT", "Standard", "1337", "Pyramid", "Crazy"
    ]
    assert [call[0] for call in textures.calls] == ["quit_icon"]


def test_pause_menu_buttons():
    menu, inputs, _, _ = make(PauseMenu)
    click(inputs, centre(menu.replay_button))
    assert menu.update() == Action.REPLAY_BUTTON
    click(inputs, centre(menu.quit_button))
    assert menu.update() == Action.QUIT_BUTTON
    inputs.set_mouse_button(MouseButton.LEFT, False)
    assert menu.update() == Action.NO_BUTTON


def test_pause_menu_render():
    menu, _, text, textures = make(PauseMenu)
    menu.render(None)
    assert [call[5] for call in text.calls] == [
        "PAUSED", "press enter to continue", "press esc to exit"
    ]
    assert [call[0] for call in textures.calls] == ["quit_icon", "restart_icon"]
    assert menu.name == "Pause Menu"