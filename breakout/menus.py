"""Menu screens: the main menu, settings, level choice and pause."""

from __future__ import annotations

from dataclasses import dataclass

from breakout.input import MouseButton
from breakout.objects import HEIGHT, WIDTH
from breakout.states import (
    HIGHLIGHT_COLOR,
    TEXT_COLOR,
    TITLE_COLOR,
    Action,
    GameState,
)
from breakout.vector import Vector

TITLE = "BREAKOUT"
TITLE_RECT = (WIDTH // 2 - 280, HEIGHT // 2 - 400, 600, 300)
ICON_SIZE = 40


@dataclass
class Button:
    """A rectangular area of the screen; edges count as inside."""

    x: int
    y: int
    width: int
    height: int
    label: str = ""
    font: str = "pixelated"
    color: tuple[int, int, int, int] = TEXT_COLOR

    def contains(self, point: Vector) -> bool:
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )

    def hover(self, point: Vector) -> None:
        """Highlight the button while the cursor is over it."""
        self.color = HIGHLIGHT_COLOR if self.contains(point) else TEXT_COLOR

    def write(self, text, surface, label: str | None = None) -> None:
        text.write_text(
            self.font,
            self.x,
            self.y,
            self.width,
            self.height,
            surface,
            self.label if label is None else label,
            self.color,
        )


def _quit_icon() -> Button:
    return Button(WIDTH - 50, HEIGHT - 50, ICON_SIZE, ICON_SIZE, "quit_icon")


def _write_title(text, surface) -> None:
    text.write_text("regular", *TITLE_RECT, surface, TITLE, TITLE_COLOR)


class MainMenu(GameState):
    """The first screen: play, settings and quit."""

    name = "Main Menu"

    def __init__(self, inputs, text, textures) -> None:
        super().__init__()
        self.inputs = inputs
        self.text = text
        self.textures = textures
        self.play_button = Button(WIDTH // 2 - 80, HEIGHT // 2 - 80, 140, 70, "Play")
        self.settings_button = Button(
            WIDTH // 2 - 80, HEIGHT // 2 + 5, 140, 70, "Settings"
        )
        self.quit_button = _quit_icon()

    def update(self) -> Action:
        cursor = self.inputs.cursor_position()
        if self.inputs.mouse_button(MouseButton.LEFT):
            if self.quit_button.contains(cursor):
                return Action.QUIT_BUTTON
            if self.settings_button.contains(cursor):
                return Action.SETTINGS_BUTTON
            if self.play_button.contains(cursor):
                return Action.MODE_BUTTON
        self.play_button.hover(cursor)
        self.settings_button.hover(cursor)
        return Action.NO_BUTTON

    def render(self, surface) -> None:
        _write_title(self.text, surface)
        self.play_button.write(self.text, surface)
        self.settings_button.write(self.text, surface)
        quit_icon = self.quit_button
        self.textures.draw(
            quit_icon.label, quit_icon.x, quit_icon.y,
            quit_icon.width, quit_icon.height, surface, False,
        )


class SettingsMenu(GameState):
    """Settings screen with a button that toggles sound."""

    name = "Settings Menu"

    def __init__(self, inputs, text, textures) -> None:
        super().__init__()
        self.inputs = inputs
        self.text = text
        self.textures = textures
        self.label_button = Button(WIDTH // 2 - 80, HEIGHT // 2 - 80, 140, 70, "Sound")
        self.sound_button = Button(WIDTH // 2 - 80, HEIGHT // 2 + 5, 140, 70)

    def update(self) -> Action:
        cursor = self.inputs.cursor_position()
        if self.inputs.mouse_button(MouseButton.LEFT) and self.sound_button.contains(cursor):
            return Action.SOUND
        self.sound_button.hover(cursor)
        return Action.NO_BUTTON

    def render(self, surface) -> None:
        _write_title(self.text, surface)
        self.label_button.write(self.text, surface)
        self.sound_button.write(self.text, surface, self.sound)


class LevelMenu(GameState):
    """Screen for choosing which level layout to play."""

    name = "Level"

    def __init__(self, inputs, text, textures) -> None:
        super().__init__()
        self.inputs = inputs
        self.text = text
        self.textures = textures
        self.choices: list[tuple[Button, str, Action]] = [
            (Button(20, HEIGHT // 2 - 80, 140, 70, "Standard"), "standard", Action.STANDARD),
            (Button(WIDTH - 160, HEIGHT // 2 - 80, 140, 70, "1337"), "1337", Action.LEET),
            (Button(20, HEIGHT // 2 + 20, 140, 70, "Pyramid"), "pyramid", Action.PYRAMID),
            (Button(WIDTH - 160, HEIGHT // 2 + 20, 140, 70, "Crazy"), "crazy", Action.CRAZY),
        ]
        self.quit_button = _quit_icon()

    @property
    def buttons(self) -> list[Button]:
        return [button for button, _, _ in self.choices]

    def update(self) -> Action:
        cursor = self.inputs.cursor_position()
        if self.inputs.mouse_button(MouseButton.LEFT):
            if self.quit_button.contains(cursor):
                return Action.QUIT_BUTTON
            for button, mode, action in self.choices:
                if button.contains(cursor):
                    self.mode = mode
                    return action
        for button in self.buttons:
            button.hover(cursor)
        return Action.NO_BUTTON

    def render(self, surface) -> None:
        _write_title(self.text, surface)
        for button in self.buttons:
            button.write(self.text, surface)
        quit_icon = self.quit_button
        self.textures.draw(
            quit_icon.label, quit_icon.x, quit_icon.y,
            quit_icon.width, quit_icon.height, surface, False,
        )


class PauseMenu(GameState):
    """Overlay shown while the game is paused, with quit and replay icons."""

    name = "Pause Menu"

    def __init__(self, inputs, text, textures) -> None:
        super().__init__()
        self.inputs = inputs
        self.text = text
        self.textures = textures
        self.text_color = TEXT_COLOR
        self.quit_button = _quit_icon()
        self.replay_button = Button(
            WIDTH - 100, HEIGHT - 50, ICON_SIZE, ICON_SIZE, "restart_icon"
        )

    def update(self) -> Action:
        cursor = self.inputs.cursor_position()
        if self.inputs.mouse_button(MouseButton.LEFT):
            if self.quit_button.contains(cursor):
                return Action.QUIT_BUTTON
            if self.replay_button.contains(cursor):
                return Action.REPLAY_BUTTON
        return Action.NO_BUTTON

    def render(self, surface) -> None:
        lines = (
            ("pixelated", WIDTH // 2 - 150, HEIGHT - 400, 300, 150, "PAUSED"),
            ("regular", WIDTH // 2 - 200, HEIGHT - 250, 400, 100, "press enter to continue"),
            ("regular", WIDTH // 2 - 200, HEIGHT - 150, 400, 100, "press esc to exit"),
        )
        for font, x, y, width, height, message in lines:
            self.text.write_text(font, x, y, width, height, surface, message, self.text_color)
        for icon in (self.quit_button, self.replay_button):
            self.textures.draw(
                icon.label, icon.x, icon.y, icon.width, icon.height, surface, False
            )