"""Game screens and the stack that holds them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

from breakout.input import Key

TEXT_COLOR = (165, 145, 50, 255)
HIGHLIGHT_COLOR = (249, 235, 224, 255)
TITLE_COLOR = (64, 121, 140, 255)


class Action(IntEnum):
    """What a screen asks the game to do after an update."""

    REPLAY_BUTTON = 0
    QUIT_BUTTON = 1
    NO_BUTTON = 2
    MODE_BUTTON = 3
    SETTINGS_BUTTON = 4
    SOUND = 5
    GAME_OVER = 6
    STANDARD = 7
    LEET = 8
    PYRAMID = 9
    CRAZY = 10
    GAME_WON = 11


class GameState(ABC):
    """A screen of the game; ``name`` identifies it."""

    name = ""

    def __init__(self) -> None:
        self.mode = ""
        self.sound = ""

    @abstractmethod
    def update(self) -> Action:
        """Advance the screen and return the action it asks for."""

    @abstractmethod
    def render(self, surface) -> None:
        """Draw the screen."""

    def on_enter(self) -> bool:
        return True

    def on_exit(self) -> bool:
        return True

    def set_sound(self, on: bool) -> None:
        self.sound = "on" if on else "off"


class StateControl:
    """A stack of screens; only the top one is updated and drawn."""

    def __init__(self) -> None:
        self._states: list[GameState] = []
        self.mode = ""

    def __len__(self) -> int:
        return len(self._states)

    def _top(self) -> GameState:
        if not self._states:
            raise IndexError("no active state")
        return self._states[-1]

    def update(self) -> Action:
        if not self._states:
            return Action.NO_BUTTON
        return self._states[-1].update()

    def render(self, surface) -> None:
        if self._states:
            self._states[-1].render(surface)

    def push_state(self, state: GameState) -> None:
        self._states.append(state)
        state.on_enter()

    def pop_state(self) -> None:
        """Remove the top screen if it agrees to exit."""
        if self._states and self._states[-1].on_exit():
            self._states.pop()

    def change_state(self, state: GameState) -> None:
        """Replace the top screen, unless it is already of the same kind."""
        if self._states:
            top = self._states[-1]
            if top.name == state.name:
                return
            if top.on_exit():
                self._states.pop()
        self._states.append(state)
        state.on_enter()

    def clear(self) -> None:
        self._states.clear()

    def state(self) -> str:
        """Return the name of the top screen."""
        return self._top().name

    def set_sound(self, on: bool) -> None:
        self._top().set_sound(on)


class PlayState(GameState):
    """The screen shown while the game is being played."""

    name = "Play"

    def update(self) -> Action:
        return Action.NO_BUTTON

    def render(self, surface) -> None:
        pass


class GameOver(GameState):
    """The screen shown when the last life is lost."""

    name = "Game Over"

    def __init__(self, inputs, text) -> None:
        super().__init__()
        self.inputs = inputs
        self.text = text
        self.color = TEXT_COLOR

    def update(self) -> Action:
        if self.inputs.is_key_pressed(Key.ESCAPE):
            return Action.GAME_OVER
        return Action.NO_BUTTON

    def render(self, surface) -> None:
        self.text.write_text("regular", 250, 50, 600, 300, surface, "Game Over", self.color)
        self.color = TEXT_COLOR


class GameWon(GameState):
    """The screen shown when every brick of a level is broken."""

    name = "Game Won"

    def __init__(self, text) -> None:
        super().__init__()
        self.text = text
        self.color = TEXT_COLOR

    def update(self) -> Action:
        self.color = HIGHLIGHT_COLOR
        return Action.NO_BUTTON

    def render(self, surface) -> None:
        self.text.write_text("regular", 250, 50, 600, 300, surface, "You Won :D", self.color)
        self.color = TEXT_COLOR