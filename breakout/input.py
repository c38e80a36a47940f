"""Keyboard and mouse state shared by the game and its menus."""

from __future__ import annotations

from enum import IntEnum

from breakout.vector import Vector


class MouseButton(IntEnum):
    """Mouse buttons tracked by the input handler."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class Key(IntEnum):
    """Keys the game reacts to, numbered by their scancodes."""

    A = 4
    D = 7
    RETURN = 40
    ESCAPE = 41
    RIGHT = 79
    LEFT = 80


class InputHandler:
    """Holds which keys and mouse buttons are down and where the cursor is."""

    def __init__(self) -> None:
        self._pressed: set[Key] = set()
        self._buttons: dict[MouseButton, bool] = {button: False for button in MouseButton}
        self._cursor = Vector()

    def is_key_pressed(self, key: Key) -> bool:
        """Return whether the given key is currently held down."""
        return key in self._pressed

    def set_key(self, key: Key, pressed: bool) -> None:
        """Record a key going down or up."""
        key = Key(key)
        if pressed:
            self._pressed.add(key)
        else:
            self._pressed.discard(key)

    def cursor_position(self) -> Vector:
        """Return a copy of the current cursor position."""
        return Vector(self._cursor.x, self._cursor.y)

    def set_cursor_position(self, x: float, y: float) -> None:
        self._cursor.x = x
        self._cursor.y = y

    def mouse_button(self, button: MouseButton) -> bool:
        """Return whether the given mouse button is held down."""
        return self._buttons[MouseButton(button)]

    def set_mouse_button(self, button: MouseButton, state: bool) -> None:
        self._buttons[MouseButton(button)] = bool(state)