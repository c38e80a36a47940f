"""Image, font and sound caches keyed by short names."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

log = logging.getLogger(__name__)

DIM_FACTOR = 0.2
FONT_SIZE = 32
MIXER_FREQUENCY = 44100
MIXER_FORMAT = -16
MIXER_CHANNELS = 2
MIXER_BUFFER = 2048


def darken(image: pygame.Surface) -> pygame.Surface:
    """Return a copy of ``image`` with its colour channels cut to a fifth."""
    dark = image.copy()
    width, height = dark.get_size()
    for y in range(height):
        for x in range(width):
            colour = dark.get_at((x, y))
            dark.set_at(
                (x, y),
                (
                    int(colour.r * DIM_FACTOR),
                    int(colour.g * DIM_FACTOR),
                    int(colour.b * DIM_FACTOR),
                    colour.a,
                ),
            )
    return dark


class TextureManager:
    """Loaded images, drawn by key."""

    def __init__(self) -> None:
        self.textures: dict[str, pygame.Surface] = {}
        self._dark: dict[str, pygame.Surface] = {}

    def load_image(self, file_name: str | Path, key: str) -> bool:
        """Load an image under ``key``; an existing key is kept as it is."""
        if key in self.textures:
            return True
        try:
            image = pygame.image.load(str(file_name))
        except (OSError, pygame.error) as error:
            log.error("Unable to load image from file %s %s", file_name, error)
            return False
        self.textures[key] = image
        return True

    def draw(
        self,
        key: str,
        x: int,
        y: int,
        width: int,
        height: int,
        surface: pygame.Surface,
        dim: bool,
    ) -> None:
        """Copy the top-left ``width`` x ``height`` of an image to ``(x, y)``."""
        image = self.textures.get(key)
        if image is None:
            log.error("texture isn't available")
            return
        if dim:
            image = self._dark.get(key)
            if image is None:
                image = self._dark[key] = darken(self.textures[key])
        surface.blit(image, (x, y), pygame.Rect(0, 0, width, height))


class TextManager:
    """Loaded fonts, used to write text scaled into a rectangle."""

    def __init__(self) -> None:
        try:
            pygame.font.init()
        except pygame.error as error:
            log.error("Unable to initialize fonts: %s", error)
        self.fonts: dict[str, pygame.font.Font] = {}

    def load_font(self, font_path: str | Path | None, key: str) -> bool:
        """Load a font under ``key``; ``None`` selects the default font."""
        if key in self.fonts:
            return True
        try:
            font = pygame.font.Font(
                None if font_path is None else str(font_path), FONT_SIZE
            )
        except (OSError, pygame.error) as error:
            log.error("Failed to load font: %s", error)
            return False
        self.fonts[key] = font
        return True

    def write_text(
        self,
        key: str,
        x: int,
        y: int,
        width: int,
        height: int,
        surface: pygame.Surface,
        text: str,
        color,
    ) -> None:
        """Render ``text`` without smoothing and stretch it over the rectangle."""
        font = self.fonts.get(key)
        if font is None:
            log.error("font isn't available")
            return
        if not text:
            log.error("failed render text: empty text")
            return
        try:
            rendered = font.render(text, False, color)
        except pygame.error as error:
            log.error("failed render text: %s", error)
            return
        surface.blit(pygame.transform.scale(rendered, (width, height)), (x, y))


class AudioManager:
    """Loaded sound effects that play only while sound is enabled."""

    def __init__(self, enabled: bool = True) -> None:
        try:
            pygame.mixer.init(
                MIXER_FREQUENCY, MIXER_FORMAT, MIXER_CHANNELS, MIXER_BUFFER
            )
        except pygame.error as error:
            raise RuntimeError(f"Failed to open audio device: {error}") from error
        self.enabled = enabled
        self.sounds: dict[str, pygame.mixer.Sound | None] = {}

    def load_sound(self, key: str, file_name: str | Path) -> None:
        """Load a sound under ``key``; a failed load leaves an empty slot."""
        try:
            sound = pygame.mixer.Sound(str(file_name))
        except (OSError, pygame.error) as error:
            log.error("failed to load sound file: %s", error)
            sound = None
        self.sounds[key] = sound

    def play_sound(self, key: str) -> bool:
        """Play the sound under ``key``; return whether it was played."""
        sound = self.sounds.get(key)
        if sound is None or not self.enabled:
            return False
        sound.play()
        return True

    def set_sound(self, enabled: bool) -> None:
        self.enabled = enabled