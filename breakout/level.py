"""Brick layouts read from the level files."""

from __future__ import annotations

from itertools import islice
from pathlib import Path

TILE_SIZE_H = 32
TILE_SIZE_W = 64
GRID_WIDTH = 17
GRID_HEIGHT = 22

BRICK_TEXTURES = {
    "4": "red_brick",
    "3": "orange_brick",
    "2": "green_brick",
    "1": "yellow_brick",
}


class LevelFileError(OSError):
    """Raised when a level file cannot be opened."""


class LevelManager:
    """The brick grid of the current level: one character per tile."""

    def __init__(self, modes_dir: str | Path | None = None) -> None:
        self.modes_dir = Path(modes_dir) if modes_dir is not None else Path("assets/modes")
        self.grid: list[list[str]] = []

    def read_file(self, level: str) -> None:
        """Replace the grid with the first rows of ``<modes_dir>/<level>.txt``."""
        self.grid = []
        path = self.modes_dir / f"{level}.txt"
        try:
            with path.open(encoding="utf-8") as level_file:
                self.grid = [
                    list(line.rstrip("\n"))
                    for line in islice(level_file, GRID_HEIGHT)
                ]
        except OSError as error:
            raise LevelFileError(f"can't open level file {path}") from error

    def load_textures(self, textures, assets_dir: str | Path = "assets") -> bool:
        """Load the four brick images; return whether all of them loaded."""
        assets = Path(assets_dir)
        results = [
            textures.load_image(assets / f"{key}.png", key)
            for key in ("red_brick", "orange_brick", "green_brick", "yellow_brick")
        ]
        return all(results)

    def render(self, textures, surface, dim: bool) -> None:
        """Draw every brick of the grid at its tile position."""
        for row, tiles in enumerate(self.grid[:GRID_HEIGHT]):
            for col, tile in enumerate(tiles[:GRID_WIDTH]):
                key = BRICK_TEXTURES.get(tile)
                if key is not None:
                    textures.draw(
                        key,
                        col * TILE_SIZE_W,
                        row * TILE_SIZE_H,
                        TILE_SIZE_W,
                        TILE_SIZE_H,
                        surface,
                        dim,
                    )