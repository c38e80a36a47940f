"""The paddle, the ball and the shared game-object behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from breakout.input import Key
from breakout.level import TILE_SIZE_H, TILE_SIZE_W
from breakout.vector import Vector

WIDTH = 1088
HEIGHT = 704

PADDLE_SPEED = 14
TOP_WALL = 22
BALL_RADIUS = 10
BALL_START_SPEED = 0.5
BALL_FAST_SPEED = 0.7
BALL_SPEEDUP = 0.2

BRICK_SCORES = {"1": 1, "2": 3, "3": 5, "4": 7}
BRICK_EFFECTS = {
    "1": "yellow_brick.png",
    "2": "green_brick.png",
    "3": "orange_brick.png",
    "4": "red_brick.png",
}
FAST_BRICKS = frozenset({"3", "4"})
BROKEN_TILE = "0"


class GameObject:
    """Something with a position, a velocity and a texture to draw."""

    def __init__(self) -> None:
        self.position = Vector()
        self.velocity = Vector()
        self.acceleration = Vector()
        self.width = 0
        self.height = 0
        self.row = 0
        self.frame = 0
        self.texture = ""

    def load_texture(self, x: int, y: int, width: int, height: int, key: str) -> None:
        """Place the object and set the texture it is drawn with."""
        self.position.x = x
        self.position.y = y
        self.width = width
        self.height = height
        self.texture = key
        self.frame = 1
        self.row = 1

    def draw(self, textures, surface, dim: bool) -> None:
        textures.draw(
            self.texture,
            int(self.position.x),
            int(self.position.y),
            self.width,
            self.height,
            surface,
            dim,
        )

    def update(self) -> None:
        """Move by acceleration and then by velocity."""
        self.position += self.acceleration
        self.position += self.velocity


class Player(GameObject):
    """The paddle steered with the arrow keys or A and D."""

    def load_texture(self, x: int, y: int, width: int, height: int, key: str) -> None:
        super().load_texture(x, y, width, height, key)

    def set_position(self, x: float, y: float) -> None:
        self.position.x = x
        self.position.y = y

    def handle_input(self, inputs) -> None:
        """Set the paddle's speed from the keys held down, stopping at the edges."""
        if inputs.is_key_pressed(Key.RIGHT) or inputs.is_key_pressed(Key.D):
            if self.position.x + self.width >= WIDTH:
                return
            self.velocity.x = PADDLE_SPEED
        if inputs.is_key_pressed(Key.LEFT) or inputs.is_key_pressed(Key.A):
            if self.position.x <= 0:
                return
            self.velocity.x = -PADDLE_SPEED

    def update(self) -> None:
        """Move one step, then stop until the next key press."""
        super().update()
        self.velocity.x = 0

    def dimensions(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass
class BallOutcome:
    """What happened to the game during one ball step."""

    score: int = 0
    lives_lost: int = 0
    hit: bool = False

    def merge(self, other: BallOutcome) -> BallOutcome:
        return BallOutcome(
            self.score + other.score,
            self.lives_lost + other.lives_lost,
            self.hit or other.hit,
        )


class Ball(GameObject):
    """The ball that bounces off walls, the paddle and bricks."""

    def __init__(self) -> None:
        super().__init__()
        self.radius = BALL_RADIUS
        self.velocity = Vector(BALL_START_SPEED, BALL_START_SPEED)
        self.assets_dir = Path("assets")

    def update(self, player, level, particles, audio, textures, ticks: int) -> BallOutcome:
        """Advance one frame and report score gained, lives lost and brick hits."""
        self.frame = int((ticks // 100) % 6)
        outcome = self.wall_collision(player)
        outcome = outcome.merge(self.bricks_collision(level, particles, audio, textures))
        self.velocity += self.acceleration
        self.position += self.velocity
        return outcome

    def wall_collision(self, player: Player) -> BallOutcome:
        """Bounce off the paddle or the walls; falling out costs a life."""
        diameter = self.radius * 2
        paddle = player.position
        if (
            self.position.y + diameter >= paddle.y
            and self.position.x + self.radius >= paddle.x
            and self.position.x <= paddle.x + player.dimensions()[0]
        ):
            self.velocity.y = -self.velocity.y
        elif self.position.x <= 0:
            self.velocity.x = -self.velocity.x
        elif self.position.x + diameter >= WIDTH:
            self.position.x = WIDTH - diameter
            self.velocity.x = -self.velocity.x
        elif self.position.y <= TOP_WALL:
            player.load_texture(int(paddle.x), HEIGHT - 20, 50, 20, "paddle")
            self.velocity.x = self.velocity.x + BALL_SPEEDUP
            self.velocity.y = -self.velocity.y + BALL_SPEEDUP
        elif self.position.y + diameter >= HEIGHT:
            self.position = Vector(40, HEIGHT // 2 + 5)
            self.velocity = Vector(BALL_FAST_SPEED, BALL_FAST_SPEED)
            player.load_texture(int(paddle.x), HEIGHT - 20, 100, 20, "paddle")
            return BallOutcome(lives_lost=1)
        return BallOutcome()

    def bricks_collision(self, level, particles, audio, textures) -> BallOutcome:
        """Break every brick the ball's centre lies on, scoring by colour."""
        outcome = BallOutcome()
        centre_x = self.position.x + self.radius
        centre_y = self.position.y + self.radius
        for r, row in enumerate(level.grid):
            for c, tile in enumerate(row):
                if tile not in BRICK_SCORES:
                    continue
                brick_x = c * TILE_SIZE_W
                brick_y = r * TILE_SIZE_H
                if not (
                    brick_x <= centre_x <= brick_x + TILE_SIZE_W
                    and brick_y <= centre_y <= brick_y + TILE_SIZE_H
                ):
                    continue
                outcome.hit = True
                audio.play_sound("hit")
                if tile in FAST_BRICKS:
                    self.velocity = Vector(BALL_FAST_SPEED, BALL_FAST_SPEED)
                textures.load_image(self.assets_dir / BRICK_EFFECTS[tile], "effect")
                outcome.score += BRICK_SCORES[tile]
                particles.init_particles(brick_x, brick_y, TILE_SIZE_W, TILE_SIZE_H)
                row[c] = BROKEN_TILE
                self.velocity.y = -self.velocity.y
        return outcome

    def reset_velocity(self) -> None:
        self.velocity = Vector(BALL_START_SPEED, BALL_START_SPEED)