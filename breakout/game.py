"""The game loop: screens, paddle, ball, bricks and score."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame

from breakout.assets import AudioManager, TextManager, TextureManager
from breakout.input import InputHandler, Key, MouseButton
from breakout.level import LevelManager
from breakout.menus import LevelMenu, MainMenu, PauseMenu, SettingsMenu
from breakout.objects import HEIGHT, WIDTH, Ball, Player
from breakout.particles import ParticlesManager
from breakout.states import Action, GameOver, GameWon, PlayState, StateControl

log = logging.getLogger(__name__)

FPS = 60
DELAY = int(1000.0 / FPS)
BACKGROUND = (11, 32, 39, 255)
HUD_COLOR = (165, 145, 50, 255)
START_LIVES = 3
PARTICLE_COUNT = 10

LEVEL_ACTIONS = {
    Action.STANDARD: "standard",
    Action.PYRAMID: "pyramid",
    Action.LEET: "1337",
    Action.CRAZY: "crazy",
}
WINNING_SCORES = {
    "standard": 544,
    "pyramid": 291,
    "1337": 176,
    "crazy": 1139,
}

_KEYS = {
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_RETURN: Key.RETURN,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
}
_MOUSE_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


class _MutedAudio:
    """Stands in for the audio device until it has been opened."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def load_sound(self, key: str, file_name) -> None:
        pass

    def play_sound(self, key: str) -> bool:
        return False

    def set_sound(self, enabled: bool) -> None:
        self.enabled = enabled


class Game:
    """Owns every part of the game and moves it along one frame at a time."""

    def __init__(self, assets_dir: str | Path = "assets") -> None:
        self.assets_dir = Path(assets_dir)
        self._running = False
        self.surface: pygame.Surface | None = None
        self.score = 0
        self.lives = START_LIVES
        self.hit = False
        self.sound = True
        self.game_over = False
        self.game_won = False
        self.inputs = InputHandler()
        self.textures = TextureManager()
        self.text = TextManager()
        self.audio = _MutedAudio(self.sound)
        self.level = LevelManager(self.assets_dir / "modes")
        self.player = Player()
        self.ball = Ball()
        self.ball.assets_dir = self.assets_dir
        self.particles = ParticlesManager(PARTICLE_COUNT)
        self.states = StateControl()
        self.states.push_state(self._menu(MainMenu))

    def _menu(self, cls):
        return cls(self.inputs, self.text, self.textures)

    def init(self, title: str, height: int, width: int) -> bool:
        """Open the window and load every asset; return whether it worked."""
        try:
            pygame.init()
            self.surface = pygame.display.set_mode((width, height))
        except pygame.error as error:
            log.error("Window creation failed: %s", error)
            return False
        pygame.display.set_caption(title)
        try:
            pygame.display.set_icon(pygame.image.load(str(self.assets_dir / "icon.bmp")))
        except (OSError, pygame.error):
            log.error("no icon available")
        try:
            self.audio = AudioManager(self.sound)
        except RuntimeError as error:
            log.error("%s", error)
            return False
        self._running = True
        self.player.load_texture(WIDTH // 2 - 50, HEIGHT - 20, 100, 20, "paddle")
        self.ball.load_texture(40, HEIGHT // 2 + 5, 20, 20, "ball")
        for key in ("paddle", "ball", "restart_icon", "quit_icon"):
            self.textures.load_image(self.assets_dir / f"{key}.png", key)
        self.text.load_font(self.assets_dir / "regular.ttf", "regular")
        self.text.load_font(self.assets_dir / "slkscr.ttf", "pixelated")
        self.text.load_font(self.assets_dir / "slkscrb.ttf", "pixelated_bold")
        self.audio.load_sound("hit", self.assets_dir / "hit.wav")
        self.audio.set_sound(self.sound)
        self.level.load_textures(self.textures, self.assets_dir)
        return True

    def running(self) -> bool:
        return self._running

    def render(self) -> None:
        """Draw the current screen, and the playfield while playing or paused."""
        if self.surface is None:
            raise RuntimeError("game has no surface to draw on")
        state = self.states.state()
        dim = state == "Pause Menu"
        self.surface.fill(BACKGROUND)
        if state != "Play":
            self.states.render(self.surface)
        if state in ("Play", "Pause Menu"):
            self.player.draw(self.textures, self.surface, dim)
            self.ball.draw(self.textures, self.surface, dim)
            if len(self.particles) == 0:
                self.hit = False
            if self.hit:
                self.particles.render_particles(self.textures, self.surface)
            self.level.render(self.textures, self.surface, dim)
            self.text.write_text(
                "regular", WIDTH - 100, -7, 90, 45, self.surface,
                f"Score: {self.score}", HUD_COLOR,
            )
            self.text.write_text(
                "regular", 2, -7, 90, 45, self.surface,
                f"lives: {self.lives}", HUD_COLOR,
            )
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def _record(self, event) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.MOUSEMOTION:
            self.inputs.set_cursor_position(*event.pos)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _MOUSE_BUTTONS.get(event.button)
            if button is not None:
                self.inputs.set_mouse_button(button, event.type == pygame.MOUSEBUTTONDOWN)
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = _KEYS.get(event.key)
            if key is not None:
                self.inputs.set_key(key, event.type == pygame.KEYDOWN)

    def _back_to_menu(self) -> None:
        self.lives = START_LIVES
        self.score = 0
        for _ in range(3):
            self.states.pop_state()

    def handle_events(self, events=None) -> None:
        """Feed window events into the input state and react to Escape and Enter."""
        if events is None:
            events = pygame.event.get()
        for event in events:
            self._record(event)
            if self.inputs.is_key_pressed(Key.ESCAPE):
                state = self.states.state()
                if state == "Play":
                    self.states.push_state(self._menu(PauseMenu))
                elif state == "Pause Menu":
                    for _ in range(3):
                        self.states.pop_state()
                elif state == "Settings Menu":
                    self.states.pop_state()
                elif state == "Game Over" and self.game_over:
                    self.game_over = False
                    self._back_to_menu()
                    return
                elif state == "Game Won":
                    self.game_won = False
                    self._back_to_menu()
                    return
            if self.inputs.is_key_pressed(Key.RETURN) and self.states.state() == "Pause Menu":
                self.states.pop_state()
            self.player.handle_input(self.inputs)

    def _place_objects(self) -> None:
        self.player.load_texture(WIDTH // 2 - 100, HEIGHT - 20, 100, 20, "paddle")
        self.ball.load_texture(40, HEIGHT // 2 + 5, 20, 20, "ball")
        self.ball.reset_velocity()

    def _start_level(self, mode: str) -> None:
        self._place_objects()
        self.level.read_file(mode)
        self.states.push_state(PlayState())
        self.states.mode = mode

    def _replay(self) -> None:
        self.score = 0
        self.lives = START_LIVES
        self.states.pop_state()
        self.states.pop_state()
        mode = self.states.mode
        if mode in WINNING_SCORES:
            self.level.read_file(mode)
        else:
            mode = "standard"
        self._place_objects()
        self.states.push_state(PlayState())
        self.states.mode = mode

    def update(self) -> None:
        """Advance play by one frame and act on what the top screen asks for."""
        if self.states.state() == "Play":
            self.player.update()
            self.particles.update_particles()
            if len(self.particles) == 0:
                self.hit = False
            outcome = self.ball.update(
                self.player, self.level, self.particles, self.audio,
                self.textures, pygame.time.get_ticks(),
            )
            self.score += outcome.score
            self.lives -= outcome.lives_lost
            if outcome.hit:
                self.hit = True

        action = self.states.update()
        if action == Action.REPLAY_BUTTON:
            self._replay()
        elif action == Action.QUIT_BUTTON:
            self.states.clear()
            self._running = False
            return
        elif action == Action.MODE_BUTTON:
            self.states.push_state(self._menu(LevelMenu))
        elif action == Action.SETTINGS_BUTTON:
            self.states.push_state(self._menu(SettingsMenu))
            self.states.set_sound(self.sound)
        elif action == Action.SOUND:
            self.sound = not self.sound
            self.states.set_sound(self.sound)
            self.audio.set_sound(self.sound)
        elif action in LEVEL_ACTIONS:
            self._start_level(LEVEL_ACTIONS[action])

        if self.lives == 0 and not self.game_over and self.states.state() != "Game Over":
            self.game_over = True
            self.states.push_state(GameOver(self.inputs, self.text))
        target = WINNING_SCORES.get(self.states.mode)
        if (
            target is not None
            and self.score == target
            and not self.game_won
            and self.states.state() != "Game Won"
        ):
            self.game_won = True
            self.states.push_state(GameWon(self.text))

    def clean(self) -> None:
        pygame.quit()


def main(argv=None) -> int:
    """Run the game until its window is closed."""
    parser = argparse.ArgumentParser(prog="breakout", description="Play Breakout.")
    parser.add_argument("--assets", default="assets", help="directory holding the game assets")
    args = parser.parse_args(argv)

    game = Game(args.assets)
    frame_start = pygame.time.get_ticks()
    if not game.init("Breakout", HEIGHT, WIDTH):
        return 1
    try:
        while game.running():
            game.handle_events()
            game.render()
            game.update()
            frame_time = pygame.time.get_ticks() - frame_start
            if frame_time < DELAY:
                pygame.time.delay(DELAY - frame_time)
    finally:
        game.clean()
    return 0