# breakout

A brick-breaking arcade game built on pygame. Bounce the ball off your
paddle, break the bricks and reach the full score of a layout before you run
out of lives.

## Installing

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing

```
breakout
breakout --assets path/to/assets
```

`--assets` names the directory holding the game's files (default:
`assets`). The game expects to find there:

- images `paddle.png`, `ball.png`, `restart_icon.png`, `quit_icon.png`,
  `red_brick.png`, `orange_brick.png`, `green_brick.png`,
  `yellow_brick.png`, and an optional window icon `icon.bmp`;
- fonts `regular.ttf`, `slkscr.ttf` and `slkscrb.ttf`;
- the sound `hit.wav`;
- level layouts in `modes/standard.txt`, `modes/1337.txt`,
  `modes/pyramid.txt` and `modes/crazy.txt`.

Missing images, fonts or sounds are logged and simply not drawn or played.
A missing layout file raises `LevelFileError` when that layout is chosen. If
the audio device cannot be opened, `breakout` exits with status 1.

### Controls

- **Left / A** and **Right / D** move the paddle.
- **Esc** pauses a running game. In the pause screen, **Enter** resumes and
  **Esc** returns to the main menu. Esc also leaves the settings screen, and
  returns to the main menu from the game-over and game-won screens.
- The mouse drives the menus: **Play** opens the layout choice, **Settings**
  shows a button that switches sound on and off. The quit icon in the
  bottom-right corner of the main menu, layout menu and pause screen ends the
  game; the restart icon next to it in the pause screen restarts the current
  layout.

### Rules

Four layouts are available: *Standard*, *1337*, *Pyramid* and *Crazy*.
Bricks are worth 1 (yellow), 3 (green), 5 (orange) and 7 (red) points;
orange and red bricks set the ball back to a fixed speed. Hitting the top
wall speeds the ball up and shrinks the paddle to half its width. You start
with three lives; losing the ball off the bottom of the screen costs one and
restores the full paddle. The game is won when the score reaches the layout's
total: 544 (Standard), 176 (1337), 291 (Pyramid) or 1139 (Crazy).

## Level files

A layout is a plain text file; the first 22 lines are read, and up to 17
characters of each are drawn. Each character is a 64×32 tile: `1`–`4` are
yellow, green, orange and red bricks, anything else (such as `0`) is empty.

## Using the pieces

The modules can also be used on their own:

- `breakout.vector` – a mutable 2D `Vector` with arithmetic operators,
  `length()` and `normalize()`.
- `breakout.input` – `InputHandler`, tracking held keys (`Key`), mouse
  buttons (`MouseButton`) and the cursor position.
- `breakout.particles` – `Particle` and `ParticlesManager`, the short-lived
  debris shown when a brick breaks.
- `breakout.highscore` – `HighScore`, which reads a best score from
  `assets/save` or `assets/save.txt` and writes a higher one back.
- `breakout.assets` – `TextureManager` (with dimmed drawing via `darken()`),
  `TextManager` and `AudioManager`.
- `breakout.level` – `LevelManager` and `LevelFileError`.
- `breakout.objects` – `GameObject`, `Player`, `Ball` and the `BallOutcome`
  each ball step reports.
- `breakout.states` – the `StateControl` screen stack, the `Action` values
  screens return, and the `PlayState`, `GameOver` and `GameWon` screens.
- `breakout.menus` – `MainMenu`, `SettingsMenu`, `LevelMenu` and `PauseMenu`.
- `breakout.game` – `Game`, which ties everything together, and `main()`.

## What it does not do

- It ships no images, fonts, sounds or layouts; these must be supplied in the
  assets directory.
- The game does not record or show a best score. `HighScore` exists as a
  separate piece but the game loop does not use it.
- The sound setting is not remembered between runs.