# snakegrid

A small snake game played on a 14 × 14 grid in a 600 × 600 window. Eat
the red fruit to grow, and avoid the walls and your own body. Every part
the snake grows by is worth 10 points, and the best score is kept between
sessions.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and reads the keyboard.

## Playing

```
snakegrid
```

Options:

- `--font PATH` – TrueType font for the score panel (default `font.ttf`
  in the current directory). If the file is missing or cannot be
  opened, a message is printed and pygame's default font is used.
- `--score-file PATH` – file holding the high score (default `score.dat`
  in the current directory).

Controls and rules:

- Press **W**, **A**, **S** or **D** to start a round. Keys are read by
  their physical position on the keyboard.
- **W** moves up, **S** moves down, **A** moves left and **D** moves right.
  The snake cannot turn straight back on itself. Turns pressed between
  steps are queued and taken one per step; no new turns are queued while
  more than two are waiting.
- The snake steps once every 0.12 seconds. The round ends when its head
  leaves the grid or runs into its body.
- While no round is running, a panel shows the high score, the score of
  the last round and the hint "Press WASD to start".
- Close the window to quit.

The high score is stored as a four-byte little-endian unsigned integer.
The file is created holding 0 when it is missing or shorter than four
bytes.

## Using the pieces

The game logic does not need a window, so it can be driven directly:

```python
from snakegrid.game import SnakeGame

game = SnakeGame(score_path=None)  # None: keep the high score in memory only
print(game.snake, game.fruit_pos, game.score())
game.update_snake(0.12)            # advance one step
print(game.snake, game.game_over)
```

`SnakeGame` also takes a `random.Random` as `rng` for repeatable fruit
placement and an `on_score(score, hi_score)` callback that is called
whenever a round ends. `SnakeGame.update(delta_time, events)` takes any
object with an `is_key_pressed(scancode)` method.

Other modules:

- `snakegrid.grid` – `Grid` holds the board as `TileType` values and
  draws it onto a pygame surface.
- `snakegrid.events` – `EventManager` turns a frame's pygame events into
  "pressed this frame" signals and notes when quitting was requested.
- `snakegrid.text` – `TextRenderer` loads a font and renders strings.
- `snakegrid.panel` – `Panel` lays out and draws the score panel.
- `snakegrid.score_store` – `read_high_score`, `write_high_score` and
  `create_score_file` manage the high-score file.
- `snakegrid.params` – window size, grid size, speed, colours and the
  `Vec2` coordinate type.
- `snakegrid.app` – `App` ties these together; `App.step(delta_time,
  events)` runs a single frame onto any surface, and `main()` is the
  `snakegrid` command.

## Running the tests

```
pip install .[test]
pytest
```