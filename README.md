# picosnake

Snake on a 5x5 RGB LED grid. The LED matrix, a 128x64 SSD1306 monochrome
display, a PWM buzzer and an analogue joystick are all modelled in software,
so the game rules and the drawing code run anywhere Python 3.10 or later runs.
There are no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `picosnake` command

```
picosnake --phase 2 --seed 7 --moves "..U..R"
```

The command plays one scripted round and prints what happened:

| Option           | Meaning                                                        | Default |
|------------------|----------------------------------------------------------------|---------|
| `--phase N`      | phase 1, 2 or 3                                                 | 1       |
| `--seed N`       | seed for apple placement                                        | random  |
| `--moves TEXT`   | joystick position for each step: `R`, `L`, `U`, `D` or `.` (centred); case does not matter | empty   |
| `--max-steps N`  | stop after this many steps                                      | 100     |
| `--show-display` | also print the display frame as text (`#` lit, `.` dark)        | off     |

Once `--moves` runs out, the joystick stays centred. The round ends when the
snake has eaten five apples, hits a wall, an obstacle or its own body, or when
`--max-steps` is reached. The command then prints the grid, top row first,
with `O` for the head, `o` for the body, `*` for the apple and `#` for
obstacles, followed by the result.

The snake starts heading right and only turns at right angles: while moving
left or right, only `U` and `D` change its heading; while moving up or down,
only `L` and `R` do.

| Phase | Obstacles | Step interval |
|-------|-----------|---------------|
| 1     | 0         | 1000 ms       |
| 2     | 3         | 800 ms        |
| 3     | 6         | 600 ms        |

The step interval is part of each phase's configuration; the command itself
does not wait between steps.

## Using the modules

- `picosnake.game`: the rules. `SnakeGame` (with `reset`, `place_apple`,
  `steer`, `step`, `collides`, `draw` and `retreat_head`), `Direction`,
  `Phase`, `Coordinate`, `PhaseConfig`, `PHASES`, `apply_deadzone`,
  `choose_direction`, `digit_cells` and `draw_number`.
- `picosnake.app`: the screens and menu. `Screen`, `render_screen`,
  `draw_square`, `draw_border`, `Menu` (with `move`, `select` and `draw`) and
  the command's `main`.
- `picosnake.neopixel`: the serpentine 5x5 LED chain. `LedMatrix` (with
  `set_led`, `clear`, `write` and `color_at`) and `get_index`. `write` returns
  the G, R, B bytes and passes them to an optional sink.
- `picosnake.ssd1306`: the display. `SSD1306` keeps the frame buffer and
  draws pixels, lines, rectangles and text; `send_data` and `config` pass
  their bytes to an optional bus object with a `write(address, data)` method;
  `render_text` gives a text preview of the frame. `Command` lists the
  command bytes.
- `picosnake.buzzer`: `Buzzer`, a non-blocking beeper whose `update` ends a
  beep once its time is up.
- `picosnake.font`: the 8x8 glyphs, with `glyph` and `glyph_offset`.

```python
import random
from picosnake.game import SnakeGame, Phase
from picosnake.neopixel import LedMatrix

game = SnakeGame(Phase.EASY, random.Random(1))
ate = game.step()
matrix = LedMatrix()
game.draw(matrix)
print(ate, game.apples, game.lost, game.segments)
```

## What it does not do

- There is no live play: the command takes its joystick input from `--moves`
  and plays a single round, with no menu navigation at run time and no button
  to quit a round early.
- Nothing drives real hardware. The LED matrix, display and buzzer only hold
  state and hand bytes to the sink or bus you give them; the command gives
  them none, so no sound is made and no LEDs are lit.