# lifegame

An interactive Conway's Game of Life. The board is a 180 × 180 grid of cells,
each drawn 5 × 5 pixels in a 900 × 900 pygame window. Cells beyond the edge
of the board count as dead; the board does not wrap around. A curses menu in
the terminal controls the simulation. From it you can pause the simulation,
fill the board at random, clear it, change the speed, and place patterns
loaded from a directory of pattern files.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running

```
lifegame [--patterns DIRECTORY]
```

`--patterns` names the directory of pattern files. The default is
`patterns`, relative to the current directory. The board opens in a window
and the menu appears in the terminal that started the command. Key presses
are read from the board window.

The menu's panels are laid out at fixed positions. The terminal must be at
least 55 rows by 206 columns, or curses fails when the menu opens.

### Home menu

| Key | Action                          |
|-----|---------------------------------|
| `1` | Pause or resume the simulation  |
| `2` | Fill the board at random        |
| `3` | Clear the board                 |
| `4` | Open the speed menu             |
| `5` | Open the pattern browser        |

When no pattern is picked, a mouse click toggles the cell under the pointer.

### Speed menu

The left and right arrows change the speed, which runs from 1 to 120. The
default is 10. At speed `s`, the board advances one generation every
`120 // s` frames. A frame lasts about 8 ms. `Esc` goes back to the home
menu.

### Pattern browser

- Up and down move through the categories: Block, Oscillator, Glider, Gun,
  Spaceship, Eater and Spacefiller.
- `Enter` moves into the patterns of the chosen category. The panel beside
  the list shows the highlighted pattern's name, its dimensions and its cells.
- In the pattern list, `Enter` picks the highlighted pattern. It follows the
  mouse in red, and a click stamps its live cells onto the board. Any part
  that falls outside the board is dropped.
- `r` rotates the picked pattern a quarter turn clockwise.
- `Esc` drops the picked pattern and goes back to the categories. A second
  `Esc` goes back to the home menu.

## Pattern files

Every regular file in the pattern directory holds one pattern. The files are
read in order of file name. A pattern file is plain text in this form:

```
Glider
Glider
3
3
010
001
111
```

The lines are, in order:

1. The name.
2. The category. A line that matches no category counts as Oscillator.
3. The height, in rows. This is a leading integer, as with `atoi`.
4. The length, in columns. This is also a leading integer.
5. One row of cells per line. `1` is a live cell. Any other character is a
   dead cell, and so is a missing character or a missing line.

A file that ends before the four header lines, or that gives a negative
dimension, raises `ValueError`.

## Using the library

```python
import random

from lifegame.game import Game
from lifegame.pattern import PatternType, load_pattern, load_patterns

game = Game()
game.select_pattern(load_pattern("patterns/glider").cells)
game.rotate_pattern()
game.click(100, 100)          # pixel coordinates; places the pattern at cell (20, 20)
game.step()
print(game.iteration, game.population)

game.random_map(random.Random(1))
print(game.count_neighbours(10, 10))

library = load_patterns("patterns")   # dict of PatternType -> list of Pattern
gliders = library[PatternType.GLIDER]
```

- `lifegame.game.Game` holds the board (`grid`), the generation counter
  (`iteration`), the live-cell count from the last step (`population`),
  `running`, `speed` and the pattern waiting to be placed (`to_place`).
  Its methods are `step`, `count_neighbours`, `reset_map`, `random_map`,
  `select_pattern`, `clear_pattern`, `rotate_pattern` and `click`.
- `lifegame.pattern` provides `Pattern`, `PatternType`, `parse_pattern`
  (from an open text stream), `load_pattern` and `load_patterns`.
- `lifegame.menu.Menu` is the menu state. `Menu.key_pressed(game, key)`
  takes pygame key codes. Created without a view, it changes state only and
  draws nothing. `Menu.open_curses(storage)` shows it in the terminal.
- `lifegame.window.Window` draws a game on a pygame surface and runs the
  main loop. If you give it a surface, it draws there and does not open a
  display.

## What it does not do

The board has a fixed size, and there is no way to save it. Patterns can be
loaded but not written back to files.