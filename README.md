# taquin

A sliding-tile picture puzzle. Pick one of three pictures and a grid of 3 to 8
rows and 3 to 8 columns. The picture is cut into tiles, the top-left tile is
left out to make a gap, and the board is shuffled. Slide the tiles back into
place.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Pictures

The pictures are not part of the package. The game loads them from a
directory, `Images` in the current directory by default, or the one given with
`--images`:

```
taquin --images path/to/Images
```

The directory must hold these files:

- `Menu.png`, `Fleche.png` – home screen background and its arrow
- `Fond.png`, `check.png` – setup screen background and its check mark
- `Taquin.png`, `Taquin2.png`, `Taquin3.png` – the three puzzle pictures
  (500×500, 960×540 and 408×638 pixels)
- `mini_Taquin.png`, `mini_Taquin2.png`, `mini_Taquin3.png` – the side panels
  shown next to each picture, with the move counter and the buttons
- `Victory.png` – the victory banner

If a picture is missing, or the display cannot be opened, `taquin` prints the
error to standard error and exits with status 1.

## Playing

```
taquin
```

**Home screen.** Two buttons, play and quit. Choose with the Up and Down
arrows and confirm with Enter, or click a button.

**Setup screen.** Choose the picture, the number of rows and the number of
columns (3 to 8 each). Move the cursor with the arrow keys and press Enter to
take the choice under it, or click a choice directly. Start with the play
button, by Enter on it or a click. The screen starts on picture 1 and a 3×3
grid, and remembers the last choices when you come back to it.

**Game screen.**

| Input                              | Effect                                  |
|------------------------------------|-----------------------------------------|
| Up / Right / Down / Left arrows    | slide a neighbouring tile into the gap  |
| click a tile next to the gap       | slide that tile into the gap            |
| `R` or `r`, or the shuffle button  | shuffle the board again                 |
| Backspace, or the menu button      | go back to the home screen              |
| Escape, or the quit button         | leave the game                          |

A counter beside the board shows the moves made. When every tile is back in
place, the whole picture is shown with the victory banner; moves and
reshuffling then stop working, and you can only go back to the menu or quit.
Closing the window quits at any time.

## Using the puzzle logic

`taquin.board` works without a window:

```python
import random
from taquin.board import Board, Direction

board = Board(4, 4)                      # columns, rows
board.shuffle(random.Random(1), 10000)
board.move(Direction.UP)                 # True if a tile moved
print(board.empty_position())            # (column, row) of the gap, 1-based
print(board.tile_at(2, 3))               # home cell of that tile, or None for the gap
print(board.is_solved())
```

- `Direction` names the four moves; each slides the tile on the opposite
  side of the gap into it (`UP` moves the tile below the gap).
- `Board.shuffle(rng, moves)` plays `moves` random directions; impossible
  ones are skipped.
- `Board.tile_at` raises `IndexError` outside the board.
- `TileGeometry.from_image(width, height, columns, rows)` gives the tile size
  on screen; `tile_origin` and `contains` locate cells in pixels.
- `key_direction(name)` maps `"up"`, `"right"`, `"down"`, `"left"` to a
  `Direction`, and `click_direction(board, geometry, x, y)` gives the
  direction whose moving tile lies under a click.

`taquin.menu` holds the screen layouts: `SetupMenu` (with `handle_key` and
`handle_click`), `home_hit`, `game_action` with its `GameAction` results, and
`image_spec` for the three pictures. `taquin.app.GameSession` combines a
shuffled board, the move counter and the victory state, driven by
`handle_key` and `handle_click`.