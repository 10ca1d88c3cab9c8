# minitasks

A small library with the pieces behind a few simple programs: strict
parsing of typed input, tic-tac-toe rules, a to-do list saved to a text
file, and image editing operations on RGB arrays with undo.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `minitasks.parsing`

- `parse_int(text)` returns the integer for a string made only of ASCII
  digits; empty input or any other character raises `ValueError`.
- `parse_char(text)` returns `text` when it is exactly one ASCII letter
  and raises `ValueError` otherwise.

### `minitasks.tictactoe`

- `PlayerType` (`X`, `O`), `Player` (a mark and whether a person plays
  it; players compare equal when they play the same mark), `CheckType`
  (`X`, `O`, `NONE`, `DRAW`) and `GameMode` (`EXIT`,
  `PLAYER_VS_PLAYER`, `PLAYER_VS_COMPUTER`).
- `find_winning_line(cells, mark)` returns the first row, column or
  diagonal of three cell indexes that all hold `mark`, or `None`.
- `Board` holds nine cells labelled `"1"` to `"9"` while empty.
  `set_cell(cell, player)` takes a 1-based cell number and returns
  whether the mark was placed (out-of-range or taken cells are left
  alone). `random_cell(rng)` returns the 0-based index of a random empty
  cell, `is_full()` and `cells()` report the state, `reset()` empties it.
- `Game(mode)` has `player1` (X), `player2` (O, computer-controlled in
  `PLAYER_VS_COMPUTER`), `current_player`, `board`, `check_type` and
  `win_cells`. `set_cell(index)` takes a 0-based index, `check()` works
  out the result, and `switch_turn()` passes the turn to the other player.

```python
from minitasks.tictactoe import CheckType, Game, GameMode

game = Game(GameMode.PLAYER_VS_PLAYER)
for index in (0, 3, 1, 4, 2):
    game.set_cell(index)
    if game.check() is not CheckType.NONE:
        break
    game.switch_turn()
print(game.check_type, game.win_cells)   # CheckType.X [0, 1, 2]
```

### `minitasks.todo`

- `Task(text, done=False)` is one item.
- `TaskStore(path="tasks.txt")` saves and loads tasks. The file holds
  the number of tasks on its first line, then one line per task: the
  text with spaces written as underscores, a space, and `1` or `0`.
  A missing file loads as an empty list; a malformed one raises
  `ValueError`. `clear()` deletes the file.
- `TodoList(store)` loads the tasks and saves after each change.
  `add(text)` puts a new task at the top, `delete(index)` and
  `toggle(index)` act on a 0-based index (raising `IndexError` when
  there is no such task), `swap(first, second)` exchanges two tasks,
  `move(index, offset, carry=False)` moves a selection up or down and
  optionally carries the task along, and `clear()` empties the list and
  deletes the file.

```python
from minitasks.todo import TaskStore, TodoList

todos = TodoList(TaskStore("tasks.txt"))
todos.add("buy milk")
todos.toggle(0)
```

### `minitasks.imaging`

Images are NumPy arrays of shape (height, width, 3) with `uint8` values.

- `to_grayscale(image)`, `box_blur(image, radius)`,
  `adjust_brightness(image, amount)`, `adjust_contrast(image, factor)`,
  `crop(image, top_x, top_y, bottom_x, bottom_y)` and
  `resize(image, width, height)` each return a new array. Values are
  clipped to 0..255; invalid crop rectangles and sizes raise
  `ValueError`.
- `contrast_factor(slider_value)` maps a slider position from 0 to 400
  to a multiplier from 0.0 to 4.0. `parse_crop_values(texts)` and
  `parse_resize_values(texts)` turn four or two text fields into
  integers, truncating fractions.
- `load_image(path)` and `save_image(image, path)` read and write files
  through Pillow.
- `ImageEditor` keeps the current image and its history:
  `load(path)`, `apply(operation, *args)`, `undo()` and `save(path)`.
  Editing or saving with no image loaded raises `ValueError`; the first
  loaded version is never dropped by `undo()`.

```python
from minitasks.imaging import ImageEditor, adjust_brightness, to_grayscale

editor = ImageEditor()
editor.load("photo.png")
editor.apply(to_grayscale)
editor.apply(adjust_brightness, 40)
editor.undo()
editor.save("photo-edited.png")
```

## What the package does not do

It installs no commands and has no interactive programs: there is no
number guessing game, no terminal tic-tac-toe with menus or a computer
opponent's turn loop, no to-do menu, and no window for image editing.
It provides the rules, storage and image operations that such programs
would call.