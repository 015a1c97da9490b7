# ftselect

ftselect is an interactive picker for the terminal. You pass it a list of words as
arguments. It lays them out in columns on the full screen. You move the cursor with the
arrow keys, mark items with the space bar and press Enter. The program then prints the
marked items to standard output, separated by single spaces, so you can feed them into
other commands.

## Installation

```
pip install .
```

ftselect uses only the standard library. It needs `curses` and `termios`, so it runs on
POSIX systems.

## Usage

```
ftselect apple banana cherry date
```

The screen is drawn on standard error. Standard output receives only the final
selection, so you can capture it:

```
chosen=$(ftselect *.txt)
```

The items are shown in the reverse order of the arguments, and the cursor starts on
the first item shown. The selection is printed in the same order as the items are
shown.

### Keys

| Key              | Action                                                              |
|------------------|---------------------------------------------------------------------|
| Arrow up/down    | Move to the previous or next item (wraps around)                    |
| Arrow left/right | Move to the nearest item on the same row in that direction (wraps)  |
| Space            | Toggle the current item and move to the next one                    |
| Enter            | Print the selected items and exit                                   |
| Delete           | Remove the current item; the cursor moves to the next one           |
| Backspace        | Remove the item before the cursor (the last item when at the first) |
| Escape           | Exit without printing anything                                      |

The cursor item is underlined and selected items are shown in reverse video.

When the last item is removed, the program exits without printing anything. If the
items do not fit in the window, an error message replaces them and keys are ignored
until a resize lets them fit. Ctrl-C and Ctrl-\ restore the terminal and exit.
Ctrl-Z restores the terminal and suspends the program. Resuming it returns to the
picker and redraws the screen.

The program needs a terminal on standard error and a `TERM` variable that names a known
terminal type. If either is missing, or if no arguments are given, it prints an
`Error: ...` message on standard error and exits with status 1.

## Library use

You can use the selection logic without a terminal:

```python
from ftselect.selection import Direction, Selection

sel = Selection(["one", "two", "three"])  # shown as: three, two, one
sel.toggle()              # selects "three", cursor moves to "two"
sel.move(Direction.DOWN)  # cursor on "one"
sel.toggle()
print(sel.result())       # "three one"
```

- `Selection.layout(rows, columns)` places items in columns for a window of the given
  size. It raises `WindowTooSmall` when they do not fit. Each `Item` then has its `x`
  and `y` position.
- `Selection.delete()` and `Selection.backspace()` return whether any items are left.
- `Selection.selected_values()` returns the selected values as a list.

`ftselect.terminal` contains the interactive part:

- `parse_key` turns raw input bytes into a `Key`.
- `render` draws a selection on a `Terminal`.
- `App` runs the read–update–redraw loop. `App.run(read)` takes any callable that
  returns input bytes.

## Helpers

The `ftselect.libft` sub-package holds small helpers that follow C library conventions:

- `chars`: ASCII classification and case conversion.
- `numbers`: `atoi`, `itoa`, `stoa`.
- `output`: `putchar`, `putstr`, `putendl`, `putnbr` to a text stream.
- `memory`: byte-buffer operations on bytearrays.
- `strings`: searching and comparing NUL-terminated text.
- `buffers`: copying and appending NUL-terminated strings held in bytearrays, plus
  `strdup`, `strsub` and `strjoin`.
- `transform`: `strmap`, `strtrim`, `strsplit`, `splitspctab` and the like.
- `lists`: a singly linked `Node` list with `lstnew`, `lstadd`, `lstmap` and the like.

## Running the tests

```
pip install .[test]
pytest
```