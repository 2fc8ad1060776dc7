# tetrispec

`tetrispec` reads the tetrimino files that define the pieces of a terminal
Tetris game. It checks whether each file is valid and prints the game
settings that the command-line options produce.

## Installation

```
pip install .
```

## Tetrimino files

Pieces are kept in a `tetriminos/` directory. Every entry whose name contains
`.tetrimino` counts as a piece, for example `bar.tetrimino`. The first line
holds three numbers: width, height and colour (1 to 8). The shape follows
below it, drawn with `*` and spaces:

```
4 1 3
****
```

A file is rejected when:

- the header does not hold exactly three numbers made only of digits;
- the colour is not between 1 and 8, or the width or height is below 1;
- the number of shape rows differs from the height;
- a shape row (other than the first) spans more `*` columns than the width;
- a row holds a character other than `*` or a space.

Pieces are listed by the first character of their file name: digits first,
then upper-case letters, then lower-case letters. Files that share a first
character keep the order the directory gave them; files starting with any
other character are left out of the list, though they still count in the
number of pieces.

## Command line

Run the command from the directory that contains `tetriminos/`:

```
tetrispec -D
```

Debug mode prints `*** DEBUG MODE ***`, the key bindings, whether the next
piece is shown, the level, the map size and the number of pieces. It then
prints each piece with its size, colour and shape, or `Error` if the file is
not valid, and ends with `Press any key to start Tetris`. Escape characters
in key bindings are shown as `^E` and a space as `(space)`; the default
arrow keys therefore read `^EOD`, `^EOC`, `^EOA` and `^EOB`.

Options:

```
 --help                  Print the usage message (debug output is then skipped)
 -L, --level={num}       Level (def: 1)
 -l {K}                  Left key (def: left arrow)
 -r, --key-right={K}     Right key (def: right arrow)
 -t, --key-turn={K}      Turn key (def: up arrow)
 -d, --key-drop={K}      Drop key (def: down arrow)
 -q, --key-quit={K}      Quit key (def: q)
 -p, --key-pause={K}     Pause key (def: space)
 --map-size={r,c}        Map size, one digit each (def: 20,10)
 -w, --whithout-next     Hide the next piece
 -D, --debug             Debug mode
```

Long options may be shortened to any unambiguous prefix and take their value
either after `=` or as the next argument. Short options take their value from
the argument that follows them. Left is set only with `-l`; there is no long
form for it.

The command exits with status 84 when the `tetriminos/` directory cannot be
read or when an option is unknown, ambiguous or missing its value; otherwise
it exits with 0.

## Library use

```python
from tetrispec.catalog import list_tetriminos, sort_names
from tetrispec.display import format_debug
from tetrispec.settings import default_settings, parse_arguments

found = list_tetriminos("tetriminos")
settings = default_settings()
settings.tetri_nb = len(found)
parse_arguments(["tetrispec", "-D", "-L", "3"], settings)
print(format_debug(sort_names(found), settings, "tetriminos"), end="")
```

`parse_arguments` expects the program name as the first item and raises
`OptionError` on a bad option. `tetrispec.tetrimino.check_tetrimino` checks
the lines of a single file, returns its `Header` (width, height, colour) and
raises `InvalidTetrimino` when the file is not valid.
`tetrispec.settings.help_text` returns the usage message.

## What it does not do

There is no game here: no playing field, no falling pieces and no reading of
key presses. The package only checks piece files and reports the settings.