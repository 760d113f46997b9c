# fillit

`fillit` reads a file of up to 26 tetrominoes. It finds the smallest square
that holds all of them and prints that square. Each piece is marked with its
own letter. Letters start at `A` and follow the order of the pieces in the
file.

## Installation

```
pip install .
```

## Usage

```
fillit pieces.txt
```

Each piece in the input file is a 4x4 block of `.` and `#` characters. Each
line holds exactly four characters and ends with a newline. Pieces are
separated by an empty line:

```
....
.##.
.##.
....

#...
#...
#...
#...
```

For this input the program prints:

```
AAB.
AAB.
..B.
..B.
```

Pieces are placed in input order. Each piece goes to the top-most position
where it fits, and among those to the left-most one. If no arrangement fits,
the side of the square grows by one and the search starts again. The search
begins with the smallest square, at least 2x2, that has room for four cells
per piece.

The program prints `ERROR WHILE READING FILE` in any of these cases:

- the file cannot be opened,
- the file holds fewer than 20 or more than 545 characters. At most 26 pieces
  fit in that limit.
- a block is not four lines of four `.`/`#` characters, each ended by a
  newline,
- a piece does not have exactly four connected `#` cells.

If the number of arguments is not exactly one, it prints
`usage: fillit [file]`. The exit status is always 0.

## Library use

```python
from fillit.tetromino import read_tetromino_file
from fillit.solver import solve

pieces = read_tetromino_file("pieces.txt")
print(solve(pieces).render(), end="")
```

The main library modules are:

- `fillit.tetromino`:
  - `Tetromino` holds a letter and cells normalised to the top-left corner.
  - `parse_tetrominoes` parses text; `read_tetromino_file` reads a file.
  - The checks `check_tetromino_format`, `check_tetromino_shape` and
    `check_separators`.
  - Parsing raises `InvalidInputError`, a subclass of `ValueError`, on bad
    input.
- `fillit.solver`:
  - `Board`, with `fits`, `place` and `render`.
  - `initial_size` and `fill_board`, which places the pieces with
    backtracking.
  - `solve`, which returns the smallest board that holds every piece.
- `fillit.cli`: `main(argv=None)`, the function behind the `fillit` command.

The package also includes some small helper modules:

- `fillit.chars`: ASCII character classification and case conversion.
- `fillit.numbers`: `atoi`, `itoa` and `nbrlen`.
- `fillit.memory`: operations on `bytearray` buffers.
- `fillit.text_search` and `fillit.text_build`: search, compare, copy, join,
  trim, map and split text.
- `fillit.output`: `putchar`, `putstr`, `putendl` and `putnbr`. Each writes
  to a stream, or to standard output if no stream is given.
- `fillit.linked_list`: `LinkedList`, `Node` and `split_to_list`.
- `fillit.line_reader`: `LineReader` and `get_next_line`. Both read lines
  from a file descriptor.

## Running the tests

```
pip install .[test]
pytest
```