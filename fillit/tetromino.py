"""Tetromino pieces and the reader for their text format.

A piece is four lines of four characters, each ``.`` or ``#`` and ended by
a newline. Pieces are separated by one character and hold exactly four
connected ``#`` cells.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple, Union

__all__ = [
    "TETROMINO_SIZE",
    "InvalidInputError",
    "Tetromino",
    "normalize",
    "check_tetromino_shape",
    "check_tetromino_format",
    "check_separators",
    "create_tetromino",
    "parse_tetrominoes",
    "read_tetromino_file",
]

TETROMINO_SIZE = 20
_STRIDE = TETROMINO_SIZE + 1
_ROW = 5
_MAX_INPUT = 545
_READ_LIMIT = _MAX_INPUT + 1
_CELLS = 4

Cell = Tuple[int, int]


class InvalidInputError(ValueError):
    """The input does not describe a valid set of tetrominoes."""


@dataclass(frozen=True)
class Tetromino:
    """A piece named by ``letter`` whose cells touch the top and left edges."""

    letter: str
    cells: Tuple[Cell, ...]

    @property
    def width(self) -> int:
        return max(x for x, _ in self.cells) + 1

    @property
    def height(self) -> int:
        return max(y for _, y in self.cells) + 1


def normalize(cells: Iterable[Cell]) -> Tuple[Cell, ...]:
    """Shift ``cells`` so that the smallest x and the smallest y are 0."""
    cells = tuple(cells)
    if not cells:
        return ()
    min_x = min(x for x, _ in cells)
    min_y = min(y for _, y in cells)
    return tuple((x - min_x, y - min_y) for x, y in cells)


def check_tetromino_shape(block: str) -> bool:
    """True when the block's ``#`` cells form one connected tetromino."""
    filled = {i for i, ch in enumerate(block[:TETROMINO_SIZE]) if ch == "#"}
    connections = sum(
        1 for i in filled for step in (1, -1, _ROW, -_ROW) if i + step in filled
    )
    return connections in (6, 8) and len(filled) < 5


def check_tetromino_format(block: str) -> bool:
    """True when the block is four lines of four ``.`` or ``#`` characters."""
    if len(block) < TETROMINO_SIZE:
        return False
    for position, ch in enumerate(block[:TETROMINO_SIZE], start=1):
        if position % _ROW == 0:
            if ch != "\n":
                return False
        elif ch not in ".#":
            return False
    return True


def check_separators(data: str) -> bool:
    """True when every piece in ``data`` ends its last line with a newline."""
    for ch in data[TETROMINO_SIZE - 1 :: _STRIDE]:
        if ch == "\0":
            return True
        if ch != "\n":
            return False
    return True


def create_tetromino(block: str, letter: str) -> Tetromino:
    """Build the piece drawn in ``block`` and name it ``letter``."""
    cells = [
        (i % _ROW, i // _ROW)
        for i, ch in enumerate(block[:TETROMINO_SIZE])
        if ch == "#"
    ]
    if len(cells) != _CELLS:
        raise InvalidInputError(f"a tetromino needs {_CELLS} cells, found {len(cells)}")
    return Tetromino(letter, normalize(cells))


def parse_tetrominoes(data: str) -> List[Tetromino]:
    """Parse every piece in ``data``, naming them A, B, C and so on."""
    if not TETROMINO_SIZE <= len(data) <= _MAX_INPUT:
        raise InvalidInputError(
            f"input must hold {TETROMINO_SIZE} to {_MAX_INPUT} characters, got {len(data)}"
        )
    if not check_separators(data):
        raise InvalidInputError("a tetromino is not ended by a newline")
    pieces = []
    for index, start in enumerate(range(0, len(data), _STRIDE)):
        block = data[start : start + TETROMINO_SIZE]
        if not (check_tetromino_format(block) and check_tetromino_shape(block)):
            raise InvalidInputError(f"tetromino {index + 1} is invalid")
        pieces.append(create_tetromino(block, chr(ord("A") + index)))
    return pieces


def read_tetromino_file(path: Union[str, Path]) -> List[Tetromino]:
    """Read and parse the pieces stored in the file at ``path``."""
    with open(path, "rb") as handle:
        raw = handle.read(_READ_LIMIT)
    return parse_tetrominoes(raw.decode("latin-1"))