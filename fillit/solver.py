"""Fitting tetrominoes into the smallest square board."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from fillit.tetromino import Tetromino

__all__ = ["EMPTY", "Board", "initial_size", "fill_board", "solve"]

EMPTY = "."


class Board:
    """A square grid of cells, each empty or holding a piece's letter."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"board size must not be negative, got {size}")
        self.size = size
        self.grid: List[List[str]] = [[EMPTY] * size for _ in range(size)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    @staticmethod
    def _cells(tetromino: Tetromino, dx: int, dy: int) -> List[Tuple[int, int]]:
        return [(x + dx, y + dy) for x, y in tetromino.cells]

    def fits(self, tetromino: Tetromino, dx: int, dy: int) -> bool:
        """True when the piece shifted by (dx, dy) lies on empty cells of the board."""
        return all(
            self._inside(x, y) and self.grid[y][x] == EMPTY
            for x, y in self._cells(tetromino, dx, dy)
        )

    def place(
        self, tetromino: Tetromino, dx: int, dy: int, letter: Optional[str] = None
    ) -> None:
        """Mark the piece's cells, shifted by (dx, dy), with ``letter``.

        The piece's own letter is used by default; pass ``EMPTY`` to lift it.
        """
        cells = self._cells(tetromino, dx, dy)
        if not all(self._inside(x, y) for x, y in cells):
            raise ValueError(f"piece {tetromino.letter} at ({dx}, {dy}) leaves the board")
        mark = tetromino.letter if letter is None else letter
        for x, y in cells:
            self.grid[y][x] = mark

    def render(self) -> str:
        """The board as text, one line per row."""
        return "".join("".join(row) + "\n" for row in self.grid)


def initial_size(count: int) -> int:
    """The smallest side, at least 2, of a square with room for ``count`` pieces."""
    size = 2
    while size * size < count * 4:
        size += 1
    return size


def _fill(board: Board, pieces: Sequence[Tetromino], index: int) -> bool:
    if index == len(pieces):
        return True
    piece = pieces[index]
    for dy in range(board.size - piece.height + 1):
        for dx in range(board.size - piece.width + 1):
            if board.fits(piece, dx, dy):
                board.place(piece, dx, dy)
                if _fill(board, pieces, index + 1):
                    return True
                board.place(piece, dx, dy, EMPTY)
    return False


def fill_board(board: Board, tetrominoes: Iterable[Tetromino]) -> bool:
    """Place every piece in order, backtracking; the board is unchanged on failure."""
    return _fill(board, list(tetrominoes), 0)


def solve(tetrominoes: Iterable[Tetromino]) -> Board:
    """The smallest square board that holds every piece."""
    pieces = list(tetrominoes)
    size = initial_size(len(pieces))
    while True:
        board = Board(size)
        if fill_board(board, pieces):
            return board
        size += 1