"""Command line entry point: solve the pieces stored in one file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from fillit.output import putstr
from fillit.solver import solve
from fillit.tetromino import InvalidInputError, read_tetromino_file

__all__ = ["main"]

USAGE = "usage: fillit [file]\n"
READ_ERROR = "ERROR WHILE READING FILE\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the smallest square holding the pieces in the file named by ``argv``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        putstr(USAGE)
        return 0
    try:
        pieces = read_tetromino_file(args[0])
    except (OSError, InvalidInputError):
        putstr(READ_ERROR)
        return 0
    putstr(solve(pieces).render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())