"""Writing characters, strings and numbers to a text stream.

Every function writes to ``file`` when given and to standard output
otherwise.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

__all__ = ["putchar", "putstr", "putendl", "putnbr"]


def _stream(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def putchar(c: Union[int, str], file: Optional[TextIO] = None) -> None:
    """Write one character, given as a one-character string or a byte code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _stream(file).write(ch)


def putstr(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _stream(file).write(s)


def putendl(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    putstr(s, file)
    _stream(file).write("\n")


def putnbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write the decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _stream(file).write(f"{n:d}")