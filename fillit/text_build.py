"""Building, copying, trimming, mapping and splitting text.

Functions that build text take strings and return new strings. Mutable
text buffers are lists of one-character strings. The text in a buffer ends
at the first ``"\\0"`` or at the end of the list.
"""

from __future__ import annotations

from typing import Callable, List, Tuple

__all__ = [
    "strdup",
    "strnew",
    "strclr",
    "strcpy",
    "strncpy",
    "strcat",
    "strncat",
    "strlcpy",
    "strlcat",
    "strsub",
    "strjoin",
    "strtrim",
    "strmap",
    "strmapi",
    "striter",
    "striteri",
    "strsplit",
]

_TERMINATOR = "\0"
_TRIM = " \n\t"

Buffer = List[str]


def _check_count(n: int, name: str = "count") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _terminated(text: str) -> str:
    return text.split(_TERMINATOR, 1)[0]


def _one_char(value: object) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return value


def strdup(s: str) -> str:
    """A copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(s)


def strnew(size: int) -> Buffer:
    """A new buffer of ``size`` terminator characters, holding empty text."""
    _check_count(size, "size")
    return [_TERMINATOR] * size


def strclr(buf: Buffer) -> Buffer:
    """Overwrite the text held in ``buf`` with terminators and return it."""
    for i, ch in enumerate(buf):
        if ch == _TERMINATOR:
            break
        buf[i] = _TERMINATOR
    return buf


def strcpy(dest: str, src: str) -> str:
    """The text of ``dest`` after ``src`` is copied over it: ``src`` itself."""
    return _terminated(src)


def strncpy(dest: str, src: str, n: int) -> str:
    """The text of ``dest`` after at most ``n`` characters of ``src`` are copied over it.

    A source shorter than ``n`` is terminated; otherwise no terminator is
    written and the rest of ``dest`` past ``n`` stays in place.
    """
    _check_count(n)
    head = _terminated(src)[:n]
    if len(head) < n:
        return head
    return _terminated(head + dest[n:])


def strcat(dest: str, src: str) -> str:
    """``src`` appended to ``dest``."""
    return _terminated(dest) + _terminated(src)


def strncat(dest: str, src: str, n: int) -> str:
    """At most ``n`` characters of ``src`` appended to ``dest``."""
    _check_count(n)
    return _terminated(dest) + _terminated(src)[:n]


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters.

    Returns the copied text, which keeps one place for the terminator, and
    the full length of ``src``.
    """
    _check_count(dstsize, "size")
    text = _terminated(src)
    if dstsize == 0:
        return "", len(text)
    return text[: dstsize - 1], len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had. When ``dest`` already fills the buffer nothing is appended and the
    length reported is ``size`` plus the length of ``src``.
    """
    _check_count(size, "size")
    head = _terminated(dest)
    tail = _terminated(src)
    if size == 0:
        return head, len(tail)
    if len(head) > size - 1:
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strsub(s: str, start: int, length: int) -> str:
    """The ``length`` characters of ``s`` that begin at ``start``."""
    _check_count(start, "start")
    _check_count(length, "length")
    if start + length > len(s):
        raise ValueError(
            f"substring {start}:{start + length} runs past the end of a text of {len(s)}"
        )
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """A new string of ``s1`` followed by ``s2``."""
    return strcat(s1, s2)


def strtrim(s: str) -> str:
    """``s`` without leading and trailing spaces, newlines and tabs."""
    return s.strip(_TRIM)


def strmap(s: str, f: Callable[[str], str]) -> str:
    """A new string of ``f`` applied to each character of ``s``."""
    return "".join(_one_char(f(ch)) for ch in _terminated(s))


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string of ``f`` applied to each index and character of ``s``."""
    return "".join(_one_char(f(i, ch)) for i, ch in enumerate(_terminated(s)))


def striter(buf: Buffer, f: Callable[[str], str]) -> Buffer:
    """Replace each character of the text in ``buf`` with ``f`` of it."""
    for i, ch in enumerate(buf):
        if ch == _TERMINATOR:
            break
        buf[i] = _one_char(f(ch))
    return buf


def striteri(buf: Buffer, f: Callable[[int, str], str]) -> Buffer:
    """Replace each character of the text in ``buf`` with ``f`` of its index and it."""
    for i, ch in enumerate(buf):
        if ch == _TERMINATOR:
            break
        buf[i] = _one_char(f(i, ch))
    return buf


def strsplit(s: str, c: str) -> List[str]:
    """The non-empty words of ``s`` separated by the character ``c``."""
    sep = _one_char(c)
    if sep == _TERMINATOR:
        raise ValueError("the separator must not be the terminator character")
    return [word for word in _terminated(s).split(sep) if word]