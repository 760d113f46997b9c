"""Length, search and comparison helpers for text.

Search functions return an index into the searched text, or None when
nothing is found. Comparisons return the difference of the first pair of
characters that differ, with the end of a string counting as code 0.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strstr",
    "strnstr",
    "strcmp",
    "strncmp",
    "strspn",
    "strcspn",
    "strequ",
    "strnequ",
]

_TERMINATOR = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def _difference(a: str, b: str) -> int:
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the terminator character gives the length of ``s``.
    """
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    found = s.find(ch)
    return None if found < 0 else found


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the terminator character gives the length of ``s``.
    """
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    found = s.rfind(ch)
    return None if found < 0 else found


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; 0 for an empty needle."""
    found = haystack.find(needle)
    return None if found < 0 else found


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`strstr`, but the match must lie in the first ``length`` characters."""
    _check_count(length)
    if not needle:
        return 0
    found = haystack[:length].find(needle)
    return None if found < 0 else found


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings character by character."""
    return _difference(s1, s2)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    _check_count(n)
    return _difference(s1[:n], s2[:n])


def strspn(s: str, accept: str) -> int:
    """Length of the leading run of ``s`` made only of characters in ``accept``."""
    count = 0
    for ch in s:
        if ch not in accept:
            break
        count += 1
    return count


def strcspn(s: str, reject: str) -> int:
    """Length of the leading run of ``s`` with no character from ``reject``."""
    count = 0
    for ch in s:
        if ch in reject:
            break
        count += 1
    return count


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return s1 == s2


def strnequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are given and agree in their first ``n`` characters."""
    _check_count(n)
    if s1 is None or s2 is None:
        return False
    return s1[:n] == s2[:n]