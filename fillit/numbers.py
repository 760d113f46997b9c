"""Conversions between integers and their decimal text."""

from __future__ import annotations

__all__ = ["atoi", "itoa", "nbrlen"]

_WHITESPACE = "\n\t\v\r\f "
_DIGITS = "0123456789"
_ULONG_MOD = 2**64
_LONG_MAX = 9223372036854775807


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer with C ``int`` semantics.

    Leading whitespace is skipped and one optional sign is read. Parsing stops
    at the first non-digit; text with no digits yields 0. A magnitude beyond
    the signed 64-bit range gives -1 (or 0 when negative); otherwise the value
    wraps to 32 bits.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    collector = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        collector = (collector * 10 + _DIGITS.index(ch)) % _ULONG_MOD
    if collector > _LONG_MAX:
        return 0 if sign < 0 else -1
    return _wrap32(_wrap32(collector) * sign)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return f"{n:d}"


def nbrlen(n: int) -> int:
    """Number of characters in the decimal text of ``n``, sign included."""
    return len(itoa(n))