"""Byte-buffer operations on ``bytearray`` and other byte sequences.

Functions that write take a mutable buffer and return it. Lengths that run
past the end of a buffer raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "memset",
    "bzero",
    "memalloc",
    "calloc",
    "memcpy",
    "memccpy",
    "memmove",
    "memchr",
    "memcmp",
]


def _require(data, n: int, name: str, offset: int = 0) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + n > len(data):
        raise ValueError(
            f"{name} holds {len(data)} bytes, too few for {n} at offset {offset}"
        )


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _require(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def memalloc(size: int) -> bytearray:
    """A new zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)


def calloc(nmemb: int, size: int) -> bytearray:
    """A new zero-filled buffer for ``nmemb`` items of ``size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("item count and size must not be negative")
    return bytearray(nmemb * size)


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _require(dest, n, "destination")
    _require(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memccpy(dest: bytearray, src, c: int, n: int) -> Optional[int]:
    """Copy bytes up to and including the first byte equal to ``c``.

    At most ``n`` bytes are copied. Returns the offset in ``dest`` just past
    the copied stop byte, or None when it was not met within ``n`` bytes.
    """
    _require(dest, n, "destination")
    _require(src, n, "source")
    stop = c & 0xFF
    chunk = bytes(src[:n])
    found = chunk.find(stop)
    if found < 0:
        dest[:n] = chunk
        return None
    dest[: found + 1] = chunk[: found + 1]
    return found + 1


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    _require(buf, n, "buffer", src)
    _require(buf, n, "buffer", dst)
    if dst != src:
        buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memchr(data, c: int, n: int) -> Optional[int]:
    """Offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _require(data, n, "data")
    found = bytes(data[:n]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(a, b, n: int) -> int:
    """Compare ``n`` bytes as unsigned values.

    Returns the difference of the first pair that differs, or 0.
    """
    _require(a, n, "first operand")
    _require(b, n, "second operand")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0