"""Pack tetrominoes into the smallest square that holds them all, with small text, memory and list helpers."""

__version__ = "0.1.0"