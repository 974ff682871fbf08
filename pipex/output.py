"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: str, stream: TextIO) -> None:
    """Write ``s`` as it is."""
    stream.write(s)


def put_line(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline."""
    stream.write(s)
    stream.write("\n")


def put_number(n: int, stream: TextIO) -> None:
    """Write ``n`` in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))