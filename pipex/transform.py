"""Building new strings from old ones: splitting, joining, slicing, trimming, mapping."""

from __future__ import annotations

from typing import Callable, List, Optional


def _check_separator(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces.

    Runs of separators, and separators at either end, produce no empty
    words.
    """
    _check_separator(sep)
    return [word for word in text.split(sep) if word]


def join(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def substring(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A ``start`` at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(s):
        return ""
    return s[start:start + length]


def trim(s: str, chars: Optional[str]) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``.

    With ``chars`` set to None the string comes back unchanged.
    """
    if chars is None:
        return s
    return s.strip(chars) if chars else s


def map_indexed(s: Optional[str], func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character of ``s``.

    A ``s`` of None gives an empty string.
    """
    if s is None:
        return ""
    return "".join(func(index, char) for index, char in enumerate(s))


def for_each_indexed(s: Optional[str], func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for each character of ``s``; None does nothing."""
    if s is None:
        return
    for index, char in enumerate(s):
        func(index, char)