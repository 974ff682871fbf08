"""String searching, comparison, bounded copying and integer conversion."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple

_NUL = "\0"
_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def length(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def find_char(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the end."""
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the end."""
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference at the first mismatch (the end of a
    string counts as code point 0), or 0 if the strings agree.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for left, right in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if left != right:
            return ord(left) - ord(right)
        if left == _NUL:
            break
    return 0


def find_in(big: str, little: str, n: int) -> Optional[int]:
    """Index of ``little`` wholly within the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into room for ``size`` characters including a terminator.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, so truncation shows as a length of ``size`` or more.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within room for ``size`` characters plus terminator.

    Returns the resulting text and the length the full result would have
    had. When ``dst`` already fills ``size``, it is returned unchanged with
    ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, C ``atoi`` style.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. Text with no digits gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def format_int(n: int) -> str:
    """Render ``n`` in decimal with a leading minus for negatives."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)