"""ASCII character classification and case conversion.

Every function accepts either an integer code point or a one-character
string. Only the ASCII ranges count: anything outside them is
classified as not matching and is returned unchanged by the case
converters.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGIT = range(ord("0"), ord("9") + 1)
_ASCII = range(0, 128)
_PRINT = range(32, 127)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return _code(c) in _DIGIT


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code point in the 7-bit ASCII range."""
    return _code(c) in _ASCII


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return _code(c) in _PRINT


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; return anything else as given."""
    code = _code(c)
    if code in _LOWER:
        return _same_kind(c, code - _CASE_OFFSET)
    return c


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; return anything else as given."""
    code = _code(c)
    if code in _UPPER:
        return _same_kind(c, code + _CASE_OFFSET)
    return c