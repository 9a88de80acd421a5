"""Character classification and ASCII case conversion.

Every function accepts either an integer character code or a
one-character string. Predicates return ``bool``. The case converters
return the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as int or 1-char str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _UPPER_A <= code <= _UPPER_Z or _LOWER_A <= code <= _LOWER_Z


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included (32..126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if _LOWER_A <= code <= _LOWER_Z:
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if _UPPER_A <= code <= _UPPER_Z:
        code += _CASE_OFFSET
    return _same_kind(c, code)