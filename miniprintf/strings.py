"""String helpers: conversion, searching, splitting, trimming and bounded copies.

Positions are reported as indices into the string, or ``None`` when
nothing is found. A character argument may be a one-character ``str``
or an integer code, which is truncated to 8 bits as a C ``char`` would be.
"""

from __future__ import annotations

from itertools import chain, islice
from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

CharLike = Union[int, str]
T = TypeVar("T")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _char(ch: CharLike) -> str:
    """Return ``ch`` as a one-character string."""
    if isinstance(ch, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(ch, int):
        return chr(ch & 0xFF)
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {len(ch)} characters")
        return ch
    raise TypeError(f"expected an int or a one-character str, got {type(ch).__name__}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _wrap_int(value: int) -> int:
    """Wrap ``value`` into the 32-bit signed range."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace is skipped. More than one sign character yields 0.
    Parsing stops at the first non-digit; values that overflow wrap around.
    """
    rest = text.lstrip(_WHITESPACE)
    body = rest.lstrip("+-")
    signs = rest[: len(rest) - len(body)]
    if len(signs) > 1:
        return 0
    sign = -1 if "-" in signs else 1
    digits = []
    for ch in body:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = _wrap_int(int("".join(digits))) if digits else 0
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the first ``ch`` in ``text``; NUL finds the end of the string."""
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the last ``ch`` in ``text``; NUL finds the end of the string."""
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``, so truncation
    happened when that length is ``size`` or more.
    """
    _check_size(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the string would have had
    without truncation. When ``dest`` already fills the buffer it is left
    unchanged and the result length is ``len(src) + size``.
    """
    _check_size(size, "size")
    dest_len = min(len(dest), size)
    if size <= dest_len:
        return dest, len(src) + size
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace each item of ``text`` in place with ``func(index, item)``."""
    for index, item in enumerate(text):
        text[index] = func(index, item)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the code difference of the first unequal pair, or 0.
    """
    _check_size(n, "n")
    pairs = zip(chain(map(ord, first), (0,)), chain(map(ord, second), (0,)))
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``n`` characters."""
    _check_size(n, "n")
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` starting at ``start``."""
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]