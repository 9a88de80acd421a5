"""Writing characters, strings, lines and integers to a text stream.

Every writer takes an optional ``stream``; when it is omitted the text
goes to standard output. A string is written only up to its first NUL
character, as a C string would be.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from miniprintf.strings import itoa

CharLike = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer code is truncated to 8 bits."""
    _target(stream).write(_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` up to, not including, its first NUL character."""
    text, _, _ = s.partition("\0")
    if text:
        _target(stream).write(text)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    put_str(itoa(n), stream)