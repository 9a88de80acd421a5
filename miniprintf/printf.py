"""A small printf: ``%c %s %d %i %u %x %X %p %%`` and nothing else.

There are no flags, widths or precisions. A ``%`` followed by an unknown
character is dropped and the character is written as it stands. A
format ends at its first NUL character, as a C string would. A ``%`` at
the very end of a format writes a single NUL character and ends the
output.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

from miniprintf.strings import itoa

UINT_MODULUS = 2**32
ULONG_MODULUS = 2**64
_INT_MIN = -(2**31)

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _wrap_signed(value: int) -> int:
    return (value - _INT_MIN) % UINT_MODULUS + _INT_MIN


def to_hex(value: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``value`` taken as a 64-bit unsigned number."""
    number = _as_int(value, "x") % ULONG_MODULUS
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    if number == 0:
        return "0"
    out = []
    while number:
        number, rem = divmod(number, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_unsigned(value: int) -> str:
    """Decimal text of ``value`` taken as a 32-bit unsigned number."""
    return str(_as_int(value, "u") % UINT_MODULUS)


def format_pointer(value: Optional[int]) -> str:
    """Pointer text: ``(nil)`` for zero or ``None``, otherwise ``0x`` and hex digits."""
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") % ULONG_MODULUS
    if address == 0:
        return "(nil)"
    return "0x" + to_hex(address, False)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {len(value)}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value.partition("\0")[0]


def _format_int(value: Any) -> str:
    return itoa(_wrap_signed(_as_int(value, "d")))


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "d": _format_int,
    "i": _format_int,
    "u": format_unsigned,
    "x": lambda value: to_hex(_as_int(value, "x") % UINT_MODULUS, False),
    "X": lambda value: to_hex(_as_int(value, "X") % UINT_MODULUS, True),
    "p": format_pointer,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Render ``fmt`` with ``args``; a ``None`` format renders as empty text."""
    if fmt is None:
        return ""
    text = fmt.partition("\0")[0]
    values = iter(args)
    chars = iter(text)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("\0")
            break
        if spec == "%":
            pieces.append("%")
            continue
        handler = _CONVERSIONS.get(spec)
        if handler is None:
            pieces.append(spec)
        else:
            pieces.append(handler(_next_arg(values, spec)))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the rendered format to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    if text:
        (sys.stdout if file is None else file).write(text)
    return len(text)