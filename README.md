# miniprintf

A small, dependency-free library built around a minimal `printf` with a
handful of conversions, plus a set of helpers: character classification,
byte-buffer operations, string utilities, stream output and a singly linked
list.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Formatting

`miniprintf.printf` supports these conversions:

| Conversion | Meaning                                                  |
|------------|----------------------------------------------------------|
| `%c`       | a single character (a one-character `str` or an int code) |
| `%s`       | a string; `None` is shown as `(null)`                    |
| `%d`, `%i` | a signed decimal integer, wrapped to 32 bits             |
| `%u`       | the value taken as an unsigned 32-bit decimal integer    |
| `%x`, `%X` | the value taken as unsigned 32-bit, in lower / upper hex |
| `%p`       | `0x` and hex digits, or `(nil)` for 0 or `None`          |
| `%%`       | a literal percent sign                                   |

There are no flags, widths or precisions. Other rules:

- A `%` followed by any other character is dropped, and that character is
  written as it stands (`"%q"` renders as `"q"`).
- The format, and any `%s` argument, ends at its first NUL character.
- A `%` at the very end of the format writes a single NUL character.
- Too few arguments for the conversions raise `TypeError`; an argument of the
  wrong type raises `TypeError` as well.

```python
from miniprintf.printf import format_string, printf

text = format_string("%s is %d years old (%x)", "Ada", 36, 255)
# 'Ada is 36 years old (ff)'

count = printf("%u%%\n", 42)   # writes "42%\n" to stdout, returns 4
```

`format_string(fmt, *args)` returns the formatted text; a `None` format gives
an empty string. `printf(fmt, *args, file=...)` writes the same text to a
stream (standard output by default) and returns the number of characters
written. The building blocks can be used on their own:

- `to_hex(value, upper=False)`: hex digits of the value taken as 64-bit
  unsigned.
- `format_unsigned(value)`: decimal text of the value taken as 32-bit unsigned.
- `format_pointer(value)`: `(nil)` or `0x` followed by hex digits.

## Helpers

- `miniprintf.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`. Each accepts an integer code or a
  one-character string; the case converters return the same kind they were
  given.
- `miniprintf.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` on `bytearray`, `bytes` and `memoryview` objects, and `calloc`,
  which returns a zeroed `bytearray` (or raises `MemoryError` when the size
  overflows 64 bits). Lengths beyond a buffer raise `IndexError`.
- `miniprintf.strings`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`,
  `strjoin`, `strlcpy`, `strlcat`, `strmapi`, `striteri`, `strncmp`,
  `strnstr`, `strtrim`, `substr`. Searches return an index or `None`;
  `strlcpy` and `strlcat` return the resulting text together with the length
  the full result would have had.
- `miniprintf.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, each
  writing to a text stream (standard output by default).
- `miniprintf.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and
  iteration.

```python
from miniprintf.linkedlist import LinkedList
from miniprintf.strings import split, strchr, strtrim

words = split("  alpha  beta gamma ", " ")    # ['alpha', 'beta', 'gamma']
trimmed = strtrim("--hello--", "-")           # 'hello'
where = strchr("hello", "l")                  # 2

items = LinkedList([1, 2, 3])
doubled = items.map(lambda x: x * 2)
assert list(doubled) == [2, 4, 6]
```

## What it does not do

This is a library only: it installs no command-line program. Its `printf`
covers just the conversions listed above, with no flags, field widths,
precisions or length modifiers, and no floating-point output.