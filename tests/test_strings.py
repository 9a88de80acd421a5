import pytest
from hypothesis import given
from hypothesis import strategies as st

from miniprintf.chars import to_upper
from miniprintf.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
ASCII_TEXT = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127))


@given(INT32)
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_atoi_skips_whitespace_and_trailing_text():
    assert atoi("\t\n\v\f\r -42abc") == -42
    assert atoi(" +17 9") == 17


@pytest.mark.parametrize("text", ["+-5", "-+5", "--5", "++5", "abc", ""])
def test_atoi_rejects(text):
    assert atoi(text) == 0


def test_atoi_wraps_on_overflow():
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_words():
    assert split("  a  bb c ", " ") == ["a", "bb", "c"]
    assert split("", ",") == []


@given(ASCII_TEXT, st.sampled_from([" ", ",", ";"]))
def test_split_invariants(text, sep):
    words = split(text, sep)
    assert all(word and sep not in word for word in words)
    assert "".join(words) == text.replace(sep, "")


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(ASCII_TEXT, st.sampled_from("abcxyz"))
def test_strchr_finds_first(text, ch):
    index = strchr(text, ch)
    if ch in text:
        assert text[index] == ch and ch not in text[:index]
    else:
        assert index is None


@given(ASCII_TEXT, st.sampled_from("abcxyz"))
def test_strrchr_finds_last(text, ch):
    index = strrchr(text, ch)
    if ch in text:
        assert text[index] == ch and ch not in text[index + 1 :]
    else:
        assert index is None


def test_strchr_nul_and_int_codes():
    assert strchr("abc", "\0") == 3
    assert strrchr("abc", 0) == 3
    assert strchr("abc", ord("b")) == 1
    assert strchr("abc", ord("b") + 256) == 1


@given(ASCII_TEXT, ASCII_TEXT)
def test_strjoin(first, second):
    joined = strjoin(first, second)
    assert joined.startswith(first) and joined.endswith(second)
    assert len(joined) == len(first) + len(second)


def test_strlcpy():
    assert strlcpy("hello", 3) == ("he", 5)
    assert strlcpy("hello", 0) == ("", 5)
    assert strlcpy("hello", 100) == ("hello", 5)


def test_strlcat():
    assert strlcat("ab", "cd", 10) == ("abcd", 4)
    assert strlcat("ab", "cdef", 4) == ("abc", 6)
    assert strlcat("abcd", "xy", 2) == ("abcd", 4)


@given(ASCII_TEXT, ASCII_TEXT, st.integers(min_value=0, max_value=40))
def test_strlcat_fits_buffer(dest, src, size):
    result, total = strlcat(dest, src, size)
    if size > len(dest):
        assert len(result) < size
        assert total == len(dest) + len(src)
        assert (dest + src).startswith(result)


def test_strmapi():
    assert strmapi("abc", lambda i, c: to_upper(c)) == "ABC"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_striteri_in_place():
    letters = list("abc")
    striteri(letters, lambda i, c: to_upper(c) if i % 2 == 0 else c)
    assert letters == ["A", "b", "C"]


def test_strncmp():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "ab", 3) == ord("c")
    assert strncmp("abc", "abc", 100) == 0
    assert strncmp("x", "y", 0) == 0


@given(ASCII_TEXT, ASCII_TEXT)
def test_strncmp_sign_matches_ordering(first, second):
    result = strncmp(first, second, max(len(first), len(second)) + 1)
    expected = (first > second) - (first < second)
    assert (result > 0) - (result < 0) == expected


def test_strnstr():
    assert strnstr("hello world", "world", 11) == 6
    assert strnstr("hello world", "world", 10) is None
    assert strnstr("hello", "", 0) == 0


@given(ASCII_TEXT, ASCII_TEXT, st.integers(min_value=0, max_value=40))
def test_strnstr_match_within_bound(haystack, needle, n):
    index = strnstr(haystack, needle, n)
    if index is not None:
        assert haystack[index : index + len(needle)] == needle
        assert index + len(needle) <= max(n, len(needle))


def test_strnstr_negative_bound():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxx", "x") == ""
    assert strtrim(" a b ", "") == " a b "


def test_substr():
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 1, 100) == "ello"
    assert substr("hello", 1, 2) == "el"


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)