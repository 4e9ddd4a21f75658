"""String helpers used when parsing and describing command-line arguments."""

from __future__ import annotations

import re
from collections.abc import Iterator

NAME_VALUE_SEPARATORS = "=:"


def _check_char(c: str) -> None:
    if len(c) != 1 or c == "\0":
        raise ValueError(f"expected a single non-NUL character, got {c!r}")


def _check_length(n: int) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")


def find_name_value_separator(s: str) -> int | None:
    """Return the index of the first '=' or ':' in *s*, or None if there is none."""
    for index, ch in enumerate(s):
        if ch in NAME_VALUE_SEPARATORS:
            return index
    return None


def count_char(s: str, c: str) -> int:
    """Count the occurrences of the character *c* in *s*."""
    _check_char(c)
    return s.count(c)


def count_char_n(s: str, n: int, c: str) -> int:
    """Count occurrences of *c* in at most the first *n* characters of *s*.

    Counting stops early at an embedded NUL character.
    """
    _check_char(c)
    _check_length(n)
    return s[:n].split("\0", 1)[0].count(c)


def rfind_char_n(s: str, n: int, c: str) -> int | None:
    """Return the index of the last *c* within ``s[:n]``, or None."""
    _check_char(c)
    _check_length(n)
    index = s.rfind(c, 0, n)
    return None if index < 0 else index


def rfind_not_char_n(s: str, n: int, c: str) -> int | None:
    """Return the index of the last character other than *c* within ``s[:n]``, or None."""
    _check_char(c)
    _check_length(n)
    for index in reversed(range(min(n, len(s)))):
        if s[index] != c:
            return index
    return None


def _split(s: str, delimiters: str) -> list[str]:
    if not delimiters:
        return [s]
    return re.split("[" + re.escape(delimiters) + "]", s)


def tokenize_with_blanks(s: str, delimiters: str) -> Iterator[str]:
    """Yield the pieces of *s* between any of *delimiters*, keeping empty pieces."""
    yield from _split(s, delimiters)


def tokenize(s: str, delimiters: str) -> Iterator[str]:
    """Yield the non-empty pieces of *s* between any of *delimiters*."""
    yield from (token for token in _split(s, delimiters) if token)