"""String comparison, searching and slicing helpers with C library semantics.

Searches return an index into the string rather than a pointer, or None
where nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import zip_longest

_TRIM_CHARS = " \t\n"
_NUL = "\0"


def _diff(a: str, b: str) -> int:
    """Difference of two characters; an exhausted side counts as NUL."""
    return (ord(a) if a else 0) - (ord(b) if b else 0)


def compare(s1: str, s2: str) -> int:
    """Compare two strings like ``strcmp``.

    Returns 0 when equal, otherwise the difference of the first pair of
    characters that differ, a missing character counting as 0.
    """
    for a, b in zip_longest(s1, s2, fillvalue=""):
        if a != b:
            return _diff(a, b)
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` leading characters like ``strncmp``."""
    if n <= 0:
        return 0
    return compare(s1[:n], s2[:n])


def equal(s1: str | None, s2: str | None) -> bool:
    """True when both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return compare(s1, s2) == 0


def equal_n(s1: str | None, s2: str | None, n: int) -> bool:
    """True when both strings are given and their first ``n`` characters match."""
    if s1 is None or s2 is None:
        return False
    return compare_n(s1, s2, n) == 0


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError("expected a single character")


def find_char(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``.

    Searching for NUL gives the length of ``s``, the position of the
    terminator.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def find_last_char(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; NUL gives the length of ``s``."""
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def find(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle``; an empty needle gives 0."""
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def find_n(haystack: str, needle: str, length: int) -> int | None:
    """Like :func:`find`, but the match must lie in the first ``length`` characters."""
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on runs of the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def trim(s: str) -> str:
    """Remove spaces, tabs and newlines from both ends."""
    return s.strip(_TRIM_CHARS)


def substring(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``.

    Raises IndexError when ``s`` is empty or ``start`` lies outside it.
    """
    if not 0 <= start < len(s):
        raise IndexError(f"start {start} out of range for string of length {len(s)}")
    if length < 0:
        raise ValueError("length must not be negative")
    return s[start:start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def map_chars(s: str, f: Callable[[str], str]) -> str:
    """New string made by applying ``f`` to every character of ``s``."""
    return "".join(f(ch) for ch in s)


def map_chars_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """New string made by applying ``f`` to each index and character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))