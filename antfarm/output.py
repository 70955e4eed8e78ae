"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import IO


def _target(stream: IO[str] | None) -> IO[str]:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: IO[str] | None = None) -> None:
    """Write one character."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(s: str | None, stream: IO[str] | None = None) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: IO[str] | None = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: IO[str] | None = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(n))