"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` to ``stream``."""
    stream.write(text)


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    stream.write(text)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal representation of ``n`` to ``stream``."""
    if n < 0:
        stream.write("-")
    stream.write(str(abs(n)))