"""Word splitting and bounded substring search."""

from __future__ import annotations

_BLANKS = " \t"


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in _BLANKS:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def str_str(text: str, find: str, length: int) -> int | None:
    """Position of the first ``find`` in ``text``, or None.

    Gives None at once when ``find`` is longer than ``length``.
    """
    if len(find) > length:
        return None
    index = text.find(find)
    return None if index < 0 else index


def str_str_quoted(text: str, find: str, length: int) -> int | None:
    """Like :func:`str_str`, but ignores matches inside double quotes.

    A double quote toggles the quoted state at its own position, so a
    match may begin on a closing quote but not on an opening one.
    """
    if len(find) > length:
        return None
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return None