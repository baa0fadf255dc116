"""Reading XPM pixmaps into :class:`~rasterkit.image.Image` objects."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from rasterkit.colors import parse_color
from rasterkit.image import Image
from rasterkit.text import atoi
from rasterkit.wordtab import str_str, str_str_quoted, str_to_wordtab

_TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _blank(text: str, opener: str, closer: str, extra: int) -> str:
    while (begin := str_str_quoted(text, opener, len(text))) is not None:
        rest_start = begin + len(opener)
        end = str_str(text[rest_start:], closer, len(text) - rest_start)
        stop = len(text) if end is None else rest_start + end + extra
        stop = min(stop, len(text))
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The result has the same length as ``text``.  A line comment is blanked
    together with its terminating newline; an unterminated comment runs to
    the end of the text.
    """
    text = _blank(text, "/*", "*/", 2)
    return _blank(text, "//", "\n", 1)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1 : end]
        pos = end + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"unexpected end of data while reading {what}")
    return line


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError(f"incomplete header: {line!r}")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"invalid header values: {line!r}")
    return width, height, ncolors, cpp


def _parse_color_line(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line shorter than {cpp} characters: {line!r}")
    words = str_to_wordtab(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], parse_color(words[index], end)


def parse_xpm(lines: Iterable[str], byte_order: int = 0) -> Image:
    """Build a 32-bit image from the strings of an XPM pixmap.

    ``lines`` holds the header, the colour lines and the pixel rows.  With
    one or two characters per pixel a later colour definition overrides an
    earlier one of the same name; with more, the first one wins.  Pixels of
    colour ``None`` become 0xFF000000 and unknown pixel names become 0.
    """
    it = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(it, "the header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        name, value = _parse_color_line(_next_line(it, "the colours"), cpp)
        if cpp <= 2:
            palette[name] = value
        else:
            palette.setdefault(name, value)

    image = Image(width, height, 32, byte_order)
    for y in range(height):
        row = _next_line(it, "the pixels")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width * cpp} characters")
        for x in range(width):
            color = palette.get(row[x * cpp : (x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(data: Iterable[str], byte_order: int = 0) -> Image:
    """Build an image from XPM data given as its sequence of strings."""
    return parse_xpm(data, byte_order)


def xpm_file_to_image(path: str | os.PathLike[str], byte_order: int = 0) -> Image:
    """Read an XPM file and build an image from its quoted strings."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(_quoted_strings(strip_comments(text)), byte_order)