"""Character classification and bounded string helpers.

Characters may be passed either as one-character strings or as integer
code points; classification works on the ASCII ranges only.
"""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; a string without digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits


def is_alpha(c: str | int) -> bool:
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    return 32 <= _code(c) <= 126


def to_upper(c: str | int) -> str | int:
    """Uppercase an ASCII letter; other values are returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Lowercase an ASCII letter; other values are returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def find_char(text: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character yields the end position ``len(text)``.
    """
    ch = chr(_code(c))
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character yields the end position ``len(text)``.
    """
    ch = chr(_code(c))
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string counts as 0.

    Returns the difference of the first differing code points, or 0.
    """
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` chars.

    An empty needle matches at 0; no match gives None.
    """
    if not needle:
        return 0
    limit = min(length, len(haystack))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` cells (one kept for the end).

    Returns the copied text and the full length of ``src``.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` cells.

    Returns the resulting text and the length the concatenation tried to
    create: ``size + len(src)`` when ``dst`` already fills the buffer,
    otherwise ``len(dst) + len(src)``.
    """
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)