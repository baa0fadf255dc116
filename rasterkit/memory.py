"""Byte-buffer helpers working on ``bytearray`` and other byte sequences.

Values written into buffers are reduced to a single byte (``value & 0xFF``).
Operations that would reach past the end of a buffer raise ``ValueError``.
"""

from __future__ import annotations


def _check_span(name: str, size: int, start: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if start < 0 or start + n > size:
        raise ValueError(
            f"{name}: span [{start}, {start + n}) exceeds buffer of size {size}"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` and return it."""
    _check_span("memset", len(buffer), 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer`` and return it."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    target = value & 0xFF
    limit = min(length, len(data))
    for index, byte in enumerate(data[:limit]):
        if byte == target:
            return index
    return None


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    if n > len(a) or n > len(b):
        raise ValueError(f"memcmp: cannot compare {n} bytes")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check_span("memcpy", len(dst), 0, n)
    _check_span("memcpy", len(src), 0, n)
    dst[:n] = src[:n]
    return dst


def memmove(
    buffer: bytearray, dst_offset: int, src_offset: int, n: int
) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` between possibly overlapping regions."""
    _check_span("memmove", len(buffer), dst_offset, n)
    _check_span("memmove", len(buffer), src_offset, n)
    buffer[dst_offset : dst_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer