"""Line-at-a-time reading from a stream, buffering partial chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic


def _newline_index(data: AnyStr) -> int:
    """Index of the first newline in ``data``, or -1 if there is none."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], chunk_size: int = 1024) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = stream
        self._chunk_size = chunk_size
        self._stash: AnyStr | None = None

    def _fill(self) -> AnyStr | None:
        stash = self._stash
        parts: list[AnyStr] = [] if stash is None else [stash]
        if stash is None or _newline_index(stash) < 0:
            while True:
                chunk = self._stream.read(self._chunk_size)
                if not chunk:
                    break
                parts.append(chunk)
                if _newline_index(chunk) >= 0:
                    break
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        stash = self._fill()
        if not stash:
            self._stash = None
            return None
        index = _newline_index(stash)
        if index < 0:
            self._stash = None
            return stash
        self._stash = stash[index + 1 :]
        return stash[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def get_next_line(reader: LineReader) -> AnyStr | None:
    """Return the next line from ``reader``, or None at the end."""
    return reader.readline()