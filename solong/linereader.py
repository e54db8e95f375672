"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return one line at a time from ``stream``.

    The stream is read ``buffer_size`` characters (or bytes) at a time.
    Each line keeps its trailing newline; the last line of a stream may lack
    one. Text and binary streams are both accepted.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: AnyStr | None = None

    def _newline(self) -> AnyStr:
        assert self._buffer is not None
        return "\n" if isinstance(self._buffer, str) else b"\n"  # type: ignore[return-value]

    def _has_line(self) -> bool:
        return self._buffer is not None and self._newline() in self._buffer

    def _fill(self) -> None:
        while not self._has_line():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            self._buffer = chunk if self._buffer is None else self._buffer + chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._buffer:
            return None
        buffer = self._buffer
        index = buffer.find(self._newline())
        if index < 0:
            line, self._buffer = buffer, buffer[:0]
        else:
            line, self._buffer = buffer[: index + 1], buffer[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line