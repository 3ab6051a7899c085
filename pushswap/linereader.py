"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional

__all__ = ["LineReader"]

DEFAULT_BUFFER_SIZE = 5


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream`` by calling ``stream.read(buffer_size)``.

    Works with text and binary streams alike. Each line keeps its
    trailing newline; the final line may lack one. Data read beyond the
    current line is kept for the next call.
    """

    def __init__(self, stream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _newline_index(self) -> int:
        """Index of the first newline in the pending data, or -1."""
        pending = self._pending
        if pending is None:
            return -1
        if isinstance(pending, (bytes, bytearray)):
            return pending.find(b"\n")
        return pending.find("\n")

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream is exhausted."""
        while self._newline_index() < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk

        pending = self._pending
        if not pending:
            self._pending = None
            return None

        index = self._newline_index()
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[: index + 1], pending[index + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line