"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional


class LineBuffer(Generic[AnyStr]):
    """Line reader over a text or binary stream.

    The stream is read ``buffer_size`` units at a time; whatever was read
    past the end of a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, newline included, or ``None`` at end of input.

        The last line is returned without a newline if the stream does not
        end with one. A read error discards the buffered data and is raised.
        """
        pending = self._pending
        while True:
            if pending is not None:
                newline = b"\n" if isinstance(pending, bytes) else "\n"
                index = pending.find(newline)  # type: ignore[arg-type]
                if index != -1:
                    self._pending = pending[index + 1:]
                    return pending[:index + 1]
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        self._pending = None
        return pending if pending else None

    def __iter__(self) -> Iterator[AnyStr]:
        """Yield lines until the stream is exhausted."""
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line