"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

Line = Union[str, bytes]

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Return successive lines of a text or binary stream.

    The stream only needs a ``read(size)`` method. Each line keeps its
    trailing newline; the last line may lack one.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[Line] = None

    def _fill(self) -> None:
        while True:
            stash = self._stash
            if stash is not None:
                newline = "\n" if isinstance(stash, str) else b"\n"
                if newline in stash:
                    return
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._stash = None
                raise
            if not chunk:
                return
            self._stash = chunk if stash is None else stash + chunk

    def readline(self) -> Optional[Line]:
        """The next line, or None when the stream is exhausted."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        end = stash.find("\n" if isinstance(stash, str) else b"\n")
        if end < 0:
            self._stash = None
            return stash
        self._stash = stash[end + 1:] or None
        return stash[:end + 1]

    def __iter__(self) -> Iterator[Line]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line