"""Adapters that let the router talk to byte or text streams alike."""

from __future__ import annotations

import io
import sys
from typing import IO, Any, Optional

ENCODING = "utf-8"


def _is_binary_sink(stream: Any) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
        return True
    return "b" in getattr(stream, "mode", "")


class LineInput:
    """Read one selection line at a time from ``stream``.

    Reads go straight to ``stream.readline`` with no extra buffering, so a
    parent menu and its submenus can consume the same stream in turn.
    """

    def __init__(self, stream: Optional[IO[Any]] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[Any]:
        return self._stream if self._stream is not None else sys.stdin

    def readline(self) -> Optional[str]:
        """Return the next line without its newline, or ``None`` at end of input.

        ``OSError`` from the underlying stream propagates to the caller.
        """

        raw = self.stream.readline()
        if isinstance(raw, bytes):
            raw = raw.decode(ENCODING, errors="replace")
        if not raw:
            return None
        return raw.rstrip("\r\n")


class TextOutput:
    """File-like text writer over a byte or text ``stream``.

    Writes are passed through immediately so output from handlers that write
    to the raw stream keeps its order relative to menu output.
    """

    def __init__(self, stream: Optional[IO[Any]] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[Any]:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> int:
        stream = self.stream
        if _is_binary_sink(stream):
            stream.write(text.encode(ENCODING))
        else:
            stream.write(text)
        return len(text)

    def writeline(self, text: str = "") -> None:
        self.write(f"{text}\n")

    def flush(self) -> None:
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()

    def isatty(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty()) if isatty is not None else False


__all__ = ["ENCODING", "LineInput", "TextOutput"]
