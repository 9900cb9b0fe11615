"""Opening upload sources: a path on disk or standard input."""

from __future__ import annotations

import io
import shutil
import sys
import tempfile
from pathlib import Path
from typing import IO, Any

_WHENCE_VALUES = (io.SEEK_SET, io.SEEK_CUR, io.SEEK_END)


class EmptyFile(io.RawIOBase):
    """A readable, seekable stream with no content."""

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def _ensure_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file")

    def readinto(self, buffer) -> int:
        self._ensure_open()
        memoryview(buffer)  # rejects objects that are not writable buffers
        return 0

    def read(self, size: int = -1) -> bytes:
        self._ensure_open()
        if size is not None and not isinstance(size, int):
            raise TypeError(f"size must be an integer, not {type(size).__name__}")
        return b""

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._ensure_open()
        if not isinstance(offset, int):
            raise TypeError(f"offset must be an integer, not {type(offset).__name__}")
        if whence not in _WHENCE_VALUES:
            raise ValueError(f"invalid whence ({whence}, should be 0, 1 or 2)")
        return 0


def stdin_to_file() -> IO[bytes]:
    """Copy standard input into a temporary file.

    The returned file is rewound and is deleted when it is closed.
    """
    tmp = tempfile.NamedTemporaryFile(mode="w+b")
    try:
        source = getattr(sys.stdin, "buffer", None)
        if source is not None:
            shutil.copyfileobj(source, tmp)
        else:
            tmp.write(sys.stdin.read().encode())
        tmp.flush()
        tmp.seek(0)
    except BaseException:
        tmp.close()
        raise
    return tmp


def open_file(path=None) -> tuple[IO[Any], Path]:
    """Open ``path`` for reading, or standard input copied to a temporary file."""
    if path is not None:
        path = Path(path)
        return open(path, "rb"), path
    tmp = stdin_to_file()
    return tmp, Path(tmp.name)