"""A binary writer that computes the MD5 digest of what passes through it."""

from __future__ import annotations

import hashlib
from typing import BinaryIO


class Md5Writer:
    """Wraps a binary stream and hashes every byte written to it."""

    def __init__(self, writer: BinaryIO) -> None:
        self._writer = writer
        self._digest = hashlib.md5()

    def write(self, data: bytes) -> int:
        written = self._writer.write(data)
        count = len(data) if written is None else written
        self._digest.update(memoryview(data)[:count])
        return count

    def flush(self) -> None:
        self._writer.flush()

    def md5(self) -> str:
        """Return the lower-case hex digest of the bytes written so far."""
        return self._digest.hexdigest()