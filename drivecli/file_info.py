"""Metadata of a local file about to be uploaded."""

from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any

DEFAULT_MIME_TYPE = "application/octet-stream"


class FileInfoError(Exception):
    """Raised when file metadata cannot be determined."""


@dataclass
class FileInfoConfig:
    file_path: Path
    mime_type: str | None = None
    parents: list[str] | None = None


@dataclass
class FileInfo:
    name: str
    mime_type: str
    parents: list[str] | None
    size: int

    @classmethod
    def from_file(cls, file: IO[Any], config: FileInfoConfig) -> FileInfo:
        """Build the metadata from an open file and its configuration."""
        path = Path(config.file_path)
        name = path.name
        if name in ("", ".."):
            raise FileInfoError(f"Invalid file path: {path}")

        try:
            size = os.fstat(file.fileno()).st_size
        except (OSError, AttributeError, ValueError):
            size = 0

        mime_type = config.mime_type or mimetypes.guess_type(path.name)[0] or DEFAULT_MIME_TYPE

        parents = list(config.parents) if config.parents is not None else None
        return cls(name=name, mime_type=mime_type, parents=parents, size=size)