"""A tree of local folders and files, each given a Drive id, for uploading."""

from __future__ import annotations

import mimetypes
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from drivecli.file_info import DEFAULT_MIME_TYPE, FileInfo


class FileTreeError(Exception):
    """Raised when a local file tree cannot be read."""


def _next_id(ids: Iterator[str]) -> str:
    try:
        return next(ids)
    except StopIteration:
        raise FileTreeError("Error getting id: No more id's available") from None


def _entry_name(path: Path) -> str:
    name = path.name
    if not name or name == "..":
        raise FileTreeError(f"Invalid path: {path}")
    return name


@dataclass
class TreeInfo:
    """Counts and total size of a file tree."""

    file_count: int
    folder_count: int
    total_file_size: int


@dataclass(eq=False)
class Folder:
    """A local folder and the folders and files inside it."""

    name: str
    path: Path
    drive_id: str
    parent: Folder | None = field(default=None, repr=False)
    children: list[Union[Folder, File]] = field(default_factory=list, repr=False)

    @classmethod
    def from_path(cls, path, parent: Folder | None, ids: Iterable[str]) -> Folder:
        """Read the folder at ``path`` recursively, taking ids from ``ids``."""
        ids = iter(ids)
        path = Path(path)
        name = _entry_name(path)
        folder = cls(name=name, path=path, drive_id=_next_id(ids), parent=parent)

        try:
            entries = sorted(path.iterdir())
        except OSError as err:
            raise FileTreeError(f"Error reading directory: '{err}'") from err

        for entry in entries:
            if entry.is_dir():
                folder.children.append(Folder.from_path(entry, folder, ids))
            elif entry.is_file():
                folder.children.append(File.from_path(entry, folder, ids))
            else:
                raise FileTreeError(f"Unknown file type: {entry}")

        return folder

    def files(self) -> list[File]:
        """Return the files directly inside this folder, sorted by name."""
        return sorted(
            (child for child in self.children if isinstance(child, File)),
            key=lambda file: file.name,
        )

    def relative_path(self) -> Path:
        """Return the path relative to the directory holding the root folder."""
        return self.path.relative_to(_root_folder(self).path.parent)

    def folders_recursive(self) -> list[Folder]:
        """Return every folder below this one, depth first."""
        folders: list[Folder] = []
        for child in self.children:
            if isinstance(child, Folder):
                folders.append(child)
                folders.extend(child.folders_recursive())
        return folders

    def ancestor_count(self) -> int:
        count = 0
        parent = self.parent
        while parent is not None:
            count += 1
            parent = parent.parent
        return count


@dataclass(eq=False)
class File:
    """A local file inside a folder of the tree."""

    name: str
    path: Path
    size: int
    mime_type: str
    drive_id: str
    parent: Folder = field(repr=False)

    @classmethod
    def from_path(cls, path, parent: Folder, ids: Iterable[str]) -> File:
        ids = iter(ids)
        path = Path(path)
        name = _entry_name(path)

        try:
            with open(path, "rb") as os_file:
                try:
                    size = os.fstat(os_file.fileno()).st_size
                except OSError:
                    size = 0
        except OSError as err:
            raise FileTreeError(f"Failed to open file '{path}': {err}") from err

        mime_type = mimetypes.guess_type(name)[0] or DEFAULT_MIME_TYPE
        return cls(
            name=name,
            path=path,
            size=size,
            mime_type=mime_type,
            drive_id=_next_id(ids),
            parent=parent,
        )

    def relative_path(self) -> Path:
        """Return the path relative to the directory holding the root folder."""
        return self.path.relative_to(_root_folder(self.parent).path.parent)

    def info(self, parents: list[str] | None) -> FileInfo:
        return FileInfo(
            name=self.name,
            mime_type=self.mime_type,
            parents=parents,
            size=self.size,
        )


def _root_folder(folder: Folder) -> Folder:
    while folder.parent is not None:
        folder = folder.parent
    return folder


@dataclass(eq=False)
class FileTree:
    """A local directory tree rooted at one folder."""

    root: Folder

    @classmethod
    def from_path(cls, path, ids: Iterable[str]) -> FileTree:
        path = Path(path)
        try:
            canonical = path.resolve(strict=True)
        except (OSError, RuntimeError) as err:
            raise FileTreeError(f"Failed to get canonical path of {path}: {err}") from err
        return cls(root=Folder.from_path(canonical, None, iter(ids)))

    def folders(self) -> list[Folder]:
        """Return all folders, shallowest first and by name within a depth."""
        folders = [self.root, *self.root.folders_recursive()]
        return sorted(folders, key=lambda folder: (folder.ancestor_count(), folder.name))

    def info(self) -> TreeInfo:
        file_count = 0
        folder_count = 0
        total_file_size = 0
        for folder in self.folders():
            folder_count += 1
            for file in folder.files():
                file_count += 1
                total_file_size += file.size
        return TreeInfo(
            file_count=file_count,
            folder_count=folder_count,
            total_file_size=total_file_size,
        )