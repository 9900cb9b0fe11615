"""Tar archives holding one account's configuration directory."""

from __future__ import annotations

import tarfile
from pathlib import Path, PurePosixPath


class ArchiveError(Exception):
    """Raised when an account archive cannot be created or read."""


def _err_if_not_exists(path: Path) -> None:
    if not path.exists():
        raise ArchiveError(f"'{path}' does not exist")


def _err_if_not_dir(path: Path) -> None:
    if not path.is_dir():
        raise ArchiveError(f"'{path}' is not a directory")


def _err_if_exists(path: Path) -> None:
    if path.exists():
        raise ArchiveError(f"'{path}' already exists")


def create(src_path, archive_path) -> None:
    """Write the directory ``src_path`` into a new tar file at ``archive_path``."""
    src_path = Path(src_path)
    archive_path = Path(archive_path)
    _err_if_not_exists(src_path)
    _err_if_not_dir(src_path)
    _err_if_exists(archive_path)

    try:
        archive_file = open(archive_path, "wb")
    except OSError as err:
        raise ArchiveError(f"Failed to create file: {err}") from err

    with archive_file:
        try:
            archive = tarfile.open(fileobj=archive_file, mode="w")
        except (OSError, tarfile.TarError) as err:
            raise ArchiveError(f"Failed to create archive '{archive_path}': {err}") from err
        try:
            try:
                archive.add(src_path, arcname=src_path.name)
            except (OSError, tarfile.TarError) as err:
                raise ArchiveError(f"Failed to add {src_path} to archive: {err}") from err
        finally:
            try:
                archive.close()
            except (OSError, tarfile.TarError) as err:
                raise ArchiveError(
                    f"Failed to create archive '{archive_path}': {err}"
                ) from err


def unpack(archive_path, dst_path) -> None:
    """Extract the archive into the existing directory ``dst_path``."""
    archive_path = Path(archive_path)
    dst_path = Path(dst_path)
    _err_if_not_exists(archive_path)
    _err_if_not_exists(dst_path)

    try:
        archive = tarfile.open(archive_path, "r")
    except OSError as err:
        raise ArchiveError(f"Failed to open archive: {err}") from err
    except tarfile.TarError as err:
        raise ArchiveError(f"Failed to unpack archive: {err}") from err

    with archive:
        try:
            if hasattr(tarfile, "data_filter"):
                archive.extractall(dst_path, filter="data")
            else:
                archive.extractall(dst_path)
        except (OSError, tarfile.TarError) as err:
            raise ArchiveError(f"Failed to unpack archive: {err}") from err


def get_account_name(archive_path) -> str:
    """Return the name of the single directory held by the archive."""
    try:
        archive = tarfile.open(archive_path, "r")
    except OSError as err:
        raise ArchiveError(f"Failed to open archive: {err}") from err
    except tarfile.TarError as err:
        raise ArchiveError(f"Failed to read archive entries: {err}") from err

    with archive:
        try:
            members = archive.getmembers()
        except (OSError, tarfile.TarError) as err:
            raise ArchiveError(f"Failed to read archive entries: {err}") from err

    dir_names = [
        name
        for name in (PurePosixPath(m.name).name for m in members if m.isdir())
        if name
    ]

    if not dir_names:
        raise ArchiveError("Archive contains no directories")
    if len(dir_names) > 1:
        raise ArchiveError("Archive contains multiple directories")
    return dir_names[0]