"""File-level helpers used when backing up and restoring save data."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

_CHUNK_SIZE = 1024


class SaveScanError(Exception):
    """Base class for errors raised by this package."""


class CannotPrepareBackupTarget(SaveScanError):
    """The backup target could not be cleared or created."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__("Cannot prepare the backup target")
        self.path = Path(path)


def are_files_identical(file1: str | os.PathLike[str], file2: str | os.PathLike[str]) -> bool:
    """Whether two files have exactly the same content.

    Raises OSError if either file cannot be read.
    """
    with open(file1, "rb") as first, open(file2, "rb") as second:
        while True:
            chunk1 = first.read(_CHUNK_SIZE)
            chunk2 = second.read(_CHUNK_SIZE)
            if chunk1 != chunk2:
                return False
            if not chunk1:
                return True


def _remove(path: Path) -> None:
    """Delete a file or directory tree; a missing path is not an error."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def prepare_backup_target(target: str | os.PathLike[str], merge: bool) -> None:
    """Make sure ``target`` is an existing directory ready to receive a backup.

    Without ``merge`` anything already at the target is deleted first. With
    ``merge`` the existing content is kept, but the target must not be a file.
    Raises CannotPrepareBackupTarget when the target cannot be prepared.
    """
    path = Path(target)
    if not merge:
        try:
            _remove(path)
        except OSError as exc:
            raise CannotPrepareBackupTarget(path) from exc
    elif path.exists() and not path.is_dir():
        raise CannotPrepareBackupTarget(path)

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CannotPrepareBackupTarget(path) from exc