"""Directory enumeration."""

import logging
import os
from pathlib import Path
from types import TracebackType
from typing import Self

from dirscout.exceptions import DirectoryUnreadableError
from dirscout.models import DirectoryEntry
from dirscout.models import EntryHint

logger = logging.getLogger(__name__)


class DirectoryScan:
    """Iterator over the immediate children of one directory.

    The directory is opened on construction. The handle is released once
    iteration is exhausted, when a read error is raised, on close(), or when
    leaving a with-block, whichever comes first. Order is whatever the
    filesystem returns. The "." and ".." pseudo-entries are never yielded.
    """

    def __init__(self, path: Path):
        self.path = path
        try:
            self._handle = os.scandir(path)
        except OSError as e:
            raise DirectoryUnreadableError(path, e) from e
        logger.debug("Opened directory %s", path)

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> DirectoryEntry:
        if self._handle is None:
            raise StopIteration
        try:
            entry = next(self._handle)
        except StopIteration:
            self.close()
            raise
        except OSError as e:
            self.close()
            raise DirectoryUnreadableError(self.path, e) from e
        return DirectoryEntry(name=entry.name, hint=_coarse_hint(entry))

    def close(self) -> None:
        """Release the directory handle. Safe to call more than once."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    @property
    def closed(self) -> bool:
        return self._handle is None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def scan_directory(path: Path) -> DirectoryScan:
    """Open a directory for enumeration.

    Args:
        path: Directory to enumerate

    Returns:
        DirectoryScan yielding a DirectoryEntry per child

    Raises:
        DirectoryUnreadableError: If path cannot be opened as a directory
    """
    return DirectoryScan(path)


def _coarse_hint(entry: os.DirEntry) -> EntryHint:
    # is_dir(follow_symlinks=False) uses d_type when available, so a symlink
    # to a directory is never reported as a directory.
    try:
        if entry.is_dir(follow_symlinks=False):
            return EntryHint.DIRECTORY
    except OSError:
        return EntryHint.UNKNOWN
    return EntryHint.NOT_DIRECTORY
