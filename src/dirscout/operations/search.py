"""Recursive exact-name search."""

import logging
from collections.abc import Callable
from collections.abc import Iterator
from pathlib import Path

from dirscout.exceptions import DirectoryUnreadableError
from dirscout.files import scan_directory
from dirscout.models import EntryHint

logger = logging.getLogger(__name__)


def search_files(
    root: Path,
    target: str,
    on_unreadable: Callable[[DirectoryUnreadableError], None] | None = None,
) -> Iterator[Path]:
    """Find files named exactly target anywhere under root.

    Walks the tree depth-first using a work-list, so deep trees do not grow
    the call stack and only one directory is open at a time. Symlinks are
    never followed. Only non-directory entries are compared against target;
    a directory whose own name equals target is descended into but not
    reported.

    Args:
        root: Directory to start from
        target: Exact, case-sensitive file name to look for
        on_unreadable: Called with the error for every directory that could
            not be opened or read; that subtree is skipped

    Yields:
        root-joined paths of matching entries, in discovery order

    Raises:
        ValueError: If target is empty or contains a path separator
    """
    if not target:
        raise ValueError("Search target must not be empty")
    if "/" in target:
        raise ValueError(f"Search target must be a bare file name: {target}")

    pending = [root]
    while pending:
        directory = pending.pop()
        subdirectories = []
        try:
            with scan_directory(directory) as scan:
                for entry in scan:
                    if entry.hint is EntryHint.DIRECTORY:
                        subdirectories.append(directory / entry.name)
                    elif entry.name == target:
                        yield directory / entry.name
        except DirectoryUnreadableError as e:
            logger.debug("Skipping unreadable directory %s", e)
            if on_unreadable is not None:
                on_unreadable(e)

        # Reversed so the first subdirectory found is visited first
        pending.extend(reversed(subdirectories))
