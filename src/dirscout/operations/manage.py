"""Single-file management and working-directory changes."""

import logging
import os
from pathlib import Path

from dirscout.operations.paths import resolve_against

logger = logging.getLogger(__name__)


def create_file(root: Path, name: str) -> Path:
    """Create an empty file, failing if anything already exists there.

    Args:
        root: Directory relative names are taken from
        name: File to create (absolute or relative to root)

    Returns:
        Absolute path of the created file

    Raises:
        FileExistsError: If path already exists (it is left untouched)
        OSError: For any other creation failure
    """
    path = resolve_against(root, name)
    with path.open("x"):
        pass
    logger.debug("Created %s", path)
    return path


def delete_file(root: Path, name: str) -> Path:
    """Delete a file (or symlink) by path.

    Args:
        root: Directory relative names are taken from
        name: File to delete (absolute or relative to root)

    Returns:
        Absolute path of the deleted file

    Raises:
        FileNotFoundError: If nothing exists at path
        IsADirectoryError: If path is a directory
        OSError: For any other removal failure
    """
    path = resolve_against(root, name)
    path.unlink()
    logger.debug("Deleted %s", path)
    return path


def change_directory(root: Path, target: str) -> Path:
    """Change the process working directory.

    Args:
        root: Current root; relative targets are resolved against it
        target: Directory to change to

    Returns:
        The new root (absolute path of the process working directory)

    Raises:
        FileNotFoundError: If target does not exist
        NotADirectoryError: If target is not a directory
        OSError: For any other failure (e.g. permission denied)
    """
    path = resolve_against(root, target)
    os.chdir(path)
    new_root = Path.cwd()
    logger.debug("Changed directory to %s", new_root)
    return new_root
