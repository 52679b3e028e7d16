"""Path resolution relative to an explicit root."""

import os
from pathlib import Path


def resolve_against(root: Path, target: str | Path) -> Path:
    """Resolve target relative to root.

    Args:
        root: Directory that relative targets are taken from
        target: Absolute or relative path (~ is expanded)

    Returns:
        Absolute, normalized path. Symlinks are not resolved, so ".." is
        applied lexically.
    """
    path = Path(target).expanduser()
    if not path.is_absolute():
        path = root / path
    return Path(os.path.abspath(path))
