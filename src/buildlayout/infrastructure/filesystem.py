"""Filesystem operations for the build output root.

The only mutation in the project lives here: recursive deletion for the
clean action. Errors from the OS are never wrapped or retried.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any


def remove_tree(path: Path) -> bool:
    """Delete *path* and everything under it.

    Returns False when *path* did not exist (nothing to do). Symlinks and
    plain files are unlinked; the target of a symlink is left alone.

    Raises:
        OSError: permission denied, busy file, etc. Partial deletion is not
            rolled back.
    """
    if path.is_symlink() or path.is_file():
        path.unlink()
        return True
    if not path.exists():
        return False
    shutil.rmtree(path)
    return True


def summarize_tree(path: Path) -> dict[str, Any]:
    """Count what :func:`remove_tree` would delete, without deleting it."""
    if path.is_symlink() or path.is_file():
        return {"exists": True, "files": 1, "directories": 0, "bytes": path.lstat().st_size}
    if not path.exists():
        return {"exists": False, "files": 0, "directories": 0, "bytes": 0}

    files = 0
    directories = 0
    size = 0
    for entry in path.rglob("*"):
        if entry.is_dir() and not entry.is_symlink():
            directories += 1
        else:
            files += 1
            size += entry.lstat().st_size
    return {"exists": True, "files": files, "directories": directories, "bytes": size}
