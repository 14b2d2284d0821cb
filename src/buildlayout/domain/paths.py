"""Output directory computation.

Pure path arithmetic: nothing here touches the filesystem. Every project's
output directory is ``root / project_name`` and must stay inside ``root``.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath, PureWindowsPath

from buildlayout.domain.errors import ConfigurationError


def validate_project_name(project_name: str) -> None:
    """Reject names that are empty, absolute, contain ``..``, or have ``.``/empty segments."""
    if not project_name or not project_name.strip():
        raise ConfigurationError("Project name must be non-empty")

    if PurePosixPath(project_name).is_absolute() or PureWindowsPath(project_name).anchor:
        msg = f"Project name must be relative: {project_name!r}"
        raise ConfigurationError(msg)

    if ".." in project_name:
        msg = f"Project name contains a path-traversal sequence: {project_name!r}"
        raise ConfigurationError(msg)

    segments = project_name.replace("\\", "/").split("/")
    for segment in segments:
        if segment in ("", "."):
            msg = f"Project name has an empty or '.' segment: {project_name!r}"
            raise ConfigurationError(msg)


def validate_root_output(root: Path) -> None:
    """The output root must be absolute and must not be a filesystem anchor."""
    if not root.is_absolute():
        msg = f"Output root must be an absolute path: {root}"
        raise ConfigurationError(msg)
    if root == Path(root.anchor):
        msg = f"Refusing to use a filesystem root as the output root: {root}"
        raise ConfigurationError(msg)


def output_directory(root: Path, project_name: str) -> Path:
    """Return ``root / project_name`` after validating the name."""
    validate_project_name(project_name)
    result = root / project_name
    if not result.is_relative_to(root):
        msg = f"Path escapes output root: {result}"
        raise ConfigurationError(msg)
    return result
