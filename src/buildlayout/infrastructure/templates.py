"""Jinja2 template loading with per-workspace override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

OVERRIDE_DIR = ".buildlayout/templates"

_KOTLIN_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "$": "\\$"})


def kotlin_string(value: object) -> str:
    """Escape *value* for a double-quoted Kotlin string literal."""
    text = str(value).replace("\r", "").replace("\n", " ")
    return text.translate(_KOTLIN_ESCAPES)


def kotlin_comment(value: object) -> str:
    """Flatten *value* onto one line so it cannot end a line comment early."""
    return " ".join(str(value).split())


def build_template_environment(group: str, *, workspace_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Overrides are read from ``.buildlayout/templates/<group>/`` or the flat
    ``.buildlayout/templates/`` directory inside the workspace. The
    ``kotlin_string`` and ``kotlin_comment`` filters are always available.
    """
    loaders: list[BaseLoader] = []
    if workspace_root is not None:
        template_root = workspace_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("buildlayout", f"templates/{group}"))
    env = Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)
    env.filters["kotlin_string"] = kotlin_string
    env.filters["kotlin_comment"] = kotlin_comment
    return env
